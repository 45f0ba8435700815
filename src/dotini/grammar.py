"""INI grammar and tokenizer.

The grammar lives next to this module in ``ini.lark`` and is compiled once
into an LALR(1) parser with a contextual lexer.  The contextual lexer lets
keys and values share characters (``a = b = c`` gives key ``a`` and value
``b = c``) because only the terminals the parser expects at a given point
are tried.
"""
from __future__ import annotations

from functools import lru_cache
from importlib import resources

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput, UnexpectedToken

from .errors import UnsuccessfulParseError

GRAMMAR_FILE = "ini.lark"


@lru_cache(maxsize=None)
def get_parser() -> Lark:
    """Return the shared parser, building it on first use."""
    source = resources.files(__package__).joinpath(GRAMMAR_FILE).read_text(encoding="utf-8")
    return Lark(source, parser="lalr", lexer="contextual", maybe_placeholders=True)


def _position(exc: UnexpectedInput) -> tuple[int | None, int | None]:
    line = getattr(exc, "line", None)
    column = getattr(exc, "column", None)
    if not isinstance(line, int) or line < 1:
        return None, None
    if not isinstance(column, int) or column < 1:
        column = None
    return line, column


def _end_of_input(content: str) -> tuple[int, int, str]:
    """Line, column and caret excerpt just past the last character."""
    last_line = content.rsplit("\n", 1)[-1]
    line = content.count("\n") + 1
    column = len(last_line) + 1
    return line, column, f"{last_line}\n{' ' * len(last_line)}^\n"


def tokenize(content: str) -> Tree:
    """Parse ``content`` into a tree of ``section`` and ``property`` nodes.

    Comments and blank lines are dropped by the grammar.  Raises
    :class:`UnsuccessfulParseError` if any part of the document does not
    match; no partial tree is ever returned.
    """
    try:
        return get_parser().parse(content)
    except UnexpectedInput as exc:
        if isinstance(exc, UnexpectedToken) and exc.token.type == "$END":
            # lark borrows the position of the last real token
            line, column, context = _end_of_input(content)
        else:
            line, column = _position(exc)
            context = ""
            if line is not None and getattr(exc, "pos_in_stream", None) is not None:
                context = exc.get_context(content)
        raise UnsuccessfulParseError(
            str(exc), line=line, column=column, context=context
        ) from exc
