from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from .grammar import tokenize
from .loader import DEFAULT_ENCODING, read_text
from .reducer import DEFAULT_SECTION, reduce_tree

logger = logging.getLogger(__name__)

IniMapping = dict[str, dict[str, str]]


class INIParser:
    """Parsed INI document.

    Build one with :meth:`from_string` or :meth:`from_file`; the result is
    available as :attr:`output` or, for handing off ownership, through
    :meth:`into_inner`.

    >>> ini = INIParser.from_string("[user]\\nname = John Doe\\n")
    >>> ini["user"]["name"]
    'John Doe'
    """

    def __init__(self, output: IniMapping) -> None:
        self.output = output

    @classmethod
    def from_string(
        cls, content: str, *, default_section: str = DEFAULT_SECTION
    ) -> INIParser:
        output = reduce_tree(tokenize(content), default_section=default_section)
        logger.debug("Parsed %d section(s)", len(output))
        return cls(output)

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str],
        *,
        encoding: str = DEFAULT_ENCODING,
        default_section: str = DEFAULT_SECTION,
    ) -> INIParser:
        content = read_text(path, encoding=encoding)
        return cls.from_string(content, default_section=default_section)

    def into_inner(self) -> IniMapping:
        return self.output

    def sections(self) -> list[str]:
        return list(self.output)

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.output.get(section, {}).get(key, default)

    def __getitem__(self, section: str) -> dict[str, str]:
        return self.output[section]

    def __contains__(self, section: object) -> bool:
        return section in self.output

    def __iter__(self) -> Iterator[str]:
        return iter(self.output)

    def __len__(self) -> int:
        return len(self.output)

    def __repr__(self) -> str:
        return f"INIParser(output={self.output!r})"


def parse_from_text(content: str, *, default_section: str = DEFAULT_SECTION) -> IniMapping:
    """Parse an in-memory INI document."""
    return INIParser.from_string(content, default_section=default_section).into_inner()


def parse_from_path(
    path: str | os.PathLike[str],
    *,
    encoding: str = DEFAULT_ENCODING,
    default_section: str = DEFAULT_SECTION,
) -> IniMapping:
    """Read ``path`` and parse it.

    Raises :class:`~dotini.errors.FileReadError` when the file cannot be
    read and :class:`~dotini.errors.UnsuccessfulParseError` when its
    contents are not valid INI.
    """
    return INIParser.from_file(
        path, encoding=encoding, default_section=default_section
    ).into_inner()


def into_mapping(parsed: INIParser) -> IniMapping:
    """Return the mapping owned by ``parsed``."""
    return parsed.into_inner()
