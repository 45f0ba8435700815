from __future__ import annotations

from lark import Token, Tree

from .errors import MissingCaptureError, UnreachableError

DEFAULT_SECTION = "untagged"

_END_MARKERS = frozenset({"$END", "EOI"})


def _section_name(node: Tree) -> str:
    if not node.children or node.children[0] is None:
        raise MissingCaptureError("section")
    return str(node.children[0])


def _property_pair(node: Tree) -> tuple[str, str]:
    # the value slot is always present; it holds None for ``key =``
    if len(node.children) < 2 or node.children[0] is None:
        raise MissingCaptureError("property")
    name, value = node.children[0], node.children[1]
    return str(name), "" if value is None else str(value)


def reduce_tree(
    tree: Tree, *, default_section: str = DEFAULT_SECTION
) -> dict[str, dict[str, str]]:
    """Fold a parse tree into ``section -> {key: value}``.

    Properties before the first header go to ``default_section``.  Repeated
    headers share one mapping and later keys overwrite earlier ones.  A
    header without properties leaves no entry behind.
    """
    if not isinstance(tree, Tree) or tree.data != "start":
        raise UnreachableError(tree)

    output: dict[str, dict[str, str]] = {}
    current_section = default_section

    for node in tree.children:
        if isinstance(node, Tree) and node.data == "section":
            current_section = _section_name(node)
        elif isinstance(node, Tree) and node.data == "property":
            name, value = _property_pair(node)
            output.setdefault(current_section, {})[name] = value
        elif isinstance(node, Token) and node.type in _END_MARKERS:
            continue
        else:
            raise UnreachableError(node)
    return output
