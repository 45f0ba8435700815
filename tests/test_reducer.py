from __future__ import annotations

import pytest
from lark import Token, Tree

from dotini.errors import InternalError, MissingCaptureError, UnreachableError
from dotini.reducer import DEFAULT_SECTION, reduce_tree


def _section(name):
    return Tree("section", [Token("SECTION_NAME", name)])


def _prop(key, value):
    val = None if value is None else Token("VALUE", value)
    return Tree("property", [Token("KEY", key), val])


def test_reduce_assigns_properties_to_current_section():
    tree = Tree("start", [_prop("a", "1"), _section("s"), _prop("b", "2")])
    assert reduce_tree(tree) == {DEFAULT_SECTION: {"a": "1"}, "s": {"b": "2"}}


def test_reduce_custom_default_section():
    tree = Tree("start", [_prop("a", "1")])
    assert reduce_tree(tree, default_section="root") == {"root": {"a": "1"}}


def test_reduce_missing_value_becomes_empty_string():
    assert reduce_tree(Tree("start", [_prop("a", None)])) == {DEFAULT_SECTION: {"a": ""}}


def test_reduce_ignores_end_marker():
    tree = Tree("start", [_section("s"), _prop("k", "v"), Token("$END", "")])
    assert reduce_tree(tree) == {"s": {"k": "v"}}


def test_reduce_header_without_properties_creates_nothing():
    assert reduce_tree(Tree("start", [_section("empty")])) == {}


@pytest.mark.parametrize(
    "node",
    [
        Tree("section", []),
        Tree("property", [Token("KEY", "k")]),
        Tree("property", [None, Token("VALUE", "v")]),
    ],
)
def test_reduce_missing_capture(node):
    with pytest.raises(MissingCaptureError) as excinfo:
        reduce_tree(Tree("start", [node]))
    assert excinfo.value.rule == node.data
    assert isinstance(excinfo.value, InternalError)


@pytest.mark.parametrize(
    "node",
    [Tree("comment", []), Token("KEY", "stray")],
)
def test_reduce_unexpected_node(node):
    with pytest.raises(UnreachableError) as excinfo:
        reduce_tree(Tree("start", [node]))
    assert excinfo.value.node == node


def test_reduce_rejects_foreign_root():
    with pytest.raises(UnreachableError):
        reduce_tree(Tree("document", []))
