# topmark:header:start
#
#   project      : inspect-utils
#   file         : test_stylized.py
#   file_relpath : tests/core/test_stylized.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the formatting tree: emptiness, rendering and splicing."""

from __future__ import annotations

import pytest

from inspect_utils.core.errors import StyleNameError
from inspect_utils.core.nesting import Nesting
from inspect_utils.core.stylized import (
    StringifyOptions,
    StylizedInspect,
    StylizedText,
    braced,
    deferred_inspect,
    group,
    is_stylized,
    render,
    splice_delimiters,
    text,
)
from inspect_utils.printer.styles import HostStyle


def tagging_options(nesting: Nesting | None = None) -> StringifyOptions:
    """Options that tag styled text and render values with `repr`."""
    return StringifyOptions(
        stylize=lambda value, style: f"<{style.value}>{value}</>",
        inspect=repr,
        nesting=nesting or Nesting(),
    )


def test_text_resolves_semantic_style() -> None:
    """A semantic style name is stored as its printer category."""
    node = text("Point", "ident")
    assert node == StylizedText("Point", HostStyle.SPECIAL)
    assert render(node, tagging_options()) == "<special>Point</>"


def test_text_without_style_renders_raw() -> None:
    assert render(text("plain"), tagging_options()) == "plain"


def test_text_rejects_unknown_style() -> None:
    with pytest.raises(StyleNameError, match="Unknown style name: 'shiny'"):
        text("x", "shiny")


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        (text(""), True),
        (text("a"), False),
        (group(), True),
        (group(text(""), group(text(""))), True),
        (group(text(""), text("b")), False),
        (deferred_inspect("", nested=False), False),
        (braced(text("")), True),
        (braced(text(""), text("("), text(")")), True),
        (braced(text("x")), False),
    ],
)
def test_is_empty(node: object, expected: bool) -> None:
    """Emptiness is decided from the node alone."""
    assert node.is_empty is expected  # type: ignore[attr-defined]


def test_fragment_concatenates_without_separator() -> None:
    node = group(text("a"), text("b", "annotation"), text("c"))
    assert render(node, tagging_options()) == "a<undefined>b</>c"


def test_braced_without_delimiters_is_pass_through() -> None:
    assert render(braced(text("[1, 2]")), tagging_options()) == "[1, 2]"


def test_braced_replaces_rendered_brackets() -> None:
    node = braced(deferred_inspect([1, 2], nested=True), text("("), text(")"))
    assert render(node, tagging_options()) == "(1, 2)"


def test_inspect_installs_captured_nesting() -> None:
    """Each inspection runs with its own captured flag, restored afterwards."""
    nesting = Nesting(False)
    seen: list[bool] = []

    def inspect(value: object) -> str:
        seen.append(nesting.nested)
        return str(value)

    options = StringifyOptions(stylize=lambda value, style: value, inspect=inspect, nesting=nesting)
    node = group(deferred_inspect(1, nested=True), deferred_inspect(2, nested=False))

    assert render(node, options) == "12"
    assert seen == [True, False]
    assert nesting.nested is False


def test_inspect_errors_propagate_and_restore_nesting() -> None:
    nesting = Nesting(False)

    def inspect(value: object) -> str:
        raise RuntimeError("broken display")

    options = StringifyOptions(stylize=lambda value, style: value, inspect=inspect, nesting=nesting)
    with pytest.raises(RuntimeError, match="broken display"):
        render(deferred_inspect(object(), nested=True), options)
    assert nesting.nested is False


def test_inspect_nodes_compare_by_identity() -> None:
    value = [1]
    assert deferred_inspect(value, nested=True) != deferred_inspect(value, nested=True)
    assert isinstance(deferred_inspect(value, nested=True), StylizedInspect)


def test_is_stylized() -> None:
    assert is_stylized(text("a"))
    assert is_stylized(group())
    assert not is_stylized("a")
    assert not is_stylized(None)


@pytest.mark.parametrize(
    ("rendered", "expected"),
    [
        ("[1, 2]", "(1, 2)"),
        ("[\n  1,\n  2\n]", "(\n  1,\n  2\n)"),
        ("{ 'a': 1 }", "('a': 1)"),
        ("[]", "()"),
        ("[ ]", "()"),
        ("[1, 2)", "(1, 2)"),
    ],
)
def test_splice_replaces_outer_runs(rendered: str, expected: str) -> None:
    assert splice_delimiters(rendered, "(", ")") == expected


@pytest.mark.parametrize("rendered", ["42", "'word'", "[1, 2", "1, 2]", ""])
def test_splice_passes_unbracketed_text_through(rendered: str) -> None:
    assert splice_delimiters(rendered, "<", ">") == f"<{rendered}>"


def test_splice_keeps_inner_brackets() -> None:
    assert splice_delimiters("[[1], [2]]", "(", ")") == "([1], [2])"
