# topmark:header:start
#
#   project      : inspect-utils
#   file         : test_display_freeform.py
#   file_relpath : tests/display/test_display_freeform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the freeform `display` builder, its argument shapes and `Formatter`."""

from __future__ import annotations

import pytest

from inspect_utils import (
    DisplayArgumentError,
    DisplayOptions,
    compact,
    display,
    display_tuple,
)
from inspect_utils.core.display import Formatter
from inspect_utils.core.nesting import Nesting
from inspect_utils.demo.examples import CustomLine, CustomPoint
from tests.conftest import render, render_display


def _body(f: Formatter) -> object:
    return f.literal("body")


def test_custom_point() -> None:
    assert render(CustomPoint(1, 2)) == "Point(1,2)"


def test_custom_line_elides_compact_points() -> None:
    assert render(CustomLine(CustomPoint(1, 2), CustomPoint(3, 4))) == "Line[(1,2) -> (3,4)]"


def test_name_and_format() -> None:
    assert render_display(display("Name", _body)) == "Name(body)"


def test_format_only() -> None:
    assert render_display(display(_body)) == "body"


def test_name_only() -> None:
    assert render_display(display("Name")) == "Name"
    assert render_display(display("Name", None)) == "Name"
    assert render_display(display("Name", None, format=_body)) == "Name(body)"
    assert render_display(display(compact("Name"))) == "Name"


def test_name_format_and_annotation() -> None:
    rendered = render_display(display("Name", _body, DisplayOptions(annotation="ann")))
    assert rendered == "Name(body ann)"


def test_name_and_options() -> None:
    rendered = render_display(display("Name", DisplayOptions(format=_body, description="d")))
    assert rendered == "Name[d](body)"


def test_annotation_without_format() -> None:
    assert render_display(display("Name", None, DisplayOptions(annotation="a"))) == "Name( a)"


def test_keywords_only() -> None:
    assert render_display(display(name="X", description="d")) == "X[d]"
    assert render_display(display(format=_body)) == "body"


def test_keywords_fill_positional_gaps() -> None:
    assert render_display(display("Name", format=_body)) == "Name(body)"


def test_repr_renders_without_colors() -> None:
    assert repr(display_tuple("Hello", "world")) == "Hello('world')"


@pytest.mark.parametrize(
    ("args", "message"),
    [
        ((1,), "Invalid arguments to display: (int)"),
        (("N", "x"), "Invalid arguments to display: (str, str)"),
        (("N", 1, DisplayOptions()), "Invalid arguments to display: (str, int, DisplayOptions)"),
        ((_body, _body), "Invalid arguments to display: (function, function)"),
        (
            ("N", _body, None, DisplayOptions()),
            "Invalid arguments to display: (str, function, NoneType, DisplayOptions)",
        ),
    ],
)
def test_unrecognized_shapes(args: tuple[object, ...], message: str) -> None:
    with pytest.raises(DisplayArgumentError) as excinfo:
        display(*args)
    assert str(excinfo.value) == message


def test_field_given_twice() -> None:
    with pytest.raises(DisplayArgumentError, match="'name' given twice"):
        display("N", DisplayOptions(name="M"))
    with pytest.raises(DisplayArgumentError, match="'name' given twice"):
        display("N", name="M")
    with pytest.raises(DisplayArgumentError, match="'format' given twice"):
        display("N", _body, DisplayOptions(format=_body))


def test_nothing_to_display() -> None:
    with pytest.raises(DisplayArgumentError) as excinfo:
        display()
    assert "nothing to display" in str(excinfo.value)
    assert excinfo.value.shape == ()


def test_argument_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        display(1)


def test_format_errors_propagate_at_print_time() -> None:
    def failing(f: Formatter) -> object:
        raise RuntimeError("format failed")

    value = display("Name", failing)
    with pytest.raises(RuntimeError, match="format failed"):
        render(value)


class TestFormatter:
    def test_label_plain_name(self) -> None:
        nesting = Nesting(True)
        assert not Formatter(nesting).label("Name").is_empty

    def test_label_compact_name(self) -> None:
        assert not Formatter(Nesting(False)).label(compact("Name")).is_empty
        assert Formatter(Nesting(True)).label(compact("Name")).is_empty

    def test_nest_sets_and_restores_the_flag(self) -> None:
        nesting = Nesting(False)
        formatter = Formatter(nesting)
        seen: list[bool] = []

        formatter.nest(lambda f: seen.append(f.is_nested))

        assert seen == [True]
        assert formatter.is_nested is False

    def test_nest_restores_after_error(self) -> None:
        formatter = Formatter(Nesting(False))

        def failing(f: Formatter) -> object:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            formatter.nest(failing)
        assert formatter.is_nested is False

    def test_nested_label_inside_nest(self) -> None:
        formatter = Formatter(Nesting(False))
        node = formatter.nest(lambda f: f.label(compact("Name")))
        assert node.is_empty

    @pytest.mark.parametrize(
        "style",
        ["ident", "path", "primitive", "annotation", "punctuation", "plain", "literal",
         "pattern", "builtin", "type"],
    )
    def test_style_builders_keep_the_text(self, style: str) -> None:
        formatter = Formatter(Nesting(False))
        node = getattr(formatter, style)("value")
        assert render_display(display(lambda f: node)) == "value"
