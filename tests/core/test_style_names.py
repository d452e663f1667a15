# topmark:header:start
#
#   project      : inspect-utils
#   file         : test_style_names.py
#   file_relpath : tests/core/test_style_names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for semantic style names."""

from __future__ import annotations

import pytest

from inspect_utils.core.errors import DisplayConfigError, StyleNameError
from inspect_utils.core.style_names import STYLE_NAME_MAP, STYLE_NAMES, to_host_style
from inspect_utils.printer.styles import HostStyle


def test_style_names_are_the_documented_vocabulary() -> None:
    assert STYLE_NAMES == (
        "ident",
        "path",
        "primitive",
        "label",
        "annotation",
        "punctuation",
        "plain",
        "literal",
        "pattern",
        "builtin",
        "type",
    )


@pytest.mark.parametrize(
    ("name", "host"),
    [
        ("ident", HostStyle.SPECIAL),
        ("path", HostStyle.MODULE),
        ("primitive", HostStyle.NUMBER),
        ("label", HostStyle.UNDEFINED),
        ("annotation", HostStyle.UNDEFINED),
        ("punctuation", HostStyle.UNDEFINED),
        ("plain", HostStyle.NULL),
        ("literal", HostStyle.STRING),
        ("pattern", HostStyle.REGEXP),
        ("builtin", HostStyle.DATE),
        ("type", HostStyle.DATE),
    ],
)
def test_semantic_names_map_to_host_categories(name: str, host: HostStyle) -> None:
    assert to_host_style(name) is host
    assert STYLE_NAME_MAP[name] is host


def test_host_prefix_selects_native_category() -> None:
    assert to_host_style("host:regexp") is HostStyle.REGEXP
    assert to_host_style(HostStyle.NUMBER) is HostStyle.NUMBER


@pytest.mark.parametrize("bad", ["bogus", "host:bogus", "IDENT", ""])
def test_unknown_names_raise(bad: str) -> None:
    with pytest.raises(StyleNameError) as excinfo:
        to_host_style(bad)
    assert excinfo.value.style == bad
    assert isinstance(excinfo.value, DisplayConfigError)


def test_style_map_is_read_only() -> None:
    with pytest.raises(TypeError):
        STYLE_NAME_MAP["ident"] = HostStyle.NULL  # type: ignore[index]


def test_host_style_behaves_like_its_name() -> None:
    assert HostStyle.SPECIAL.value == "special"
    assert HostStyle.parse(" Date ") is HostStyle.DATE
    assert HostStyle.parse("nope") is None
    assert "x" in HostStyle.STRING.color("x")
