# topmark:header:start
#
#   project      : inspect-utils
#   file         : test_examples.py
#   file_relpath : tests/demo/test_examples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the README examples: each prints exactly what the README shows."""

from __future__ import annotations

import pytest

from inspect_utils.demo.examples import EXAMPLES, PlainPoint, get_example
from tests.conftest import render


def _outputs(name: str) -> list[str]:
    example = get_example(name)
    assert example is not None
    # Each value is rendered as soon as it is yielded, like the demo command does.
    return [render(value) for value in example.run()]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("struct", ["Point {'x': 1, 'y': 2}"]),
        ("tuple", ["SafeString('hello')"]),
        ("tuple-multiple", ["SafeString('hello', 'checked')"]),
        ("unit", ["CheckedString[unsafe]", "CheckedString('hello')"]),
        (
            "descriptions",
            ["Async[pending]", "Async[fulfilled](1)", "Async[rejected](ValueError('oh no'))"],
        ),
        (
            "annotations",
            ["Async[pending]", "Async(1 @fulfilled)", "Async(ValueError('oh no') @rejected)"],
        ),
        ("custom", ["Point(1,2)", "Line[(1,2) -> (3,4)]"]),
        ("declarative", ["Point {'x': 1, 'y': 2}"]),
    ],
)
def test_example_output(name: str, expected: list[str]) -> None:
    assert _outputs(name) == expected


def test_plain_example_uses_the_default_repr() -> None:
    (output,) = _outputs("plain")
    assert output.startswith(f"<{PlainPoint.__module__}.PlainPoint object at ")


def test_names_are_unique_and_ordered() -> None:
    assert list(EXAMPLES) == [
        "plain",
        "struct",
        "tuple",
        "tuple-multiple",
        "unit",
        "descriptions",
        "annotations",
        "custom",
        "declarative",
    ]
    assert all(example.name == name for name, example in EXAMPLES.items())


def test_unknown_example() -> None:
    assert get_example("nope") is None
