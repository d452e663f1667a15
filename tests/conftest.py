# topmark:header:start
#
#   project      : inspect-utils
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the inspect-utils test suite.

Sets up TRACE logging for the run and isolates every test from the developer's
shell: `INSPECT_UTILS_*` variables are removed and colors are disabled through
``NO_COLOR`` (tests that need colors request them explicitly).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from inspect_utils.config import logging
from inspect_utils.printer.pretty import pformat

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

_ISOLATED_ENV: tuple[str, ...] = (
    "INSPECT_UTILS_LOG_LEVEL",
    "INSPECT_UTILS_WIDTH",
    "INSPECT_UTILS_INDENT",
    "INSPECT_UTILS_DEPTH",
    "INSPECT_UTILS_COLOR",
    "INSPECT_UTILS_DEV",
    "FORCE_COLOR",
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def render(value: object, *, width: int = 80, **options: Any) -> str:
    """Render `value` without colors, at `width` columns."""
    return pformat(value, width=width, colors=False, **options)


class Inspected:
    """A value that displays as the display it wraps."""

    def __init__(self, display: object) -> None:
        self.display = display

    def __display__(self, ctx: object) -> object:
        return self.display


def render_display(display: object, *, width: int = 80) -> str:
    """Render `display` the way a class returning it from its hook would be."""
    return render(Inspected(display), width=width)


def lines(*parts: str) -> str:
    """Join expected output lines."""
    return "\n".join(parts)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the log level to TRACE for the whole run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
