# topmark:header:start
#
#   project      : inspect-utils
#   file         : errors.py
#   file_relpath : src/inspect_utils/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by inspect-utils.

Only configuration problems are reported by the library itself, and always
synchronously at the call that received the bad input. Errors raised while a
value renders itself (its own ``__display__`` hook or a format callback) are never
wrapped: they reach the caller of ``pformat``/``pprint`` unchanged.
"""

from __future__ import annotations


class InspectUtilsError(Exception):
    """Base class for all inspect-utils errors."""


class DisplayConfigError(InspectUtilsError, ValueError):
    """A builder or style received input it cannot interpret."""


class DisplayArgumentError(DisplayConfigError):
    """The arguments passed to `display()` do not match any recognized shape.

    Attributes:
        shape (tuple[str, ...]): Type names of the positional arguments received.
    """

    def __init__(self, shape: tuple[str, ...], reason: str | None = None) -> None:
        self.shape = shape
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Invalid arguments to display: ({', '.join(shape)}){detail}")


class StyleNameError(DisplayConfigError):
    """A style name is neither a semantic style nor a known host style.

    Attributes:
        style (str): The rejected style name.
    """

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(f"Unknown style name: {style!r}")


class SettingsError(InspectUtilsError, ValueError):
    """Printer settings are invalid (from arguments, environment, or TOML)."""
