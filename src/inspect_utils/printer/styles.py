# topmark:header:start
#
#   project      : inspect-utils
#   file         : styles.py
#   file_relpath : src/inspect_utils/printer/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Native style categories of the display printer.

The printer owns colors. Callers never pick a color directly: they pick a
semantic style name (see `inspect_utils.core.style_names`), which maps onto one of
the categories below, and the printer decides how the category looks.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `HostStyle`: `str, Enum` whose value is the category name and which carries
      the colorizer applied when color output is enabled.

Design:
    `HostStyle` keeps `_value_` as the plain `str` and stores the color function
    separately (`_color`), so members hash, compare and `repr` like ordinary
    enum members.

    The colorizers come from a dedicated yachalk factory fixed to 16-color ANSI
    rather than the global `chalk`, whose mode follows whether stdout is a
    terminal. Whether to color at all is decided once, by the printer
    (`PrinterSettings.colors`); a colorizer always emits escape codes.

Example:
    ```python
    from inspect_utils.printer.styles import HostStyle

    print(HostStyle.SPECIAL.value)           # 'special'
    print(HostStyle.SPECIAL.color("Point"))  # cyan "Point"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Protocol

from yachalk import ChalkFactory, ColorMode

_ANSI: Final[ChalkFactory] = ChalkFactory(ColorMode.Basic16)


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic list
    of arguments and a `sep` keyword. The printer always calls colorizers with a
    single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


class HostStyle(str, Enum):
    """Printer style categories, each with the colorizer used to render it."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> HostStyle:
        """Construct a style member.

        Args:
            text (str): The category name (stored in `_value_`).
            color (Colorizer): Callable used to colorize text of this category.

        Returns:
            HostStyle: The newly constructed enum member.
        """
        obj: HostStyle = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    SPECIAL = ("special", _ANSI.cyan)
    MODULE = ("module", _ANSI.underline)
    NUMBER = ("number", _ANSI.yellow)
    UNDEFINED = ("undefined", _ANSI.gray)
    NULL = ("null", _ANSI.bold)
    STRING = ("string", _ANSI.green)
    REGEXP = ("regexp", _ANSI.red)
    DATE = ("date", _ANSI.magenta)

    @property
    def value(self) -> str:
        """Return the category name.

        Returns:
            str: The string value associated with this member.
        """
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this category.

        Returns:
            Colorizer: A callable that decorates strings for display.
        """
        return self._color

    @classmethod
    def parse(cls, name: str) -> HostStyle | None:
        """Return the member whose category name is `name` (case-insensitive), if any."""
        token = name.strip().lower()
        for member in cls:
            if member.value == token:
                return member
        return None
