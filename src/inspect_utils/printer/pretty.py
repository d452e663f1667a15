# topmark:header:start
#
#   project      : inspect-utils
#   file         : pretty.py
#   file_relpath : src/inspect_utils/printer/pretty.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The display printer: stdlib `pprint` augmented with a custom-inspection hook.

Any object whose type defines ``__display__(self, ctx)`` is *displayable*. When the
printer meets one, it calls the hook with an `InspectContext` and uses what the
hook returns:

- a `str` is the final text;
- another displayable is displayed in turn, with the same context;
- anything else is formatted by the printer in place of the original value.

Layout stays pprint's job (width checks, depth limits, recursion detection,
string chunking). Two things are added on top of it:

- `list`, `tuple` and `dict` break into *blocks* when they do not fit: the
  opening bracket ends the first line, each item sits on its own line indented
  by ``indent`` spaces, and the closing bracket is alone on the last line. Items
  therefore never depend on the column where the container started, which lets
  a display swap the brackets for its own delimiters.
- A displayable is first rendered flat. If that does not fit the remaining
  width, it is rendered again at the remaining width and its continuation lines
  are shifted to the current indentation.

Example:
    ```python
    from inspect_utils import display_tuple
    from inspect_utils.printer import pformat

    class Point:
        def __init__(self, x, y):
            self.x, self.y = x, y

        def __display__(self, ctx):
            return display_tuple("Point", [self.x, self.y])

    pformat(Point(1, 2))  # 'Point(1, 2)'
    ```
"""

from __future__ import annotations

import io
import pprint as _pprint
import re
import sys
from dataclasses import replace
from typing import IO, TYPE_CHECKING, Any, ClassVar, Final

from inspect_utils.config.logging import get_logger
from inspect_utils.config.settings import PrinterSettings
from inspect_utils.constants import DEFAULT_INDENT, DEFAULT_WIDTH, DISPLAY_HOOK

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inspect_utils.config.logging import InspectUtilsLogger
    from inspect_utils.printer.styles import HostStyle

logger: InspectUtilsLogger = get_logger(__name__)

# Width used for flat (single-line) renders.
_FLAT_WIDTH: Final[int] = sys.maxsize

# Marks an option that was not passed, where None is a meaningful value.
_UNSET: Final[Any] = object()

_ANSI_ESCAPE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


def is_displayable(value: object) -> bool:
    """Return True if `value` implements the ``__display__`` hook.

    Classes themselves are never displayable, even when they define the hook.
    """
    if isinstance(value, type):
        return False
    return callable(getattr(type(value), DISPLAY_HOOK, None))


def visible_width(text: str) -> int:
    """Return the widest line of `text`, ignoring ANSI color escapes."""
    return max(len(_ANSI_ESCAPE.sub("", line)) for line in text.split("\n"))


def _recursion(value: object) -> str:
    return f"<Recursion on {type(value).__name__} with id={id(value)}>"


class InspectContext:
    """What a ``__display__`` hook receives from the printer.

    Attributes:
        nested (bool): Whether the value is displayed inside another displayed value.
    """

    __slots__ = ("_context", "_level", "_printer", "nested")

    def __init__(
        self,
        printer: DisplayPrettyPrinter,
        *,
        nested: bool,
        context: dict[int, int],
        level: int,
    ) -> None:
        self._printer = printer
        self._context = context
        self._level = level
        self.nested = nested

    def __repr__(self) -> str:
        return (
            f"InspectContext(nested={self.nested}, width={self.width}, "
            f"depth={self.depth}, colors={self.colors})"
        )

    @property
    def width(self) -> int:
        """Width available to the value being displayed."""
        return self._printer.width

    @property
    def depth(self) -> int | None:
        """The printer's depth limit."""
        return self._printer.depth

    @property
    def colors(self) -> bool:
        """Whether `stylize` emits ANSI colors."""
        return self._printer.colors

    def stylize(self, text: str, style: HostStyle) -> str:
        """Apply a printer style to `text` (unchanged when colors are off)."""
        return self._printer.stylize(text, style)

    def inspect(self, value: object, *, nested: bool | None = None) -> str:
        """Render `value` through the printer.

        Args:
            value (object): Any value, displayable or not.
            nested (bool | None): Nesting flag to render with; defaults to `self.nested`.

        Returns:
            str: The rendered text, laid out from column zero.
        """
        return self._printer.render_value(
            value,
            nested=self.nested if nested is None else nested,
            context=self._context,
            level=self._level,
        )


class DisplayPrettyPrinter(_pprint.PrettyPrinter):
    """A `pprint.PrettyPrinter` that honors the ``__display__`` hook.

    Args:
        width (int): Target maximum line width.
        indent (int): Spaces added per block nesting level.
        depth (int | None): Maximum nesting depth, or None for unlimited.
        colors (bool): Whether `stylize` emits ANSI colors.
        nested (bool): Nesting flag handed to the hooks this printer calls.
        stream (IO[str] | None): Output stream for `pprint`; defaults to stdout.
    """

    _dispatch: ClassVar[dict[Any, Any]] = dict(_pprint.PrettyPrinter._dispatch)  # type: ignore[attr-defined]

    def __init__(
        self,
        *,
        width: int = DEFAULT_WIDTH,
        indent: int = DEFAULT_INDENT,
        depth: int | None = None,
        colors: bool = False,
        nested: bool = False,
        stream: IO[str] | None = None,
    ) -> None:
        super().__init__(indent=indent, width=width, depth=depth, stream=stream, sort_dicts=False)
        self._colors = colors
        self._nested = nested

    @classmethod
    def from_settings(
        cls,
        settings: PrinterSettings,
        *,
        colors: bool | None = None,
        stream: IO[str] | None = None,
    ) -> DisplayPrettyPrinter:
        """Create a printer from resolved settings."""
        return cls(
            width=settings.width,
            indent=settings.indent,
            depth=settings.depth,
            colors=settings.colors if colors is None else colors,
            stream=stream,
        )

    @property
    def width(self) -> int:
        """Target maximum line width."""
        return self._width

    @property
    def depth(self) -> int | None:
        """Maximum nesting depth, or None."""
        return self._depth

    @property
    def colors(self) -> bool:
        """Whether `stylize` emits ANSI colors."""
        return self._colors

    def derive(self, *, width: int | None = None, nested: bool | None = None) -> DisplayPrettyPrinter:
        """Return a printer sharing this one's options, with `width`/`nested` replaced."""
        return type(self)(
            width=self._width if width is None else width,
            indent=self._indent_per_level,
            depth=self._depth,
            colors=self._colors,
            nested=self._nested if nested is None else nested,
            stream=self._stream,
        )

    def stylize(self, text: str, style: HostStyle) -> str:
        """Apply `style` to `text` when colors are enabled."""
        if not self._colors:
            return text
        return style.color(text)

    def render_value(
        self,
        value: object,
        *,
        nested: bool,
        context: dict[int, int],
        level: int,
    ) -> str:
        """Render `value` from column zero, sharing recursion state with the caller."""
        printer = self if nested == self._nested else self.derive(nested=nested)
        sio = io.StringIO()
        printer._format(value, sio, 0, 0, context, level)
        return sio.getvalue()

    # --- pprint overrides ---

    def format(
        self,
        object: object,  # noqa: A002
        context: dict[int, int],
        maxlevels: int | None,
        level: int,
    ) -> tuple[str, bool, bool]:
        """Return ``(repr, readable, recursive)``; displayables render flat."""
        if is_displayable(object):
            if id(object) in context:
                return _recursion(object), False, True
            flat = self if self._width == _FLAT_WIDTH else self.derive(width=_FLAT_WIDTH)
            return flat._display(object, context, level), False, False
        return super().format(object, context, maxlevels, level)

    def _format(
        self,
        object: object,  # noqa: A002
        stream: IO[str],
        indent: int,
        allowance: int,
        context: dict[int, int],
        level: int,
    ) -> None:
        if not is_displayable(object):
            super()._format(object, stream, indent, allowance, context, level)  # type: ignore[misc]
            return
        if id(object) in context:
            stream.write(_recursion(object))
            return
        rep: str = self._repr(object, context, level)  # type: ignore[attr-defined]
        if visible_width(rep) > self._width - indent - allowance:
            narrow = self.derive(width=max(self._width - indent, 1))
            rep = narrow._display(object, context, level)
        if indent:
            rep = rep.replace("\n", "\n" + " " * indent)
        stream.write(rep)

    def _display(self, value: object, context: dict[int, int], level: int) -> str:
        """Call the hook of `value` and turn its result into text."""
        objid = id(value)
        context[objid] = 1
        try:
            logger.trace(
                "display %s (nested=%s, width=%s)",
                type(value).__qualname__,
                self._nested,
                "flat" if self._width == _FLAT_WIDTH else self._width,
            )
            ctx = InspectContext(self, nested=self._nested, context=context, level=level + 1)
            result: object = getattr(value, DISPLAY_HOOK)(ctx)
            if isinstance(result, str):
                return result
            return self.render_value(result, nested=self._nested, context=context, level=level)
        finally:
            del context[objid]

    # --- block layouts ---

    def _format_block(
        self,
        items: Sequence[object],
        open: str,  # noqa: A002
        close: str,
        stream: IO[str],
        indent: int,
        context: dict[int, int],
        level: int,
        *,
        trailing_comma: bool = False,
    ) -> None:
        write = stream.write
        if not items:
            write(open + close)
            return
        write(open)
        inner = indent + self._indent_per_level
        last_index = len(items) - 1
        for index, item in enumerate(items):
            write("\n" + " " * inner)
            self._format(item, stream, inner, 0 if index == last_index else 1, context, level)
            if index != last_index or trailing_comma:
                write(",")
        write("\n" + " " * indent + close)

    def _pprint_list(self, object, stream, indent, allowance, context, level):  # noqa: A002
        self._format_block(object, "[", "]", stream, indent, context, level)

    _dispatch[list.__repr__] = _pprint_list

    def _pprint_tuple(self, object, stream, indent, allowance, context, level):  # noqa: A002
        self._format_block(
            object, "(", ")", stream, indent, context, level, trailing_comma=len(object) == 1
        )

    _dispatch[tuple.__repr__] = _pprint_tuple

    def _pprint_dict(self, object, stream, indent, allowance, context, level):  # noqa: A002
        write = stream.write
        if not object:
            write("{}")
            return
        write("{")
        inner = indent + self._indent_per_level
        items = list(object.items())
        last_index = len(items) - 1
        for index, (key, value) in enumerate(items):
            key_rep: str = self._repr(key, context, level)
            write("\n" + " " * inner + key_rep + ": ")
            trailing = 0 if index == last_index else 1
            if self._is_block(value):
                # Blocks indent from the line start; the key only narrows the first line.
                self._format(value, stream, inner, trailing + len(key_rep) + 2, context, level)
            else:
                self._format(value, stream, inner + len(key_rep) + 2, trailing, context, level)
            if index != last_index:
                write(",")
        write("\n" + " " * indent + "}")

    _dispatch[dict.__repr__] = _pprint_dict

    _block_layouts: ClassVar[frozenset[Any]] = frozenset({_pprint_list, _pprint_tuple, _pprint_dict})

    def _is_block(self, value: object) -> bool:
        return is_displayable(value) or self._dispatch.get(type(value).__repr__) in self._block_layouts


def create_printer(
    *,
    settings: PrinterSettings | None = None,
    width: int | None = None,
    indent: int | None = None,
    depth: int | None = _UNSET,
    colors: bool | None = None,
    stream: IO[str] | None = None,
) -> DisplayPrettyPrinter:
    """Create a printer from settings (environment by default) and explicit overrides.

    Args:
        settings (PrinterSettings | None): Base settings; defaults to
            `PrinterSettings.from_env()`.
        width (int | None): Overrides the target line width.
        indent (int | None): Overrides the block indentation.
        depth (int | None): Overrides the depth limit; None removes it. When
            omitted, the limit from `settings` is kept.
        colors (bool | None): Forces colors on or off.
        stream (IO[str] | None): Output stream for `DisplayPrettyPrinter.pprint`.

    Returns:
        DisplayPrettyPrinter: The configured printer.

    Raises:
        SettingsError: If the resulting settings are invalid.
    """
    resolved = (settings or PrinterSettings.from_env()).with_overrides(
        width=width, indent=indent
    )
    if depth is not _UNSET:
        resolved = replace(resolved, depth=depth)
    return DisplayPrettyPrinter.from_settings(resolved, colors=colors, stream=stream)


def pformat(value: object, **options: Any) -> str:
    """Render `value` to text; see `create_printer` for the accepted options."""
    return create_printer(**options).pformat(value)


def pprint(value: object, *, stream: IO[str] | None = None, **options: Any) -> None:
    """Print `value` to `stream` (stdout by default); see `create_printer` for options."""
    create_printer(stream=stream, **options).pprint(value)
