# topmark:header:start
#
#   project      : inspect-utils
#   file         : style_names.py
#   file_relpath : src/inspect_utils/core/style_names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic style names and their mapping onto printer style categories.

Displays describe *what* a piece of text is (an identifier, a path, a subtle
annotation) and leave *how it looks* to the printer. Each semantic name maps onto
one `HostStyle`; several names deliberately share a category.

| name          | host category | meaning                                                    |
|---------------|---------------|------------------------------------------------------------|
| `ident`       | `special`     | the name of a structure (class name, function name, ...)   |
| `path`        | `module`      | the physical location of a value (a file path)             |
| `primitive`   | `number`      | a wrapped inner number or boolean                          |
| `label`       | `undefined`   | labels for values (`default=` in `default=1`)              |
| `annotation`  | `undefined`   | annotations shown more subtly than the value they annotate |
| `punctuation` | `undefined`   | punctuation kept subtle to reduce visual noise             |
| `plain`       | `null`        | plain text                                                 |
| `literal`     | `string`      | a wrapped inner string                                     |
| `pattern`     | `regexp`      | pattern-like values (regular expressions, file globs)      |
| `builtin`     | `date`        | a wrapped built-in value such as a date                    |
| `type`        | `date`        | type names, as distinct from class or function names      |

A native category can still be requested explicitly with a ``host:`` prefix,
e.g. ``"host:regexp"``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Literal, Union

from inspect_utils.constants import HOST_STYLE_PREFIX
from inspect_utils.core.errors import StyleNameError
from inspect_utils.printer.styles import HostStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

StyleName = Literal[
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
]

# A semantic name, a "host:<category>" string, or a category itself.
SpecifiedStyle = Union[StyleName, str, HostStyle]

STYLE_NAME_MAP: Final[Mapping[str, HostStyle]] = MappingProxyType(
    {
        "ident": HostStyle.SPECIAL,
        "path": HostStyle.MODULE,
        "primitive": HostStyle.NUMBER,
        "label": HostStyle.UNDEFINED,
        "annotation": HostStyle.UNDEFINED,
        "punctuation": HostStyle.UNDEFINED,
        "plain": HostStyle.NULL,
        "literal": HostStyle.STRING,
        "pattern": HostStyle.REGEXP,
        "builtin": HostStyle.DATE,
        "type": HostStyle.DATE,
    }
)

STYLE_NAMES: Final[tuple[str, ...]] = tuple(STYLE_NAME_MAP)


def to_host_style(style: SpecifiedStyle) -> HostStyle:
    """Resolve a semantic style name (or an explicit host category) to a `HostStyle`.

    Args:
        style (SpecifiedStyle): A semantic name such as ``"ident"``, a
            ``"host:<category>"`` string, or a `HostStyle` member.

    Returns:
        HostStyle: The printer category to render with.

    Raises:
        StyleNameError: If the name is not recognized.
    """
    if isinstance(style, HostStyle):
        return style
    if style.startswith(HOST_STYLE_PREFIX):
        host = HostStyle.parse(style[len(HOST_STYLE_PREFIX) :])
        if host is None:
            raise StyleNameError(style)
        return host
    try:
        return STYLE_NAME_MAP[style]
    except KeyError:
        raise StyleNameError(style) from None
