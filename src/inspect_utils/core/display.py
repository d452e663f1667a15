# topmark:header:start
#
#   project      : inspect-utils
#   file         : display.py
#   file_relpath : src/inspect_utils/core/display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display builders: struct, tuple, unit and freeform shapes.

Every builder returns a `DisplayValue`, an object the printer recognizes through
its ``__display__`` hook. Returning one from a class's own ``__display__`` is all
it takes to give that class a readable representation:

```python
from inspect_utils import display_struct

class Point:
    def __init__(self, x, y):
        self.x, self.y = x, y

    def __display__(self, ctx):
        return display_struct("Point", {"x": self.x, "y": self.y})

# Point {'x': 1, 'y': 2}
```

Naming policy (shared by all shapes):
    - A plain `str` name is always shown.
    - A `compact()` name is left out when the value is displayed inside another
      displayed value, unless a description is present.
    - A description renders right after the name, in brackets: ``Name[desc]``.
    - An annotation renders after the body, preceded by one space, and never
      affects whether the name is shown. It sits inside the parentheses of a
      tuple and after the closing brace of a struct.

The builders do no rendering themselves. The format callbacks run when the
printer calls ``__display__``; they return a tree of `Stylized` nodes which is
rendered right away with the printer's `stylize` and `inspect` collaborators.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

from inspect_utils.config.logging import get_logger
from inspect_utils.core.errors import DisplayArgumentError
from inspect_utils.core.fragments import StylizedResult, concat, prefix
from inspect_utils.core.nesting import Nesting
from inspect_utils.core.stylized import (
    StringifyOptions,
    Stylized,
    braced,
    deferred_inspect,
    group,
    render,
    text,
)
from inspect_utils.printer.pretty import pformat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inspect_utils.config.logging import InspectUtilsLogger
    from inspect_utils.core.style_names import SpecifiedStyle
    from inspect_utils.printer.pretty import InspectContext

logger: InspectUtilsLogger = get_logger(__name__)


@dataclass(frozen=True)
class CompactName:
    """A name that may be left out in nested contexts; see `compact`."""

    label: str


NameOption = Union[str, CompactName]
FormatFn = Callable[["Formatter"], StylizedResult]
Description = Union[str, int, float, bool, StylizedResult, FormatFn]
Annotation = Union[StylizedResult, FormatFn]


def compact(label: str) -> CompactName:
    """Mark `label` as compact.

    A compact name is one the reader does not need in order to understand the
    body. ``Type(StringOption default="hello")`` reads fine as
    ``StringOption default="hello"`` inside another value, so ``Type`` may go.
    ``Type[StringOption](default="hello")`` would turn into
    ``[StringOption](default="hello")``, which is why a description keeps the
    name in place.
    """
    return CompactName(label)


@dataclass(frozen=True)
class DisplayName(Stylized):
    """A resolved display name: the label, and its description if any."""

    label: str
    description: Stylized | None = None

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def stylized(self) -> Stylized:
        """The name as a node: ``label`` or ``label[description]``."""
        if self.description is None or self.description.is_empty:
            return text(self.label, "ident")
        return concat(text(self.label, "ident"), "[", self.description, "]")

    def stringify(self, options: StringifyOptions) -> str:
        return self.stylized.stringify(options)


class Formatter:
    """The toolkit handed to format callbacks.

    Besides `label`, `nest`, `inspect` and `stylize`, it has one builder per
    semantic style (`ident`, `path`, `literal`, ...), each returning a text node
    with that style.

    Args:
        nesting (Nesting): Nesting context of the display being built.
    """

    __slots__ = ("_nesting",)

    def __init__(self, nesting: Nesting) -> None:
        self._nesting = nesting

    @property
    def is_nested(self) -> bool:
        """Whether the display being built sits inside another displayed value."""
        return self._nesting.nested

    def label(self, name: NameOption, style: SpecifiedStyle = "ident") -> Stylized:
        """Render a name; a compact name renders nothing when nested."""
        if isinstance(name, CompactName):
            if self._nesting.nested:
                return group()
            return text(name.label, style)
        return text(name, style)

    def nest(self, *items: StylizedResult | FormatFn) -> Stylized:
        """Build `items` in a nested context and group them into one node.

        A single callable is called with this formatter while the nested flag is
        set, so everything it builds (labels, inspections) sees the value as
        nested. The previous flag is restored afterwards, even on error.
        """
        with self._nesting.scope(True):
            if len(items) == 1 and callable(items[0]):
                return concat(items[0](self))
            return concat(*items)  # type: ignore[arg-type]

    def inspect(self, value: object) -> Stylized:
        """Defer `value` to the printer; it renders as a nested value."""
        return self.nest(lambda f: deferred_inspect(value, nested=f.is_nested))

    def stylize(self, value: str, style: SpecifiedStyle) -> Stylized:
        """Render `value` with an arbitrary style name."""
        return text(value, style)

    def ident(self, value: str) -> Stylized:
        return text(value, "ident")

    def path(self, value: str) -> Stylized:
        return text(value, "path")

    def primitive(self, value: str) -> Stylized:
        return text(value, "primitive")

    def annotation(self, value: str) -> Stylized:
        return text(value, "annotation")

    def punctuation(self, value: str) -> Stylized:
        return text(value, "punctuation")

    def plain(self, value: str) -> Stylized:
        return text(value, "plain")

    def literal(self, value: str) -> Stylized:
        return text(value, "literal")

    def pattern(self, value: str) -> Stylized:
        return text(value, "pattern")

    def builtin(self, value: str) -> Stylized:
        return text(value, "builtin")

    def type(self, value: str) -> Stylized:
        return text(value, "type")


def format_description(description: str | int | float | bool | StylizedResult) -> Stylized:
    """Turn a non-callable description into a node."""
    if isinstance(description, str):
        return text(description, "annotation")
    if isinstance(description, (bool, int, float)):
        return text(str(description), "annotation")
    return concat(description)


def format_annotation(annotation: Annotation | None, formatter: Formatter) -> Stylized:
    """Turn an annotation into a node prefixed with one space (empty stays empty)."""
    if annotation is None:
        return group()
    if isinstance(annotation, str):
        return prefix(text(annotation, "annotation"), " ")
    if callable(annotation):
        return prefix(concat(annotation(formatter)), " ")
    return prefix(concat(annotation), " ")


def compute_display_name(
    name: NameOption,
    description: Description | None,
    formatter: Formatter,
) -> DisplayName | None:
    """Resolve the name shown for a display, or None when a compact name is elided.

    Args:
        name (NameOption): The name as given to the builder.
        description (Description | None): Optional description. Falsy values
            count as absent.
        formatter (Formatter): Toolkit of the display being built.

    Returns:
        DisplayName | None: The name to show, or None for a compact name in a
        nested context without description.
    """
    if isinstance(name, CompactName):
        label, is_compact = name.label, True
    else:
        label, is_compact = name, False

    if callable(description):
        return DisplayName(label, concat(description(formatter)))
    if description:
        return DisplayName(label, format_description(description))
    if is_compact and formatter.is_nested:
        return None
    return DisplayName(label)


@dataclass(frozen=True)
class DisplayOptions:
    """Named configuration of a freeform display.

    Attributes:
        name (NameOption | None): Name shown before the body.
        format (FormatFn | None): Callback building the body.
        description (Description | None): Shown in brackets after the name.
        annotation (Annotation | None): Shown after the body.
    """

    name: NameOption | None = None
    format: FormatFn | None = None
    description: Description | None = None
    annotation: Annotation | None = None


def _is_name(value: object) -> bool:
    return isinstance(value, (str, CompactName))


def _merge(left: DisplayOptions, right: DisplayOptions, shape: tuple[str, ...]) -> DisplayOptions:
    """Combine two partial configurations; a field set on both sides is an error."""
    values: dict[str, Any] = {}
    for field_ in dataclasses.fields(DisplayOptions):
        ours = getattr(left, field_.name)
        theirs = getattr(right, field_.name)
        if ours is not None and theirs is not None:
            raise DisplayArgumentError(shape, f"{field_.name!r} given twice")
        values[field_.name] = ours if ours is not None else theirs
    return DisplayOptions(**values)


def _positional_options(args: Sequence[object], shape: tuple[str, ...]) -> DisplayOptions | None:
    """Match the positional convenience shapes; None if no shape matches."""
    if not args:
        return DisplayOptions()
    head, tail = args[0], args[1:]
    if not tail:
        if _is_name(head):
            return DisplayOptions(name=head)  # type: ignore[arg-type]
        if callable(head):
            return DisplayOptions(format=head)
        return None
    if not _is_name(head) or len(tail) > 2:
        return None
    named = DisplayOptions(name=head)  # type: ignore[arg-type]
    if len(tail) == 1:
        (second,) = tail
        if second is None:
            return named
        if isinstance(second, DisplayOptions):
            return _merge(named, second, shape)
        if callable(second):
            return DisplayOptions(name=named.name, format=second)
        return None
    second, third = tail
    if not isinstance(third, DisplayOptions):
        return None
    if second is None:
        return _merge(named, third, shape)
    if callable(second):
        return _merge(DisplayOptions(name=named.name, format=second), third, shape)
    return None


def normalize_display_args(
    args: Sequence[object],
    *,
    name: NameOption | None = None,
    format: FormatFn | None = None,  # noqa: A002
    description: Description | None = None,
    annotation: Annotation | None = None,
) -> DisplayOptions:
    """Resolve the arguments of `display` into one `DisplayOptions`.

    Recognized positional shapes: ``(format)``, ``(name)``, ``(name, format)``,
    ``(name, options)``, ``(name, format, options)`` and ``(name, None, options)``,
    where ``options`` is a `DisplayOptions`. A `None` format counts as omitted, so
    ``(name, None)`` is the name-only shape. Keyword arguments fill the remaining
    fields.

    Raises:
        DisplayArgumentError: If no shape matches, a field is given twice, or
            nothing at all was given.
    """
    shape = tuple(type(arg).__name__ for arg in args)
    positional = _positional_options(args, shape)
    if positional is None:
        raise DisplayArgumentError(shape)
    options = _merge(positional, DisplayOptions(name, format, description, annotation), shape)
    if options == DisplayOptions():
        raise DisplayArgumentError(shape, "nothing to display")
    return options


class DisplayValue:
    """A value that renders itself through the printer's ``__display__`` hook.

    Rendering is lazy: the format callbacks run on every ``__display__`` call, so
    the output always reflects the state of the wrapped values at print time.
    """

    __slots__ = ("_options",)

    def __init__(self, options: DisplayOptions) -> None:
        self._options = options

    @property
    def options(self) -> DisplayOptions:
        return self._options

    def __display__(self, ctx: InspectContext) -> str:
        nesting = Nesting(ctx.nested)
        node = self.build(Formatter(nesting))
        return render(
            node,
            StringifyOptions(
                stylize=ctx.stylize,
                inspect=lambda value: ctx.inspect(value, nested=nesting.nested),
                nesting=nesting,
            ),
        )

    def __repr__(self) -> str:
        return pformat(self, colors=False)

    def build(self, formatter: Formatter) -> Stylized:
        """Build the formatting tree: the name, then ``(body annotation)``.

        Without a name the body is emitted bare, which is how struct and tuple
        displays supply their own delimiters.
        """
        options = self._options
        parts: list[Stylized] = []

        if options.name:
            display_name = compute_display_name(options.name, options.description, formatter)
            if display_name is not None:
                parts.append(display_name)

        inner: list[Stylized] = []
        if options.format is not None:
            inner.append(concat(options.format(formatter)))
        if options.annotation:
            inner.append(format_annotation(options.annotation, formatter))

        if inner:
            if parts:
                parts.append(concat("(", inner, ")"))
            else:
                parts.extend(inner)
        return group(*parts)


def display(
    *args: object,
    name: NameOption | None = None,
    format: FormatFn | None = None,  # noqa: A002
    description: Description | None = None,
    annotation: Annotation | None = None,
) -> DisplayValue:
    """Build a freeform display.

    Example:
        ```python
        display(lambda f: [f.label(compact("Point")), f.nest("(", f.primitive("1"), ")")])
        display("Line", lambda f: ["[", f.inspect(start), " -> ", f.inspect(end), "]"])
        display(name="Empty", description="none")
        ```

    Raises:
        DisplayArgumentError: If the arguments match none of the shapes accepted
            by `normalize_display_args`.
    """
    return DisplayValue(
        normalize_display_args(
            args, name=name, format=format, description=description, annotation=annotation
        )
    )


def display_struct(
    name: NameOption,
    fields: object,
    *,
    description: Description | None = None,
    annotation: Annotation | None = None,
) -> DisplayValue:
    """Display a named mapping of fields: ``Name {'x': 1} annotation``.

    The fields (usually a `dict`) are rendered by the printer as they are, so
    they keep its line-breaking.
    """

    def format_struct(f: Formatter) -> StylizedResult:
        display_name = compute_display_name(name, description, f)
        return [
            display_name,
            " " if display_name is not None else None,
            f.inspect(fields),
            format_annotation(annotation, f),
        ]

    return DisplayValue(DisplayOptions(format=format_struct))


def display_tuple(
    name: NameOption,
    inner: object,
    *,
    description: Description | None = None,
    annotation: Annotation | None = None,
) -> DisplayValue:
    """Display a named sequence of values: ``Name('a', 'b' annotation)``.

    A `list` or `tuple` is the element sequence; any other value is the single
    element. The printer lays the elements out as a list, and its brackets are
    replaced with parentheses.
    """

    def format_tuple(f: Formatter) -> StylizedResult:
        # Elements are read at print time.
        elements = list(inner) if isinstance(inner, (list, tuple)) else [inner]
        return [
            compute_display_name(name, description, f),
            braced(f.inspect(elements), concat("("), concat(format_annotation(annotation, f), ")")),
        ]

    return DisplayValue(DisplayOptions(format=format_tuple))


def display_unit(
    name: str,
    *,
    description: Description | None = None,
    annotation: Annotation | None = None,
) -> DisplayValue:
    """Display a bare label: ``Name`` or ``Name[description]``.

    A unit has no inside to put an annotation in, so `annotation` is ignored.
    """
    if annotation is not None:
        logger.debug("display_unit(%r): annotation ignored", name)
    return DisplayValue(DisplayOptions(name=name, description=description))
