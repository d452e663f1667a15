# topmark:header:start
#
#   project      : inspect-utils
#   file         : stylized.py
#   file_relpath : src/inspect_utils/core/stylized.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The Stylized node tree and its render pass.

A display is first described as an immutable tree of `Stylized` nodes and only
turned into text when the printer asks for it. Four node kinds exist:

- `StylizedText`: literal text with an optional printer style.
- `StylizedFragment`: an ordered concatenation of child nodes (no separators;
  separators are explicit children).
- `StylizedInspect`: a value to be rendered by the printer, together with the
  nesting flag captured when the node was built.
- `StylizedBraces`: a child whose rendered outer delimiters are replaced.

`is_empty` never calls the printer, so builders can decide whether to add
surrounding punctuation before anything is rendered. `StylizedInspect` reports
itself as non-empty because its text is unknown until render time.

Delimiter splicing:
    The printer renders lists and dicts with its own brackets, and lays them out
    over several lines when they do not fit (``[`` alone on the first line, one
    item per indented line, ``]`` alone on the last). `splice_delimiters` strips
    exactly one leading ``{``/``[`` run (with trailing spaces) and one trailing
    ``}``/``]``/``)`` run (with leading spaces) and puts other delimiters in their
    place, keeping the printer's line breaks and indentation in between. If
    either run is missing, the text is kept whole between the new delimiters.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Final

from inspect_utils.core.nesting import Nesting
from inspect_utils.core.style_names import to_host_style

if TYPE_CHECKING:
    from inspect_utils.core.style_names import SpecifiedStyle
    from inspect_utils.printer.styles import HostStyle

StylizeFn = Callable[[str, "HostStyle"], str]
InspectFn = Callable[[object], str]

_OPEN_DELIMITER: Final[re.Pattern[str]] = re.compile(r"\A[{\[][ \t]*")
_CLOSE_DELIMITER: Final[re.Pattern[str]] = re.compile(r"[ \t]*[}\])]\Z")


@dataclass(frozen=True)
class StringifyOptions:
    """Collaborators of one render pass.

    Attributes:
        stylize (StylizeFn): Applies a printer style to literal text.
        inspect (InspectFn): Renders an arbitrary value through the printer.
            It must read ``nesting.nested`` at call time.
        nesting (Nesting): Nesting context shared by the whole pass.
    """

    stylize: StylizeFn
    inspect: InspectFn
    nesting: Nesting = field(default_factory=Nesting)


class Stylized(ABC):
    """Abstract base of all formatting-tree nodes."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the node renders to an empty string (decided without rendering)."""

    @abstractmethod
    def stringify(self, options: StringifyOptions) -> str:
        """Render the node to text."""


@dataclass(frozen=True)
class StylizedText(Stylized):
    """Literal text, optionally styled."""

    text: str
    style: HostStyle | None = None

    @property
    def is_empty(self) -> bool:
        return not self.text

    def stringify(self, options: StringifyOptions) -> str:
        if self.style is not None:
            return options.stylize(self.text, self.style)
        return self.text


@dataclass(frozen=True)
class StylizedFragment(Stylized):
    """Concatenation of child nodes, in order."""

    children: tuple[Stylized, ...] = ()

    @property
    def is_empty(self) -> bool:
        return all(child.is_empty for child in self.children)

    def stringify(self, options: StringifyOptions) -> str:
        return "".join(child.stringify(options) for child in self.children)


@dataclass(frozen=True, eq=False)
class StylizedInspect(Stylized):
    """A value rendered by the printer at render time.

    The node holds a plain reference to the value; it is compared by identity.
    """

    value: object
    nested: bool

    @property
    def is_empty(self) -> bool:
        return False

    def stringify(self, options: StringifyOptions) -> str:
        with options.nesting.scope(self.nested):
            return options.inspect(self.value)


@dataclass(frozen=True)
class StylizedBraces(Stylized):
    """A child whose rendered outer delimiters are replaced by `open` and `close`.

    Without delimiters the node is a plain grouping of its child.
    """

    child: Stylized
    open: Stylized | None = None
    close: Stylized | None = None

    @property
    def is_empty(self) -> bool:
        return self.child.is_empty

    def stringify(self, options: StringifyOptions) -> str:
        rendered = self.child.stringify(options)
        if self.open is None and self.close is None:
            return rendered
        open_text = self.open.stringify(options) if self.open is not None else ""
        close_text = self.close.stringify(options) if self.close is not None else ""
        return splice_delimiters(rendered, open_text, close_text)


def splice_delimiters(rendered: str, open_text: str, close_text: str) -> str:
    """Replace the outer bracket runs of `rendered` with `open_text` and `close_text`.

    Args:
        rendered (str): Text produced by the printer, typically a list or dict.
        open_text (str): Replacement for the opening run.
        close_text (str): Replacement for the closing run.

    Returns:
        str: ``open_text + body + close_text``, where ``body`` is `rendered` without
        its outer runs, or all of `rendered` when either run is missing.
    """
    start = _OPEN_DELIMITER.search(rendered)
    end = _CLOSE_DELIMITER.search(rendered)
    if start is None or end is None:
        return f"{open_text}{rendered}{close_text}"
    # For "[]" or "[ ]" the runs overlap and the body is empty.
    body = rendered[start.end() : max(end.start(), start.end())]
    return f"{open_text}{body}{close_text}"


def is_stylized(value: object) -> bool:
    """Return True if `value` is a formatting-tree node."""
    return isinstance(value, Stylized)


def text(value: str, style: SpecifiedStyle | None = None) -> Stylized:
    """Build a text node, resolving `style` to a printer category.

    Raises:
        StyleNameError: If `style` is not a known style name.
    """
    return StylizedText(value, to_host_style(style) if style is not None else None)


def group(*children: Stylized) -> Stylized:
    """Build a concatenation of already-built nodes."""
    return StylizedFragment(tuple(children))


def deferred_inspect(value: object, *, nested: bool) -> Stylized:
    """Build a node that renders `value` through the printer, in context `nested`."""
    return StylizedInspect(value, nested)


def braced(
    child: Stylized,
    open: Stylized | None = None,  # noqa: A002
    close: Stylized | None = None,
) -> Stylized:
    """Wrap `child`, optionally replacing its rendered outer delimiters."""
    return StylizedBraces(child, open, close)


def render(node: Stylized, options: StringifyOptions) -> str:
    """Render a formatting tree to text.

    Args:
        node (Stylized): Root of the tree.
        options (StringifyOptions): Printer collaborators for this pass.

    Returns:
        str: The rendered text.
    """
    return node.stringify(options)
