# topmark:header:start
#
#   project      : inspect-utils
#   file         : examples.py
#   file_relpath : src/inspect_utils/demo/examples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The README examples.

Each `Example` yields the values to print, one at a time. Values are printed as
soon as they are yielded, so an example can change state between two prints
(see the `Async` examples, which print the same value before and after its
future settles).
"""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Final, Generic, Literal, TypeVar

from inspect_utils.core.display import (
    DisplayValue,
    compact,
    display,
    display_struct,
    display_tuple,
    display_unit,
)
from inspect_utils.registration import inspector

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from inspect_utils.core.display import Formatter
    from inspect_utils.core.fragments import StylizedResult
    from inspect_utils.printer.pretty import InspectContext

T = TypeVar("T")


@dataclass(frozen=True)
class Example:
    """A named demo.

    Attributes:
        name (str): Identifier used on the command line.
        title (str): Heading printed above the output.
        run (Callable[[], Iterator[object]]): Yields the values to print.
    """

    name: str
    title: str
    run: Callable[[], Iterator[object]]


class PlainPoint:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class StructPoint:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        return display_struct("Point", {"x": self.x, "y": self.y})


class SafeString:
    def __init__(self, value: str) -> None:
        self.value = value

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        return display_tuple("SafeString", self.value)


class VerifiedString:
    def __init__(self, value: str, verified: Literal["checked", "unchecked"]) -> None:
        self.value = value
        self.verified = verified

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        return display_tuple("SafeString", [self.value, self.verified])


class CheckedString:
    """A string that is either known safe, or unsafe (and then has no value)."""

    def __init__(self, value: str | None) -> None:
        self.value = value

    @classmethod
    def unsafe(cls) -> CheckedString:
        return cls(None)

    @classmethod
    def safe(cls, value: str) -> CheckedString:
        return cls(value)

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        if self.value is None:
            return display_unit("CheckedString", description="unsafe")
        return display_tuple("CheckedString", self.value)


class Async(Generic[T]):
    """Snapshot view of a `Future`: its state is read each time it is printed.

    Args:
        future (Future[T]): The future to observe.
        kind (Literal["annotation", "description"]): Where the settled status goes.
    """

    def __init__(self, future: Future[T], kind: Literal["annotation", "description"]) -> None:
        self.future = future
        self.kind = kind

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        if not self.future.done():
            return display_unit("Async", description="pending")
        error = self.future.exception()
        status, value = ("rejected", error) if error is not None else ("fulfilled", self.future.result())
        if self.kind == "description":
            return display_tuple("Async", value, description=status)
        return display_tuple("Async", value, annotation=f"@{status}")


class CustomPoint:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        def format_point(f: Formatter) -> StylizedResult:
            return [
                f.label(compact("Point")),
                f.nest(lambda f: ["(", f.primitive(str(self.x)), ",", f.primitive(str(self.y)), ")"]),
            ]

        return display(format_point)


class CustomLine:
    def __init__(self, start: CustomPoint, end: CustomPoint) -> None:
        self.start = start
        self.end = end

    def __display__(self, ctx: InspectContext) -> DisplayValue:
        return display(
            lambda f: [
                f.ident("Line"),
                f.nest("[", f.inspect(self.start), " -> ", f.inspect(self.end), "]"),
            ]
        )


class DeclaredPoint:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


inspector(DeclaredPoint, lambda point: display_struct("Point", {"x": point.x, "y": point.y}))


def _without_display() -> Iterator[object]:
    yield PlainPoint(1, 2)


def _struct() -> Iterator[object]:
    yield StructPoint(1, 2)


def _tuple() -> Iterator[object]:
    yield SafeString("hello")


def _tuple_multiple() -> Iterator[object]:
    yield VerifiedString("hello", "checked")


def _unit() -> Iterator[object]:
    yield CheckedString.unsafe()
    yield CheckedString.safe("hello")


def _settling(kind: Literal["annotation", "description"]) -> Iterator[object]:
    fulfilled: Future[int] = Future()
    value = Async(fulfilled, kind)
    yield value
    fulfilled.set_result(1)
    yield value

    rejected: Future[int] = Future()
    rejected.set_exception(ValueError("oh no"))
    yield Async(rejected, kind)


def _descriptions() -> Iterator[object]:
    return _settling("description")


def _annotations() -> Iterator[object]:
    return _settling("annotation")


def _custom() -> Iterator[object]:
    yield CustomPoint(1, 2)
    yield CustomLine(CustomPoint(1, 2), CustomPoint(3, 4))


def _declarative() -> Iterator[object]:
    yield DeclaredPoint(1, 2)


EXAMPLES: Final[Mapping[str, Example]] = MappingProxyType(
    {
        example.name: example
        for example in (
            Example("plain", "without inspect-utils", _without_display),
            Example("struct", "display_struct", _struct),
            Example("tuple", "display_tuple", _tuple),
            Example("tuple-multiple", "display_tuple (multiple)", _tuple_multiple),
            Example("unit", "display_unit", _unit),
            Example("descriptions", "descriptions", _descriptions),
            Example("annotations", "annotations", _annotations),
            Example("custom", "display (custom)", _custom),
            Example("declarative", "declarative", _declarative),
        )
    }
)


def get_example(name: str) -> Example | None:
    """Return the example registered under `name`, if any."""
    return EXAMPLES.get(name)
