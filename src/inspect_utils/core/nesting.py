# topmark:header:start
#
#   project      : inspect-utils
#   file         : nesting.py
#   file_relpath : src/inspect_utils/core/nesting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nesting context for a single display render.

A value is *nested* when it is displayed as a field or element of another
displayed value. Builders read the flag to decide whether a compact label can be
left out, and deferred inspections capture it so the value they wrap renders in
the right context.

The flag lives on a `Nesting` object that is passed explicitly through a render
(there is no process-wide state). Changes are always scoped: `Nesting.scope()`
installs a value for the duration of a ``with`` block and restores the previous
value on every exit path, including exceptions.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

T = TypeVar("T")


class Nesting:
    """Mutable holder for the nested flag of one render pass.

    Args:
        nested (bool): Initial value of the flag.
    """

    __slots__ = ("_nested",)

    def __init__(self, nested: bool = False) -> None:
        self._nested = nested

    def __repr__(self) -> str:
        return f"Nesting(nested={self._nested})"

    @property
    def nested(self) -> bool:
        """Whether the current position is inside another displayed value."""
        return self._nested

    @contextmanager
    def scope(self, nested: bool = True) -> Iterator[Nesting]:
        """Install `nested` for the duration of the ``with`` block.

        Args:
            nested (bool): Value to install.

        Yields:
            Nesting: This object, with the value installed.
        """
        previous = self._nested
        self._nested = nested
        try:
            yield self
        finally:
            self._nested = previous

    def run(self, callback: Callable[[], T], nested: bool = True) -> T:
        """Call `callback` with `nested` installed and return its result."""
        with self.scope(nested):
            return callback()
