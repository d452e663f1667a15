# topmark:header:start
#
#   project      : inspect-utils
#   file         : fragments.py
#   file_relpath : src/inspect_utils/core/fragments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalization of loosely-typed builder input into formatting-tree nodes.

Builders and format callbacks may return a node, a plain string, ``None``, or an
arbitrarily nested list/tuple of those. This module flattens such input into a
sequence of nodes. A bare string made only of punctuation and whitespace (such as
``"("``, ``", "`` or ``" -> "``) gets the subtle ``annotation`` style; any other
bare string is unstyled.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final, Union

from inspect_utils.core.stylized import Stylized, StylizedFragment, group, text

ToStylized = Union[Stylized, str, None]
StylizedResult = Union[ToStylized, Sequence["StylizedResult"]]

PUNCTUATION: Final[re.Pattern[str]] = re.compile(r"""[!"#$%&'()*+,\-./:;<=>?@\[\]^`{|}~\s]+""")


def to_stylized(item: ToStylized) -> list[Stylized]:
    """Convert a single item into zero or one nodes."""
    if isinstance(item, str):
        style = "annotation" if PUNCTUATION.fullmatch(item) else None
        return [text(item, style)]
    if item is None:
        return []
    return [item]


def stylize_result(result: StylizedResult) -> list[Stylized]:
    """Flatten a (possibly nested) result into a list of nodes."""
    if isinstance(result, (list, tuple)):
        flattened: list[Stylized] = []
        for item in result:
            flattened.extend(stylize_result(item))
        return flattened
    return to_stylized(result)


def concat(*items: StylizedResult) -> Stylized:
    """Concatenate normalized items into one node.

    A lone fragment is returned as is rather than wrapped again.
    """
    nodes = stylize_result(list(items))
    if len(nodes) == 1 and isinstance(nodes[0], StylizedFragment):
        return nodes[0]
    return group(*nodes)


def join(items: Sequence[StylizedResult], separator: StylizedResult) -> Stylized:
    """Concatenate `items`, inserting `separator` between consecutive items."""
    parts: list[StylizedResult] = []
    for index, item in enumerate(items):
        if index:
            parts.append(separator)
        parts.append(item)
    return concat(*parts)


def prefix(node: Stylized, leading: str) -> Stylized:
    """Prepend `leading` to `node`, unless `node` is empty."""
    if node.is_empty:
        return node
    return concat(leading, node)
