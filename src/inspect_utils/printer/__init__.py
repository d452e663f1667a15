# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/printer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The display printer (stdlib `pprint` with a ``__display__`` hook) and its styles."""

from __future__ import annotations

from inspect_utils.printer.pretty import (
    DisplayPrettyPrinter,
    InspectContext,
    create_printer,
    is_displayable,
    pformat,
    pprint,
)
from inspect_utils.printer.styles import HostStyle

__all__ = [
    "DisplayPrettyPrinter",
    "HostStyle",
    "InspectContext",
    "create_printer",
    "is_displayable",
    "pformat",
    "pprint",
]
