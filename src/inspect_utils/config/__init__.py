# topmark:header:start
#
#   project      : inspect-utils
#   file         : __init__.py
#   file_relpath : src/inspect_utils/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for inspect-utils.

Public modules:
    - inspect_utils.config.logging
    - inspect_utils.config.color
    - inspect_utils.config.settings
"""

from __future__ import annotations

from inspect_utils.config.color import ColorMode, resolve_color_mode
from inspect_utils.config.settings import PrinterSettings, is_dev_mode

__all__ = [
    "ColorMode",
    "PrinterSettings",
    "is_dev_mode",
    "resolve_color_mode",
]
