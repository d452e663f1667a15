# topmark:header:start
#
#   project      : inspect-utils
#   file         : color.py
#   file_relpath : src/inspect_utils/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for inspect-utils.

This module provides:

- the ColorMode enum, and
- color-mode resolution based on an explicit mode, the environment, and TTY status.

These helpers are kept Click-free so the printer can resolve colors when it is
used as a plain library, without the CLI.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from inspect_utils.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from inspect_utils.config.logging import InspectUtilsLogger


logger: InspectUtilsLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Explicit `ColorMode`; `None` means "not provided".
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.
        environ: Environment to read; defaults to `os.environ`.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, stdout_isatty=True, environ={})
        True
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    env = os.environ if environ is None else environ
    force_color: str | None = env.get("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if env.get("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            # Closed or detached streams (e.g. under some test runners).
            stdout_isatty = False
    logger.trace("color auto-detection: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
