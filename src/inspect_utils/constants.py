# topmark:header:start
#
#   project      : inspect-utils
#   file         : constants.py
#   file_relpath : src/inspect_utils/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""inspect-utils constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    INSPECT_UTILS_VERSION: str = get_version("inspect-utils")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    INSPECT_UTILS_VERSION = "0.0.0"

# Name of the custom-inspection hook recognized by the printer.
DISPLAY_HOOK: str = "__display__"

# Prefix selecting a native printer style instead of a semantic style name.
HOST_STYLE_PREFIX: str = "host:"

# Table holding printer settings inside `pyproject.toml`.
PYPROJECT_TOOL_TABLE: str = "inspect-utils"

ENV_LOG_LEVEL: str = "INSPECT_UTILS_LOG_LEVEL"
ENV_WIDTH: str = "INSPECT_UTILS_WIDTH"
ENV_INDENT: str = "INSPECT_UTILS_INDENT"
ENV_DEPTH: str = "INSPECT_UTILS_DEPTH"
ENV_COLOR: str = "INSPECT_UTILS_COLOR"
ENV_DEV: str = "INSPECT_UTILS_DEV"

DEFAULT_WIDTH: int = 80
DEFAULT_INDENT: int = 2
