# topmark:header:start
#
#   project      : inspect-utils
#   file         : settings.py
#   file_relpath : src/inspect_utils/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printer settings: defaults, environment and TOML sources.

Settings are layered the usual way: runtime defaults, then an optional TOML file
(`[tool.inspect-utils]` in `pyproject.toml`, or the root table of a dedicated
`inspect-utils.toml`), then `INSPECT_UTILS_*` environment variables, then
explicit overrides (CLI flags or keyword arguments).

Parsing is done with `tomlkit`; the parsed document is unwrapped into plain
Python values before validation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from inspect_utils.config.color import ColorMode, resolve_color_mode
from inspect_utils.config.logging import get_logger
from inspect_utils.constants import (
    DEFAULT_INDENT,
    DEFAULT_WIDTH,
    ENV_COLOR,
    ENV_DEPTH,
    ENV_DEV,
    ENV_INDENT,
    ENV_WIDTH,
    PYPROJECT_TOOL_TABLE,
)
from inspect_utils.core.errors import SettingsError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from inspect_utils.config.logging import InspectUtilsLogger

logger: InspectUtilsLogger = get_logger(__name__)

_FALSY_TOKENS: frozenset[str] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class PrinterSettings:
    """Immutable settings for the display printer.

    Attributes:
        width (int): Target maximum line width, in columns.
        indent (int): Spaces added per block nesting level.
        depth (int | None): Maximum nesting depth, or None for unlimited.
        color_mode (ColorMode): Color intent; see `colors` for the resolved value.
    """

    width: int = DEFAULT_WIDTH
    indent: int = DEFAULT_INDENT
    depth: int | None = None
    color_mode: ColorMode = ColorMode.AUTO

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise SettingsError(f"width must be > 0, got {self.width}")
        if self.indent < 0:
            raise SettingsError(f"indent must be >= 0, got {self.indent}")
        if self.depth is not None and self.depth <= 0:
            raise SettingsError(f"depth must be > 0, got {self.depth}")

    @property
    def colors(self) -> bool:
        """Whether ANSI colors are emitted, resolved from `color_mode` and the environment."""
        return resolve_color_mode(color_mode_override=self.color_mode)

    def with_overrides(self, **values: Any) -> PrinterSettings:
        """Return a copy with the given fields replaced, ignoring `None` values.

        Args:
            **values (Any): Field values keyed by field name.

        Returns:
            PrinterSettings: The updated settings.

        Raises:
            SettingsError: If a key is not a settings field or a value is invalid.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise SettingsError(f"Unknown printer settings: {', '.join(unknown)}")
        changes = {k: v for k, v in values.items() if v is not None}
        if "color_mode" in changes:
            changes["color_mode"] = _parse_color_mode(changes["color_mode"], "color_mode")
        return replace(self, **changes) if changes else self

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        base: PrinterSettings | None = None,
    ) -> PrinterSettings:
        """Build settings from `INSPECT_UTILS_*` environment variables.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to ``os.environ``.
            base (PrinterSettings | None): Settings to layer the environment on top of.

        Returns:
            PrinterSettings: The resolved settings.

        Raises:
            SettingsError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        settings = base or cls()
        return settings.with_overrides(
            width=_parse_int(env.get(ENV_WIDTH), ENV_WIDTH),
            indent=_parse_int(env.get(ENV_INDENT), ENV_INDENT),
            depth=_parse_int(env.get(ENV_DEPTH), ENV_DEPTH),
            color_mode=env.get(ENV_COLOR) or None,
        )

    @classmethod
    def from_toml(cls, path: Path, *, base: PrinterSettings | None = None) -> PrinterSettings:
        """Build settings from a TOML file.

        For ``pyproject.toml`` the ``[tool.inspect-utils]`` table is read; any other
        file is read from its root table. A missing table yields ``base`` unchanged.

        Args:
            path (Path): Path to the TOML file.
            base (PrinterSettings | None): Settings to layer the file on top of.

        Returns:
            PrinterSettings: The resolved settings.

        Raises:
            SettingsError: If the file cannot be read or parsed, or holds invalid values.
        """
        try:
            text: str = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
        try:
            document: dict[str, Any] = tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise SettingsError(f"Invalid TOML in {path}: {exc}") from exc

        if path.name == "pyproject.toml":
            table: Any = document.get("tool", {}).get(PYPROJECT_TOOL_TABLE, {})
        else:
            table = document
        if not isinstance(table, dict):
            raise SettingsError(f"Expected a table of printer settings in {path}")
        logger.debug("Loaded printer settings from %s: %s", path, table)

        settings = base or cls()
        return settings.with_overrides(
            width=_expect_int(table.get("width"), "width"),
            indent=_expect_int(table.get("indent"), "indent"),
            depth=_expect_int(table.get("depth"), "depth"),
            color_mode=table.get("color"),
        )


def _parse_int(raw: str | None, source: str) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise SettingsError(f"{source} must be an integer, got {raw!r}") from exc


def _expect_int(value: object, key: str) -> int | None:
    # bool is an int subclass; reject it explicitly.
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"'{key}' must be an integer, got {value!r}")
    return value


def _parse_color_mode(value: object, source: str) -> ColorMode:
    if isinstance(value, ColorMode):
        return value
    if isinstance(value, str):
        try:
            return ColorMode(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(m.value for m in ColorMode)
    raise SettingsError(f"{source} must be one of {choices}, got {value!r}")


def is_dev_mode(environ: Mapping[str, str] | None = None) -> bool:
    """Return whether development-only helpers (declarative registration) are active.

    `INSPECT_UTILS_DEV` decides when set (``0``, ``false``, ``no`` and ``off`` disable);
    otherwise dev mode follows the interpreter's ``__debug__`` flag, which is off
    under ``python -O``.

    Args:
        environ (Mapping[str, str] | None): Environment to read; defaults to ``os.environ``.

    Returns:
        bool: True when dev mode is active.
    """
    env = os.environ if environ is None else environ
    raw = env.get(ENV_DEV)
    if raw is not None and raw.strip():
        return raw.strip().lower() not in _FALSY_TOKENS
    return __debug__
