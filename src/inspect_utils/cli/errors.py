# topmark:header:start
#
#   project      : inspect-utils
#   file         : errors.py
#   file_relpath : src/inspect_utils/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the inspect-utils CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from inspect_utils.cli.exit_codes import ExitCode


class InspectUtilsCliError(click.ClickException):
    """Base class for all inspect-utils CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class InspectUtilsUsageError(InspectUtilsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class InspectUtilsConfigError(InspectUtilsCliError):
    """Error for invalid printer settings."""

    exit_code = ExitCode.CONFIG_ERROR
