# topmark:header:start
#
#   project      : inspect-utils
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running inspect-utils through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from inspect_utils.cli.exit_codes import ExitCode
from inspect_utils.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def run_cli(argv: str | Sequence[str] | None, *, env: Mapping[str, str] | None = None) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["demo", "struct"]``.
        env (Mapping[str, str] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "version"])
        assert_SUCCESS(result)
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, env=dict(env) if env else None)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
