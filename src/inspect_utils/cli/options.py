# topmark:header:start
#
#   project      : inspect-utils
#   file         : options.py
#   file_relpath : src/inspect_utils/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options (verbosity, color, printer layout) and their resolution.

The helpers here are Click-aware, so the group and its commands stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from inspect_utils.cli.errors import InspectUtilsUsageError
from inspect_utils.config.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        InspectUtilsUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise InspectUtilsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_printer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--width N`` and ``--config FILE``."""
    f = click.option(
        "--width",
        "width",
        type=click.IntRange(min=1),
        default=None,
        help="Target line width of printed values (default: 80).",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        help="Read printer settings from a TOML file ([tool.inspect-utils] in pyproject.toml).",
    )(f)
    return f
