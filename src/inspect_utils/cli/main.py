# topmark:header:start
#
#   project      : inspect-utils
#   file         : main.py
#   file_relpath : src/inspect_utils/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``inspect-utils`` Click group.

Group-level options are resolved once into ``ctx.obj``:

- ``verbosity_level`` (int): program-output verbosity from ``-v``/``-q``.
- ``log_level`` (int | None): internal log level from ``INSPECT_UTILS_LOG_LEVEL``.
- ``settings`` (PrinterSettings): defaults, then ``--config``, then environment,
  then ``--width``/``--color``.
- ``color_enabled`` (bool): resolved color output.
- ``console`` (ClickConsole): program output.
- ``printer`` (DisplayPrettyPrinter): printer built from the settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inspect_utils.cli.commands.demo import demo_command
from inspect_utils.cli.commands.styles import styles_command
from inspect_utils.cli.commands.version import version_command
from inspect_utils.cli.console import ClickConsole
from inspect_utils.cli.errors import InspectUtilsConfigError
from inspect_utils.cli.options import (
    common_color_options,
    common_printer_options,
    common_verbose_options,
    resolve_verbosity,
)
from inspect_utils.config.color import ColorMode, resolve_color_mode
from inspect_utils.config.logging import get_logger, resolve_env_log_level, setup_logging
from inspect_utils.config.settings import PrinterSettings
from inspect_utils.core.errors import SettingsError
from inspect_utils.printer.pretty import DisplayPrettyPrinter

if TYPE_CHECKING:
    from pathlib import Path

    from inspect_utils.config.logging import InspectUtilsLogger

logger: InspectUtilsLogger = get_logger(__name__)


def resolve_settings(
    *,
    config_path: Path | None,
    width: int | None,
    color_mode: ColorMode | None,
) -> PrinterSettings:
    """Layer printer settings: defaults, TOML file, environment, then CLI flags.

    Raises:
        InspectUtilsConfigError: If any layer holds an invalid value.
    """
    try:
        settings = PrinterSettings()
        if config_path is not None:
            settings = PrinterSettings.from_toml(config_path, base=settings)
        settings = PrinterSettings.from_env(base=settings)
        return settings.with_overrides(width=width, color_mode=color_mode)
    except SettingsError as exc:
        raise InspectUtilsConfigError(str(exc)) from exc


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    width: int | None,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, logging, color, printer) on the Click context."""
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    settings = resolve_settings(
        config_path=config_path,
        width=width,
        color_mode=ColorMode.NEVER if no_color else color_mode,
    )
    ctx.obj["settings"] = settings

    enable_color = resolve_color_mode(color_mode_override=settings.color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["printer"] = DisplayPrettyPrinter.from_settings(settings, colors=enable_color)
    logger.debug("CLI state: %s (colors=%s)", settings, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="inspect-utils: readable, stylized representations of Python values.",
)
@common_verbose_options
@common_color_options
@common_printer_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    width: int | None,
    config_path: Path | None,
) -> None:
    """Entry point for the inspect-utils CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        width=width,
        config_path=config_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'inspect-utils demo' to see every display shape.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(styles_command)

cli.add_command(demo_command)

if __name__ == "__main__":
    cli()
