# topmark:header:start
#
#   project      : inspect-utils
#   file         : styles.py
#   file_relpath : src/inspect_utils/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""inspect-utils `styles` command.

Lists the semantic style names and the printer category each maps onto. Each
name is printed in its own style, so the command doubles as a color preview.
"""

from __future__ import annotations

import click

from inspect_utils.cli.console import ClickConsole
from inspect_utils.core.style_names import STYLE_NAME_MAP
from inspect_utils.printer.pretty import DisplayPrettyPrinter


@click.command(
    name="styles",
    help="List the semantic style names and their printer categories.",
)
def styles_command() -> None:
    """List ``name  category`` pairs, one per line, in declaration order."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    printer: DisplayPrettyPrinter = ctx.obj["printer"]

    column = max(len(name) for name in STYLE_NAME_MAP) + 2
    for name, host in STYLE_NAME_MAP.items():
        # Pad before styling so ANSI codes do not skew the column.
        console.print(f"{printer.stylize(name.ljust(column), host)}{host.value}")
