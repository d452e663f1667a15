# topmark:header:start
#
#   project      : inspect-utils
#   file         : version.py
#   file_relpath : src/inspect_utils/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""inspect-utils `version` command.

Prints the inspect-utils version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from inspect_utils.cli.console import ClickConsole
from inspect_utils.constants import INSPECT_UTILS_VERSION


@click.command(
    name="version",
    help="Show the current version of inspect-utils.",
)
def version_command() -> None:
    """Show the current version of inspect-utils.

    With ``-v`` on the group, a heading is printed above the version.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if vlevel > 0:
        console.print(console.styled("inspect-utils version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(INSPECT_UTILS_VERSION, bold=True)}")
    else:
        console.print(console.styled(INSPECT_UTILS_VERSION, bold=True))
