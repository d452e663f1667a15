# topmark:header:start
#
#   project      : inspect-utils
#   file         : demo.py
#   file_relpath : src/inspect_utils/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""inspect-utils `demo` command.

Prints the README examples through the configured printer. Without arguments
every example runs, in order.
"""

from __future__ import annotations

import click

from inspect_utils.cli.console import ClickConsole
from inspect_utils.cli.errors import InspectUtilsUsageError
from inspect_utils.demo.examples import EXAMPLES, Example
from inspect_utils.printer.pretty import DisplayPrettyPrinter

_INDENT = "  "


def _run_example(
    example: Example,
    console: ClickConsole,
    printer: DisplayPrettyPrinter,
    *,
    screenshots: bool,
) -> None:
    console.print(console.styled(example.title, fg="bright_black"))
    if screenshots:
        console.print()
    narrow = printer.derive(width=max(printer.width - len(_INDENT), 1))
    for value in example.run():
        rendered = narrow.pformat(value)
        console.print(_INDENT + rendered.replace("\n", "\n" + _INDENT))
    console.print()
    if screenshots:
        console.print()


@click.command(
    name="demo",
    help="Print the README examples (all of them, or the NAMEs given).",
)
@click.argument("names", nargs=-1, metavar="[NAME]...")
@click.option("--list", "list_only", is_flag=True, help="List the example names and exit.")
@click.option("--screenshots", is_flag=True, help="Add blank lines around each example.")
def demo_command(*, names: tuple[str, ...], list_only: bool, screenshots: bool) -> None:
    """Print the selected examples.

    Raises:
        InspectUtilsUsageError: If a name does not match any example.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    printer: DisplayPrettyPrinter = ctx.obj["printer"]

    if list_only:
        for example in EXAMPLES.values():
            console.print(f"{example.name:<16}{example.title}")
        return

    unknown = [name for name in names if name not in EXAMPLES]
    if unknown:
        raise InspectUtilsUsageError(
            f"Unknown example(s): {', '.join(unknown)}. Choose from: {', '.join(EXAMPLES)}"
        )

    selected = [EXAMPLES[name] for name in names] if names else list(EXAMPLES.values())
    for example in selected:
        _run_example(example, console, printer, screenshots=screenshots)
