# topmark:header:start
#
#   project      : LineScan
#   file         : version.py
#   file_relpath : src/linescan/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan `version` command.

Prints the LineScan version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from linescan.cli.cmd_common import get_console
from linescan.cli.cli_types import EnumChoiceParam
from linescan.constants import LINESCAN_VERSION
from linescan.core.formats import OutputFormat

if TYPE_CHECKING:
    from linescan.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LineScan.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of LineScan.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt.is_machine:
        console.print(json.dumps({"version": LINESCAN_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# LineScan Version\n")
        console.print(f"**LineScan version: {LINESCAN_VERSION}**")
    else:
        console.print(console.styled(LINESCAN_VERSION, bold=True))
