# topmark:header:start
#
#   project      : LineScan
#   file         : config.py
#   file_relpath : src/linescan/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan `config` command.

Prints the effective configuration (defaults merged with discovered and explicit
config files) as TOML, or as JSON for machine consumption. Problems found while
loading config are reported on stderr.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from linescan.cli.cmd_common import get_console
from linescan.cli.cli_types import EnumChoiceParam
from linescan.core.formats import OutputFormat

if TYPE_CHECKING:
    from linescan.cli.console import ConsoleLike
    from linescan.config import Config


@click.command(
    name="config",
    help="Show the effective configuration.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format: text (TOML, default), markdown, json or ndjson.",
)
def config_command(*, output_format: OutputFormat | None) -> None:
    """Show the effective configuration."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = ctx.obj["config"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    for warning in config.warnings:
        console.warn(f"warning: {warning}")

    if fmt.is_machine:
        payload = {
            "config": config.to_toml_dict(),
            "config_files": [str(p) for p in config.config_files],
            "warnings": list(config.warnings),
        }
        console.print(json.dumps(payload, indent=2 if fmt == OutputFormat.JSON else None))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# LineScan configuration\n")
        console.print("```toml")
        console.print(config.to_toml().rstrip("\n"))
        console.print("```")
    else:
        console.print(config.to_toml().rstrip("\n"))
