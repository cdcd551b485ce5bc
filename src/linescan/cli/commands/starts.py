# topmark:header:start
#
#   project      : LineScan
#   file         : starts.py
#   file_relpath : src/linescan/cli/commands/starts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan `starts` command.

Prints the offset at which each line of each input begins. Offsets count decoded
characters by default, or UTF-16 code units with ``--utf16`` (as used by editors
and language servers).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linescan.cli.cmd_common import get_console, resolve_command_config, wants_banners
from linescan.cli.emitters import StartsReport, emit_starts
from linescan.cli.io import read_inputs
from linescan.cli.options import common_format_options, common_input_options
from linescan.config.logging import get_logger
from linescan.text.positions import utf16_offsets
from linescan.text.scanner import compute_line_starts

if TYPE_CHECKING:
    from linescan.cli.io import InputSource
    from linescan.config import Config
    from linescan.config.logging import LinescanLogger
    from linescan.core.formats import OutputFormat
    from linescan.text.scanner import LineStarts

logger: LinescanLogger = get_logger(__name__)

UNIT_CODEPOINT: str = "codepoint"
UNIT_UTF16: str = "utf16"


def build_starts_report(source: InputSource, config: Config, *, utf16: bool) -> StartsReport:
    """Compute the line starts of one input.

    Args:
        source (InputSource): The raw input.
        config (Config): Effective config (decoding).
        utf16 (bool): Report UTF-16 code-unit offsets instead of character offsets.

    Returns:
        StartsReport: The line starts of ``source``.
    """
    text: str = source.decode(config.encoding, config.errors)
    line_starts: LineStarts = compute_line_starts(text)
    if utf16:
        line_starts = utf16_offsets(text, line_starts)
    logger.info("%s: %d line start(s)", source.name, len(line_starts))
    return StartsReport(
        name=source.name,
        line_starts=line_starts,
        unit=UNIT_UTF16 if utf16 else UNIT_CODEPOINT,
    )


@click.command(
    name="starts",
    help="Print the line-start offsets of each input (PATHS, or STDIN when none or '-').",
)
@common_input_options
@click.option(
    "--utf16",
    is_flag=True,
    default=False,
    help="Report offsets in UTF-16 code units instead of characters.",
)
@common_format_options
def starts_command(
    *,
    paths: tuple[str, ...],
    encoding: str | None,
    errors: str | None,
    utf16: bool,
    output_format: OutputFormat | None,
) -> None:
    """Print the line-start offsets of each input."""
    ctx = click.get_current_context()
    config: Config = resolve_command_config(
        ctx,
        encoding=encoding,
        errors=errors,
        output_format=output_format,
    )
    reports: list[StartsReport] = [
        build_starts_report(s, config, utf16=utf16) for s in read_inputs(paths)
    ]
    emit_starts(get_console(ctx), reports, config.output_format, banners=wants_banners(ctx))
