# topmark:header:start
#
#   project      : LineScan
#   file         : lines.py
#   file_relpath : src/linescan/cli/commands/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan `lines` command.

Prints the logical lines of each input. Line terminators (CR, LF, CRLF, U+2028,
U+2029) are recognized regardless of platform, and are not echoed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linescan.cli.cmd_common import get_console, resolve_command_config, wants_banners
from linescan.cli.emitters import LinesReport, emit_lines
from linescan.cli.io import read_inputs
from linescan.cli.options import common_format_options, common_input_options
from linescan.config.logging import get_logger
from linescan.text.codes import has_content
from linescan.text.scanner import get_lines_and_line_starts, split_lines

if TYPE_CHECKING:
    from linescan.cli.io import InputSource
    from linescan.config import Config
    from linescan.config.logging import LinescanLogger
    from linescan.core.formats import OutputFormat
    from linescan.text.scanner import LinesAndLineStarts

logger: LinescanLogger = get_logger(__name__)


def build_lines_report(source: InputSource, config: Config) -> LinesReport:
    """Split one input into lines according to ``config``.

    With numbering enabled the original line numbers are kept even when empty
    lines are removed.

    Args:
        source (InputSource): The raw input.
        config (Config): Effective config (decoding, empty removal, numbering).

    Returns:
        LinesReport: The numbered lines of ``source``.
    """
    text: str = source.decode(config.encoding, config.errors)
    if config.number:
        result: LinesAndLineStarts = get_lines_and_line_starts(text)
        numbered = tuple(
            (number, line)
            for number, line in enumerate(result.lines, start=1)
            if not config.remove_empty or has_content(line)
        )
    else:
        lines: list[str] = split_lines(text, remove_empty_elements=config.remove_empty)
        numbered = tuple(enumerate(lines, start=1))
    logger.info("%s: %d line(s)", source.name, len(numbered))
    return LinesReport(name=source.name, lines=numbered)


@click.command(
    name="lines",
    help="Print the lines of each input (PATHS, or STDIN when none or '-').",
)
@common_input_options
@click.option(
    "--remove-empty/--keep-empty",
    "remove_empty",
    default=None,
    help="Drop empty and whitespace-only lines (default: keep, or as configured).",
)
@click.option(
    "--number/--no-number",
    "number",
    default=None,
    help="Prefix each line with its line number.",
)
@click.option(
    "--gutter-fill",
    "gutter_fill",
    default=None,
    help="Fill token used to pad line numbers (default: space).",
)
@common_format_options
def lines_command(
    *,
    paths: tuple[str, ...],
    encoding: str | None,
    errors: str | None,
    remove_empty: bool | None,
    number: bool | None,
    gutter_fill: str | None,
    output_format: OutputFormat | None,
) -> None:
    """Print the lines of each input."""
    ctx = click.get_current_context()
    config: Config = resolve_command_config(
        ctx,
        encoding=encoding,
        errors=errors,
        remove_empty=remove_empty,
        number=number,
        gutter_fill=gutter_fill or None,
        output_format=output_format,
    )
    reports: list[LinesReport] = [build_lines_report(s, config) for s in read_inputs(paths)]
    emit_lines(
        get_console(ctx),
        reports,
        config.output_format,
        number=config.number,
        gutter_fill=config.gutter_fill,
        banners=wants_banners(ctx),
    )
