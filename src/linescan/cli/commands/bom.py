# topmark:header:start
#
#   project      : LineScan
#   file         : bom.py
#   file_relpath : src/linescan/cli/commands/bom.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan `bom` command.

Reports the byte-order mark of each input, or with ``--strip`` / ``--add``
writes a single input to stdout with its BOM removed or a UTF-8 BOM added.

Inputs are inspected as raw bytes, each byte mapped to one code unit, so the
result does not depend on any text encoding. ``--add`` leaves an existing BOM
(UTF-8 or UTF-16) untouched.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from linescan.cli.cmd_common import get_console, resolve_command_config
from linescan.cli.emitters import BomReport, emit_bom
from linescan.cli.errors import LinescanUsageError
from linescan.cli.io import read_inputs
from linescan.cli.options import common_format_options
from linescan.config.logging import get_logger
from linescan.text.bom import (
    add_utf8_byte_order_mark,
    detect_byte_order_mark,
    get_byte_order_mark,
    remove_byte_order_mark,
)

if TYPE_CHECKING:
    from linescan.cli.io import InputSource
    from linescan.config import Config
    from linescan.config.logging import LinescanLogger
    from linescan.core.formats import OutputFormat

logger: LinescanLogger = get_logger(__name__)


def build_bom_report(source: InputSource) -> BomReport:
    """Detect the byte-order mark of one input."""
    raw: str = source.as_code_units()
    return BomReport(
        name=source.name,
        kind=detect_byte_order_mark(raw),
        mark=get_byte_order_mark(raw),
    )


def rewrite_bom(source: InputSource, *, strip: bool) -> bytes:
    """Return the bytes of ``source`` with its BOM stripped, or a UTF-8 BOM added.

    Args:
        source (InputSource): The raw input.
        strip (bool): Strip the BOM if True, otherwise add a UTF-8 BOM when absent.

    Returns:
        bytes: The rewritten content.
    """
    raw: str = source.as_code_units()
    result: str = remove_byte_order_mark(raw) if strip else add_utf8_byte_order_mark(raw)
    if result is raw:
        logger.info("%s: unchanged", source.name)
    return result.encode("latin-1")


@click.command(
    name="bom",
    help="Report byte-order marks, or strip/add one (PATHS, or STDIN when none or '-').",
)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--strip",
    is_flag=True,
    default=False,
    help="Write the single input to stdout without its byte-order mark.",
)
@click.option(
    "--add",
    is_flag=True,
    default=False,
    help="Write the single input to stdout with a UTF-8 byte-order mark, unless it has a BOM.",
)
@common_format_options
def bom_command(
    *,
    paths: tuple[str, ...],
    strip: bool,
    add: bool,
    output_format: OutputFormat | None,
) -> None:
    """Report or rewrite byte-order marks."""
    ctx = click.get_current_context()
    if strip and add:
        raise LinescanUsageError("The '--strip' and '--add' options are mutually exclusive.")

    config: Config = resolve_command_config(ctx, output_format=output_format)
    sources: list[InputSource] = read_inputs(paths)

    if strip or add:
        if len(sources) != 1:
            raise LinescanUsageError("'--strip' and '--add' take exactly one input.")
        out = sys.stdout.buffer
        out.write(rewrite_bom(sources[0], strip=strip))
        out.flush()
        return

    emit_bom(get_console(ctx), [build_bom_report(s) for s in sources], config.output_format)
