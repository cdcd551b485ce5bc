# topmark:header:start
#
#   project      : LineScan
#   file         : cmd_common.py
#   file_relpath : src/linescan/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by subcommands: fetching the console and the
group-level config from the Click context, and applying per-command overrides.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from linescan.cli.io import validate_codec
from linescan.config.logging import get_logger

if TYPE_CHECKING:
    import click

    from linescan.cli.console import ConsoleLike
    from linescan.config import Config
    from linescan.config.logging import LinescanLogger

logger: LinescanLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group."""
    console: ConsoleLike = ctx.obj["console"]
    return console


def resolve_command_config(ctx: click.Context, **overrides: Any) -> Config:
    """Return the group config with this command's CLI overrides applied.

    Overrides set to ``None`` (option not given) leave the configured value in place.

    Args:
        ctx (click.Context): Current Click context; ``ctx.obj["config"]`` holds the
            group-level config.
        **overrides (Any): Values keyed by [`MutableConfig`][linescan.config.MutableConfig]
            attribute names.

    Returns:
        Config: The effective config for this command.

    Raises:
        LinescanUsageError: If the effective encoding or error handler is unknown.
    """
    base: Config = ctx.obj["config"]
    config: Config = base.thaw().apply_args(overrides).freeze()
    validate_codec(config.encoding, config.errors)
    logger.debug("effective config: %s", config)
    return config


def wants_banners(ctx: click.Context) -> bool:
    """Return True when ``-v`` was given, which forces per-input banners."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING)) <= logging.INFO
