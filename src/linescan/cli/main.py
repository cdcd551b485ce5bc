# topmark:header:start
#
#   project      : LineScan
#   file         : main.py
#   file_relpath : src/linescan/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the LineScan CLI.

Group-level options (verbosity, color, config files) are resolved once and placed
into ``ctx.obj``; subcommands read the console and the frozen config from there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from linescan.cli.commands.bom import bom_command
from linescan.cli.commands.config import config_command
from linescan.cli.commands.lines import lines_command
from linescan.cli.commands.starts import starts_command
from linescan.cli.commands.version import version_command
from linescan.cli.console import ClickConsole
from linescan.cli.errors import LinescanConfigError
from linescan.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from linescan.config import MutableConfig
from linescan.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linescan.cli.console import ConsoleLike
    from linescan.config import Config
    from linescan.config.logging import LinescanLogger

logger: LinescanLogger = get_logger(__name__)


def load_config(config_files: Sequence[Path], *, no_config: bool) -> Config:
    """Load and freeze the configuration for this invocation.

    Args:
        config_files (Sequence[Path]): Explicit ``--config`` files, in order.
        no_config (bool): Skip discovery of ``pyproject.toml`` / ``linescan.toml``.

    Returns:
        Config: The merged, frozen configuration.

    Raises:
        LinescanConfigError: If an explicit config file is missing or cannot be loaded.
    """
    for path in config_files:
        if not path.is_file():
            raise LinescanConfigError(f"Config file not found: {path}")
        if MutableConfig.from_toml_file(path) is None:
            raise LinescanConfigError(f"Cannot load config file: {path}")

    logger.debug("explicit config files: %s", [str(p) for p in config_files])
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=config_files,
        no_config=no_config,
    )
    return draft.freeze()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    The internal log level follows ``LINESCAN_LOG_LEVEL`` when set, otherwise the
    ``-v``/``-q`` counts.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    console: ConsoleLike = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LineScan CLI: split text into lines and line starts, inspect byte-order marks.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Extra config file(s), merged after discovered ones (repeatable).",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Do not discover pyproject.toml / linescan.toml in the working directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the LineScan CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    ctx.obj["config"] = load_config(config_files, no_config=no_config)

    if ctx.invoked_subcommand is None:
        console: ConsoleLike = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(lines_command)

cli.add_command(starts_command)

cli.add_command(bom_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
