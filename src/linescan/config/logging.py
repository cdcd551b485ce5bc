# topmark:header:start
#
#   project      : LineScan
#   file         : logging.py
#   file_relpath : src/linescan/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup shared by the LineScan library and CLI.

The scanner reports per-call summaries at ``TRACE``, a level one notch below
``DEBUG`` so that ``-vv`` on the CLI does not drown diagnostics in scan noise.
Records go to STDERR only; STDOUT stays reserved for command output so that
``linescan lines`` and ``linescan bom --strip`` can be piped.

The level may also be forced through ``LINESCAN_LOG_LEVEL``, which takes a
level name (``trace``, ``warn`` ...) or a plain number.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from linescan.constants import LINESCAN_LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

# Short format once the user asks for INFO or quieter, source location below.
LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

_LEVEL_ALIASES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest floor first; the first floor a record reaches picks its color.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class LinescanLogger(logging.Logger):
    """``logging.Logger`` with an extra :meth:`trace` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at ``TRACE_LEVEL``.

        Used for the per-scan summaries (line count, terminator count), which
        are too chatty for ``DEBUG``.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.setLoggerClass(LinescanLogger)


class ChalkFormatter(logging.Formatter):
    """Color the whole formatted record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        text: str = super().format(record)
        for floor, style in _LEVEL_STYLES:
            if record.levelno >= floor:
                return style(text)
        return chalk.dim(text)


def parse_log_level(value: str) -> int | None:
    """Turn ``"debug"``, ``" WARN "`` or ``"10"`` into a logging level.

    Args:
        value (str): Level name (any case, surrounding blanks allowed) or a
            non-negative integer.

    Returns:
        int | None: The level, or None when ``value`` names no known level.
    """
    token: str = value.strip().upper()
    if token.isdigit():
        return int(token)
    return _LEVEL_ALIASES.get(token)


def resolve_env_log_level() -> int | None:
    """Level forced through ``LINESCAN_LOG_LEVEL``, if that variable is set and valid."""
    raw: str | None = os.environ.get(LINESCAN_LOG_LEVEL_ENV)
    return parse_log_level(raw) if raw else None


def _stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    return handler


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger for LineScan.

    Any previously installed root handlers are dropped, so the CLI (and each
    test) may call this repeatedly without duplicating output. Without an
    explicit ``level`` the environment decides, and logging is otherwise
    limited to ``CRITICAL``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(_stderr_handler(level))
    root.setLevel(level)


def get_logger(name: str) -> LinescanLogger:
    """Module logger, typed so that ``logger.trace(...)`` checks cleanly."""
    return cast("LinescanLogger", logging.getLogger(name))
