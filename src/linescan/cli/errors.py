# topmark:header:start
#
#   project      : LineScan
#   file         : errors.py
#   file_relpath : src/linescan/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors that end a LineScan command with a sysexits-style status.

Only the CLI raises these; the text helpers are total. Each subclass fixes the
[`ExitCode`][linescan.core.exit_codes.ExitCode] a failure maps to, so callers
choose the class and Click's standalone mode does the rest.
"""

from __future__ import annotations

import sys
from typing import IO, Any

import click

from linescan.core.exit_codes import ExitCode


class LinescanError(click.ClickException):
    """A command failure, printed as ``linescan: <message>`` on stderr.

    Args:
        message (str): What went wrong.
        source (str | None): The input or config file concerned; prefixed to the
            message when given.
    """

    exit_code: int = ExitCode.FAILURE

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source: str | None = source

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message in red (color is dropped when stderr is not a terminal)."""
        stream: IO[Any] = file if file is not None else sys.stderr
        click.secho(f"linescan: {self.format_message()}", file=stream, fg="red")


class LinescanUsageError(LinescanError):
    """Conflicting options, an unknown codec, or a repeated ``-``."""

    exit_code = ExitCode.USAGE_ERROR


class LinescanEncodingError(LinescanError):
    """Input bytes that the chosen codec and error handler cannot decode."""

    exit_code = ExitCode.ENCODING_ERROR


class LinescanFileNotFoundError(LinescanError):
    """An input path that does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LinescanIOError(LinescanError):
    """An input that exists but cannot be read as a file (e.g. a directory)."""

    exit_code = ExitCode.IO_ERROR


class LinescanPermissionDeniedError(LinescanError):
    """An input the current user may not read."""

    exit_code = ExitCode.PERMISSION_DENIED


class LinescanConfigError(LinescanError):
    """An explicit ``--config`` file that is missing or cannot be parsed."""

    exit_code = ExitCode.CONFIG_ERROR
