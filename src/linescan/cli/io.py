# topmark:header:start
#
#   project      : LineScan
#   file         : io.py
#   file_relpath : src/linescan/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for Click commands.

Reads the raw bytes of each input (a path, or STDIN for ``-`` / no path) and
decodes them. Decoding never translates newlines, so CR, CRLF and the Unicode
separators reach the line scanner untouched.

All filesystem and decoding failures are mapped to
[`linescan.cli.errors`][] exceptions here so commands stay free of I/O policy.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from linescan.cli.errors import (
    LinescanEncodingError,
    LinescanFileNotFoundError,
    LinescanIOError,
    LinescanPermissionDeniedError,
    LinescanUsageError,
)
from linescan.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linescan.config.logging import LinescanLogger

logger: LinescanLogger = get_logger(__name__)

STDIN_SENTINEL: str = "-"
STDIN_NAME: str = "<stdin>"


@dataclass(frozen=True)
class InputSource:
    """Raw content of one input.

    Attributes:
        name (str): Display name (the path as given, or ``<stdin>``).
        data (bytes): The undecoded content.
    """

    name: str
    data: bytes

    def decode(self, encoding: str, errors: str) -> str:
        """Decode ``data`` with ``encoding`` and the ``errors`` handler.

        Args:
            encoding (str): A codec name known to `codecs`.
            errors (str): A codec error handler name.

        Returns:
            str: The decoded text, newlines untranslated.

        Raises:
            LinescanEncodingError: If the content cannot be decoded.
        """
        try:
            return self.data.decode(encoding, errors)
        except UnicodeDecodeError as exc:
            raise LinescanEncodingError(
                f"{self.name}: cannot decode as {encoding}: {exc.reason} at byte {exc.start}"
            ) from exc

    def as_code_units(self) -> str:
        """Map every byte to one code unit (Latin-1), for byte-order-mark inspection."""
        return self.data.decode("latin-1")


def validate_codec(encoding: str, errors: str) -> None:
    """Ensure ``encoding`` and ``errors`` name a known codec and error handler.

    Raises:
        LinescanUsageError: If either name is unknown.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise LinescanUsageError(f"Unknown encoding: {encoding!r}") from exc
    try:
        codecs.lookup_error(errors)
    except LookupError as exc:
        raise LinescanUsageError(f"Unknown error handler: {errors!r}") from exc


def _read_path(raw: str) -> InputSource:
    path = Path(raw)
    try:
        data: bytes = path.read_bytes()
    except FileNotFoundError as exc:
        raise LinescanFileNotFoundError("no such file", source=raw) from exc
    except PermissionError as exc:
        raise LinescanPermissionDeniedError("permission denied", source=raw) from exc
    except IsADirectoryError as exc:
        raise LinescanIOError("is a directory", source=raw) from exc
    except OSError as exc:
        raise LinescanIOError(f"cannot read: {exc.strerror or exc}", source=raw) from exc
    logger.debug("read %d byte(s) from %s", len(data), raw)
    return InputSource(name=raw, data=data)


def _read_stdin() -> InputSource:
    data: bytes = sys.stdin.buffer.read()
    logger.debug("read %d byte(s) from STDIN", len(data))
    return InputSource(name=STDIN_NAME, data=data)


def read_inputs(paths: Sequence[str]) -> list[InputSource]:
    """Read all inputs named on the command line.

    No paths means STDIN. ``-`` may appear at most once.

    Args:
        paths (Sequence[str]): Paths as given on the command line.

    Returns:
        list[InputSource]: One source per input, in order.

    Raises:
        LinescanUsageError: If ``-`` is given more than once.
    """
    if not paths:
        return [_read_stdin()]
    if list(paths).count(STDIN_SENTINEL) > 1:
        raise LinescanUsageError("STDIN ('-') may only be given once.")
    return [_read_stdin() if raw == STDIN_SENTINEL else _read_path(raw) for raw in paths]
