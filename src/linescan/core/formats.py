# topmark:header:start
#
#   project      : LineScan
#   file         : formats.py
#   file_relpath : src/linescan/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats accepted by ``--format`` and ``[output] format``."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How a command renders its reports.

    ``text`` and ``markdown`` are for people; ``json`` (one document wrapping all
    inputs) and ``ndjson`` (one object per input) are for programs and are never
    colored.
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
    NDJSON = "ndjson"

    @property
    def is_machine(self) -> bool:
        """True for ``json`` and ``ndjson``."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)
