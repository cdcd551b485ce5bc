# topmark:header:start
#
#   project      : LineScan
#   file         : keys.py
#   file_relpath : src/linescan/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for LineScan configuration.

These constants define the external configuration schema as it appears in
``linescan.toml`` and in ``[tool.linescan]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by LineScan configuration.

    The ordering mirrors [`load_defaults_dict`][linescan.config.io.loaders.load_defaults_dict].
    """

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_ENCODING: Final[str] = "encoding"
    KEY_ERRORS: Final[str] = "errors"

    # [lines]
    SECTION_LINES: Final[str] = "lines"

    KEY_REMOVE_EMPTY: Final[str] = "remove_empty"
    KEY_NUMBER: Final[str] = "number"
    KEY_GUTTER_FILL: Final[str] = "gutter_fill"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"
