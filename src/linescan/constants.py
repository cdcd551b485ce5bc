# topmark:header:start
#
#   project      : LineScan
#   file         : constants.py
#   file_relpath : src/linescan/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LINESCAN_VERSION: str = get_version("linescan")

# Environment variable consulted for the internal log level
LINESCAN_LOG_LEVEL_ENV: str = "LINESCAN_LOG_LEVEL"

# Config discovery (working directory)
LINESCAN_TOML_NAME: str = "linescan.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.linescan"

# Byte-order marks as raw code units (one byte per code unit)
UTF8_BOM: str = "\xef\xbb\xbf"
UTF16_LE_BOM: str = "\xff\xfe"
UTF16_BE_BOM: str = "\xfe\xff"
