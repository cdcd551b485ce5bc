# topmark:header:start
#
#   project      : LineScan
#   file         : types.py
#   file_relpath : src/linescan/config/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type aliases for parsed TOML data."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
