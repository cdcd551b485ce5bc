# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the LineScan CLI."""

from __future__ import annotations
