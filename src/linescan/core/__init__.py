# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core definitions shared across LineScan frontends (formats, exit codes).

This package has no Click or console dependencies.
"""

from __future__ import annotations
