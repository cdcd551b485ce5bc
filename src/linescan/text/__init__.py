# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text segmentation: line scanning, byte-order marks, padding and positions.

Everything in this package is a pure function over ``str``; no I/O is performed.
"""

from __future__ import annotations
