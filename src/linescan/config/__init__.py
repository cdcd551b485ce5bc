# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for LineScan.

Exposes the immutable [`Config`][linescan.config.model.Config] and its mutable
builder, loaded from ``linescan.toml`` or ``[tool.linescan]`` in ``pyproject.toml``
and overridden by CLI options.
"""

from __future__ import annotations

from linescan.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
