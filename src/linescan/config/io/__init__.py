# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value extraction for LineScan configuration.

Re-exports the loaders (file and defaults) and the typed getters used by
[`linescan.config.model.MutableConfig`][].
"""

from __future__ import annotations

from linescan.config.io.getters import (
    get_bool_value_or_none,
    get_enum_value_or_none,
    get_string_value_or_none,
    get_table_value,
)
from linescan.config.io.loaders import (
    extract_pyproject_section,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from linescan.config.io.types import TomlTable

__all__ = [
    "TomlTable",
    "extract_pyproject_section",
    "get_bool_value_or_none",
    "get_enum_value_or_none",
    "get_string_value_or_none",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
