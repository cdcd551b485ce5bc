# topmark:header:start
#
#   project      : LineScan
#   file         : loaders.py
#   file_relpath : src/linescan/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Reads LineScan configuration from on-disk TOML files (``linescan.toml`` or the
``[tool.linescan]`` table of ``pyproject.toml``) and provides the runtime
defaults. Parsing and rendering are done with `tomlkit`; parsed documents are
returned as plain `dict` structures.

TOML has no `null` value, so `None` entries are stripped when rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linescan.config.keys import Toml
from linescan.config.logging import get_logger
from linescan.constants import PYPROJECT_TOOL_SECTION
from linescan.core.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from linescan.config.logging import LinescanLogger

    from .types import TomlTable

logger: LinescanLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return LineScan's runtime defaults as a Python dict.

    Performs no I/O. The returned value is a new dict so callers can mutate it.
    """
    return {
        Toml.SECTION_INPUT: {
            Toml.KEY_ENCODING: "utf-8",
            Toml.KEY_ERRORS: "strict",
        },
        Toml.SECTION_LINES: {
            Toml.KEY_REMOVE_EMPTY: False,
            Toml.KEY_NUMBER: False,
            Toml.KEY_GUTTER_FILL: " ",
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_FORMAT: OutputFormat.TEXT.value,
        },
    }


def load_toml_dict(path: Path) -> TomlTable | None:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``linescan.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable | None: The parsed TOML content, or ``None`` if the file could not
            be read or parsed (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return None
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return None
    except UnicodeDecodeError as e:
        logger.error("TOML file %s is not valid UTF-8: %s", path, e)
        return None


def extract_pyproject_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.linescan]`` table of a parsed ``pyproject.toml``.

    Args:
        data (TomlTable): The parsed ``pyproject.toml`` document.

    Returns:
        TomlTable | None: The tool table, or ``None`` when absent or malformed.
    """
    node: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, dict):
            return None
        node = cast("TomlTable", node).get(part)
    return cast("TomlTable", node) if isinstance(node, dict) else None


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
