# topmark:header:start
#
#   project      : LineScan
#   file         : getters.py
#   file_relpath : src/linescan/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of a value. A missing key yields
``None``; a value of the wrong type or an unknown enum value logs a warning,
records it in the caller's ``warnings`` list, and also yields ``None`` so the
lower-precedence layer stays in effect.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

from linescan.config.logging import get_logger

if TYPE_CHECKING:
    from linescan.config.logging import LinescanLogger

    from .types import TomlTable

logger: LinescanLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def _warn(warnings: list[str], message: str) -> None:
    logger.warning("%s", message)
    warnings.append(message)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table, or an empty dict when missing or not a table.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r; using {}", key, value)
    return {}


def get_string_value_or_none(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    _warn(warnings, f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_bool_value_or_none(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are not coerced.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    _warn(warnings, f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_enum_value_or_none(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    warnings: list[str],
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the enum values (case-insensitive).

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        enum_cls (type[E]): The enum to parse into.
        where (str): TOML location prefix (e.g. ``"[output]"``), used in warnings.
        warnings (list[str]): Receives a message for each rejected value.

    Returns:
        E | None: The enum member, or ``None`` when missing or invalid.
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        _warn(
            warnings,
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}",
        )
        return None

    for member in enum_cls:
        if str(member.value).lower() == raw.lower():
            return member

    allowed: str = ", ".join(str(e.value) for e in enum_cls)
    _warn(warnings, f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return None
