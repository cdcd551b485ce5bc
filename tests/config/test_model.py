# topmark:header:start
#
#   project      : LineScan
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the config builder: defaults, TOML parsing, merging and freezing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from linescan.config import Config, MutableConfig
from linescan.core.formats import OutputFormat
from tests.conftest import make_config, mark_config

if TYPE_CHECKING:
    from pathlib import Path


@mark_config
def test_defaults_freeze_to_documented_values() -> None:
    """Defaults decode strict UTF-8 and print plain text."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.encoding == "utf-8"
    assert cfg.errors == "strict"
    assert cfg.remove_empty is False
    assert cfg.number is False
    assert cfg.gutter_fill == " "
    assert cfg.output_format is OutputFormat.TEXT
    assert cfg.warnings == ()


@mark_config
def test_empty_draft_freezes_to_defaults() -> None:
    """Unset fields fall back to defaults on freeze."""
    assert MutableConfig().freeze() == MutableConfig.from_defaults().freeze()


@mark_config
def test_from_toml_dict_reads_all_sections() -> None:
    """Every supported key is read from its table."""
    draft = MutableConfig.from_toml_dict(
        {
            "input": {"encoding": "latin-1", "errors": "replace"},
            "lines": {"remove_empty": True, "number": True, "gutter_fill": "0"},
            "output": {"format": "JSON"},
        }
    )
    assert draft.encoding == "latin-1"
    assert draft.errors == "replace"
    assert draft.remove_empty is True
    assert draft.number is True
    assert draft.gutter_fill == "0"
    assert draft.output_format is OutputFormat.JSON
    assert draft.warnings == []


@mark_config
def test_invalid_values_become_warnings(tmp_path: Path) -> None:
    """Bad values are dropped with a warning naming the file and key."""
    source: Path = tmp_path / "linescan.toml"
    draft = MutableConfig.from_toml_dict(
        {
            "input": {"encoding": "no-such-codec", "errors": 3},
            "lines": {"remove_empty": 1, "gutter_fill": ""},
            "output": {"format": "yaml"},
        },
        config_file=source,
    )
    assert draft.encoding is None
    assert draft.errors is None
    assert draft.remove_empty is None
    assert draft.gutter_fill is None
    assert draft.output_format is None
    assert len(draft.warnings) == 5
    assert all(w.startswith(f"{source}: ") for w in draft.warnings)
    assert any("[input].encoding" in w for w in draft.warnings)
    assert any("[output].format" in w and "allowed" in w for w in draft.warnings)


@mark_config
def test_merge_with_is_last_wins_for_set_fields() -> None:
    """Only fields set in the overriding draft replace existing values."""
    base = MutableConfig(encoding="latin-1", number=True, config_files=["a"])
    override = MutableConfig(number=False, gutter_fill=".", config_files=["b"])
    merged = base.merge_with(override)

    assert merged.encoding == "latin-1"
    assert merged.number is False
    assert merged.gutter_fill == "."
    assert merged.config_files == ["a", "b"]


@mark_config
def test_apply_args_ignores_none() -> None:
    """CLI overrides left as None keep the configured value."""
    draft = MutableConfig(remove_empty=True, encoding="cp1252")
    draft.apply_args({"remove_empty": None, "encoding": "utf-16", "output_format": "ndjson"})

    assert draft.remove_empty is True
    assert draft.encoding == "utf-16"
    assert draft.output_format is OutputFormat.NDJSON


@mark_config
def test_thaw_freeze_round_trip() -> None:
    """Thawing and refreezing preserves every field."""
    cfg: Config = make_config(number=True, gutter_fill="0", output_format=OutputFormat.MARKDOWN)
    assert cfg.thaw().freeze() == cfg


@mark_config
def test_frozen_config_rejects_mutation() -> None:
    """A frozen config cannot be edited in place."""
    cfg: Config = make_config()
    with pytest.raises(AttributeError):
        cfg.number = True  # type: ignore[misc]


@mark_config
def test_to_toml_renders_all_sections() -> None:
    """The rendered document contains each table and key."""
    text: str = make_config(remove_empty=True).to_toml()
    assert "[input]" in text
    assert "[lines]" in text
    assert "[output]" in text
    assert "remove_empty = true" in text
    assert 'format = "text"' in text
