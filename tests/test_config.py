"""Configuration loading and merging."""

from __future__ import annotations

import json
from pathlib import Path

from qa_scanner.config import DEFAULT_CONFIG, load_config, merge_config


def test_defaults_without_path() -> None:
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["Global"]["debug"] = True
    assert DEFAULT_CONFIG["Global"]["debug"] is False


def test_file_values_are_merged_per_section(tmp_path: Path, capsys) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"Global": {"request_timeout": 3}, "Extra": {"x": 1}}), encoding="utf-8")
    config = load_config(str(path))
    assert config["Global"]["request_timeout"] == 3
    assert config["Global"]["user_agent"] == DEFAULT_CONFIG["Global"]["user_agent"]
    assert config["Render"] == DEFAULT_CONFIG["Render"]
    assert config["Extra"] == {"x": 1}
    assert "Loaded custom configuration" in capsys.readouterr().out


def test_missing_or_invalid_file_falls_back_to_defaults(tmp_path: Path, capsys) -> None:
    assert load_config(str(tmp_path / "absent.json")) == DEFAULT_CONFIG
    assert "not found" in capsys.readouterr().out

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_config(str(bad)) == DEFAULT_CONFIG
    assert "Error decoding JSON" in capsys.readouterr().out

    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(listed)) == DEFAULT_CONFIG


def test_merge_config_does_not_mutate_base() -> None:
    merged = merge_config(DEFAULT_CONFIG, {"Render": {"timeout": 5}})
    assert merged["Render"]["timeout"] == 5
    assert DEFAULT_CONFIG["Render"]["timeout"] == 20
