"""Shared pytest fixtures for shelflife tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch
from shelflife.runtime.item_category_rules import load_item_category_rule_table
from shelflife.runtime.paths import CONFIG_DIR_ENV, reset_paths


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: MonkeyPatch) -> Iterator[Path]:
    """Point config lookup at an empty per-test directory and drop cached rule tables."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    reset_paths()
    load_item_category_rule_table.cache_clear()
    yield config_dir
    reset_paths()
    load_item_category_rule_table.cache_clear()
