# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from move_name_matcher.utils import clear_config_cache, reload_topics


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Does: Keep tests independent of the caller's data dir / debug topic env."""
    for var in ("MOVE_MATCHER_DATA_DIR", "DATA_DIR", "MOVE_MATCHER_DEBUG_TOPICS"):
        monkeypatch.delenv(var, raising=False)
    reload_topics()
    clear_config_cache()
    yield
    clear_config_cache()
    reload_topics()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """
    A tiny data dir with one registered dataset ("Mini") and the default exemptions.
    """
    d = tmp_path / "data"
    d.mkdir()
    (d / "datasets.json").write_text(
        json.dumps({"Mini": {"creatures": "mini_creatures.txt", "moves": "mini_moves.txt"}}),
        encoding="utf-8",
    )
    (d / "exemptions.json").write_text(json.dumps(["False Swipe", "Pain Split"]), encoding="utf-8")
    (d / "mini_creatures.txt").write_text("Pikachu\n\n  Swi  \nZzz\n", encoding="utf-8")
    (d / "mini_moves.txt").write_text("Pika Punch\nFalse Swipe\n\nTwist\n", encoding="utf-8")
    return d
