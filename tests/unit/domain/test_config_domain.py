from __future__ import annotations

"""
Unit tests for Configuration Domain Management.

Verifies default generation, data directory resolution from the
environment and JSON file merging.
"""

import json
import os
from pathlib import Path

import pytest

from docnav.domain.config import get_default_config, load_config
from docnav.infra.fs import get_project_root


def test_default_data_dir_from_project_root(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCNAV_DATA_DIR", raising=False)
    cfg = get_default_config()

    assert cfg["data_dir"] == os.path.join(get_project_root(), "data")
    assert cfg["description_length"] == 150
    assert cfg["output_mode"] == "tree"


def test_default_data_dir_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DOCNAV_DATA_DIR", str(tmp_path))
    assert get_default_config()["data_dir"] == os.path.abspath(str(tmp_path))


def test_load_config_without_file_returns_defaults() -> None:
    assert load_config(None) == get_default_config()


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_config_merges_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "docnav.json"
    cfg_file.write_text(json.dumps({"output_mode": "props", "description_length": 80}), encoding="utf-8")

    cfg = load_config(str(cfg_file))

    assert cfg["output_mode"] == "props"
    assert cfg["description_length"] == 80
    assert cfg["encoding"] == "utf-8"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_config_corrupted_file_returns_defaults(tmp_path: Path, content: str) -> None:
    cfg_file = tmp_path / "docnav.json"
    cfg_file.write_text(content, encoding="utf-8")

    assert load_config(str(cfg_file)) == get_default_config()
