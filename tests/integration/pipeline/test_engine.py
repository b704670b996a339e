from __future__ import annotations

"""
Integration tests for the navigation pipeline engine.

Verifies configuration handling, result summaries, JSON persistence in
each output mode and failure reporting.
"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from docnav.core.pipeline.engine import run_pipeline
from docnav.domain.nav_models import GroupNode


def test_pipeline_success_summary(data_tree: Path) -> None:
    result = run_pipeline({"data_dir": str(data_tree)})

    assert result.ok is True
    assert result.error == ""
    assert result.tree is not None
    assert result.tree.title == "TOP"
    assert result.summary == {"pages": 4, "stubs": 1, "groups": 5, "indexed": 5}
    assert set(result.props) == {"/docs/", "/docs/intro", "/docs/setup", "/guide/basics", "/misc/page"}
    assert result.tree_lines == []
    assert result.output_path == ""


def test_pipeline_print_tree(data_tree: Path) -> None:
    result = run_pipeline({"data_dir": str(data_tree), "print_tree": True})

    assert result.tree_lines[0] == "TOP"
    assert "├── Draft [stub]" in result.tree_lines


def test_pipeline_writes_tree_json(data_tree: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "tree.json"
    result = run_pipeline({"data_dir": str(data_tree)}, output_path=str(out))

    assert result.ok is True
    assert result.output_path == str(out)
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["title"] == "TOP"
    assert payload["isGroup"] is True
    assert [c["title"] for c in payload["children"]][0] == "Documentation"


def test_pipeline_writes_props_json(data_tree: Path, tmp_path: Path) -> None:
    out = tmp_path / "props.json"
    run_pipeline({"data_dir": str(data_tree), "output_mode": "props", "output_file": str(out)})

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["/docs/setup"] == {
        "title": "Setup",
        "description": "Install things.",
        "path": "/docs/setup",
        "dataPath": "/01_docs/02_setup",
        "modTime": "2024-01-02 03:04:05",
    }


def test_pipeline_writes_both(data_tree: Path, tmp_path: Path) -> None:
    out = tmp_path / "both.json"
    run_pipeline({"data_dir": str(data_tree), "output_mode": "both", "output_file": str(out)})

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert set(payload) == {"tree", "props"}


def test_pipeline_invalid_data_dir(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    result = run_pipeline({"data_dir": str(missing)})

    assert result.ok is False
    assert "Invalid data directory" in result.error
    assert result.data_dir == os.path.abspath(str(missing))
    assert result.tree is None


def test_pipeline_build_error_aborts(data_tree: Path) -> None:
    with patch(
        "docnav.core.pipeline.engine.build_data_file_tree",
        side_effect=PermissionError("denied"),
    ):
        result = run_pipeline({"data_dir": str(data_tree)})

    assert result.ok is False
    assert "denied" in result.error
    assert result.props == {}


def test_pipeline_output_write_failure(data_tree: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    result = run_pipeline({"data_dir": str(data_tree)}, output_path=str(blocker / "nav.json"))

    assert result.ok is False
    assert "Failed to write output file" in result.error
    assert result.summary["indexed"] == 5


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that stores raw name bytes")
def test_pipeline_writes_undecodable_directory_names(tmp_path: Path) -> None:
    data = tmp_path / "data"
    data.mkdir()
    bad_dir = os.path.join(os.fsencode(str(data)), b"caf\xe9")
    os.mkdir(bad_dir)
    with open(os.path.join(bad_dir, b"p.md"), "w", encoding="utf-8") as f:
        f.write("# Menu\n\nToday's specials.")
    out = tmp_path / "props.json"

    result = run_pipeline({"data_dir": str(data), "output_mode": "props", "output_file": str(out)})

    assert result.ok is True
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["/caf�/p"]["dataPath"] == "/caf�/p"
    assert result.tree.children[0].title == "caf�"


def test_pipeline_unencodable_output_is_failed_result(data_tree: Path, tmp_path: Path) -> None:
    out = tmp_path / "tree.json"
    bad_tree = GroupNode(title="caf\udce9", children=())

    with patch("docnav.core.pipeline.engine.build_data_file_tree", return_value=bad_tree):
        result = run_pipeline({"data_dir": str(data_tree)}, output_path=str(out))

    assert result.ok is False
    assert "Failed to write output file" in result.error
    assert not (tmp_path / "tree.json.tmp").exists()
    assert not out.exists()
