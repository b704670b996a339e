from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A shared markdown data tree used by builder, pipeline and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def data_tree(tmp_path: Path) -> Path:
    """
    Create a documentation data directory.

    Structure:
    /data
      /01_docs
        index.md        (heading + paragraph)
        01_intro.md     (paragraph only)
        02_setup.md     (front matter modtime)
      /02_guide
        index.md        (front matter only)
        01_basics.md
      /03_empty
        index.md        (front matter only, no siblings)
      /04_misc
        page.md
      draft.md          (front matter + whitespace body)
      notes.txt         (ignored)
    """
    root = tmp_path / "data"
    root.mkdir()

    docs = root / "01_docs"
    docs.mkdir()
    (docs / "index.md").write_text("# Documentation\n\nAll the docs.\n", encoding="utf-8")
    (docs / "01_intro.md").write_text("Intro paragraph without heading.\n", encoding="utf-8")
    (docs / "02_setup.md").write_text(
        "---\nmodtime: 2024-01-02 03:04:05\n---\n# Setup\n\nInstall things.\n\nMore.\n",
        encoding="utf-8",
    )

    guide = root / "02_guide"
    guide.mkdir()
    (guide / "index.md").write_text("---\ntitle: Guide\n---\n", encoding="utf-8")
    (guide / "01_basics.md").write_text("# Basics\n\nText\n", encoding="utf-8")

    empty = root / "03_empty"
    empty.mkdir()
    (empty / "index.md").write_text("---\ntitle: Empty Section\n---\n", encoding="utf-8")

    misc = root / "04_misc"
    misc.mkdir()
    (misc / "page.md").write_text("Just text.\n", encoding="utf-8")

    (root / "draft.md").write_text("---\ntitle: Draft\n---\n   \n", encoding="utf-8")
    (root / "notes.txt").write_text("not markdown", encoding="utf-8")

    return root
