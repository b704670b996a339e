from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the pipeline engine to the CLI,
along with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docnav.domain.nav_models import FlatIndex, GroupNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NavResult:
    """
    Result of a complete navigation build.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        data_dir: Normalized data directory that was scanned.
        tree: Navigation tree (None on failure).
        props: Flat URL path index.
        tree_lines: ASCII outline, when a preview was requested.
        output_path: Path of the written JSON file, if any.
        summary: Node counts and execution details.
    """
    ok: bool
    error: str
    data_dir: str

    tree: Optional[GroupNode] = None
    props: FlatIndex = field(default_factory=dict)
    tree_lines: List[str] = field(default_factory=list)
    output_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        data_dir: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> NavResult:
    """
    Create a failed result instance.

    Args:
        error: Detailed error description.
        data_dir: The data directory that was targeted.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        NavResult: An immutable error result object.
    """
    return NavResult(ok=False, error=error, data_dir=data_dir, summary=summary_extra or {})


def create_success_result(
        data_dir: str,
        tree: GroupNode,
        props: FlatIndex,
        tree_lines: Optional[List[str]] = None,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> NavResult:
    """
    Create a successful result instance.

    Args:
        data_dir: Normalized data directory.
        tree: The built navigation tree.
        props: The flat URL path index.
        tree_lines: Optional ASCII outline.
        output_path: Path of the written JSON file.
        summary_extra: Execution metrics.

    Returns:
        NavResult: An immutable success result object.
    """
    return NavResult(
        ok=True,
        error="",
        data_dir=data_dir,
        tree=tree,
        props=props,
        tree_lines=tree_lines or [],
        output_path=output_path,
        summary=summary_extra or {},
    )
