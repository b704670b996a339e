from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the navigation build:
1. Validates configuration and the data directory.
2. Builds the navigation tree.
3. Flattens it into the URL path index.
4. Optionally renders an ASCII preview.
5. Optionally persists the JSON payload.
"""

import logging
import os
from typing import Any, Dict, Optional

from docnav.core.analysis.tree_builder import build_data_file_tree
from docnav.core.analysis.tree_flattener import flat_index_to_dict, flatten_node_props
from docnav.core.analysis.tree_renderer import render_nav_lines
from docnav.core.validator import validate_config
from docnav.domain.constants import OUTPUT_BOTH, OUTPUT_PROPS
from docnav.domain.nav_models import FlatIndex, GroupNode, NavNode, StubPage
from docnav.domain.pipeline_models import (
    NavResult,
    create_error_result,
    create_success_result,
)
from docnav.infra.fs import save_json

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        output_path: Optional[str] = None,
) -> NavResult:
    """
    Execute the full navigation build.

    Build errors (unreadable files, permission problems) abort the run and
    are reported through a failed NavResult; nothing partial is returned.

    Args:
        config: The configuration dictionary (raw or partial).
        output_path: Optional override for the JSON output file.

    Returns:
        NavResult: Object containing status, tree, index and summary.
    """
    logger.info("Navigation build started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Validation
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    data_dir = cfg["data_dir"]
    if not os.path.isdir(data_dir):
        msg = f"Invalid data directory: {data_dir}"
        logger.error(msg)
        return create_error_result(msg, data_dir)

    # -------------------------------------------------------------------------
    # 2) Tree & Index
    # -------------------------------------------------------------------------
    try:
        tree = build_data_file_tree(
            data_dir,
            encoding=cfg["encoding"],
            description_length=cfg["description_length"],
        )
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Navigation build failed: {e}"
        logger.error(msg)
        return create_error_result(msg, data_dir)

    props = flatten_node_props(tree)
    summary = summarize_tree(tree)
    summary["indexed"] = len(props)

    # -------------------------------------------------------------------------
    # 3) Preview
    # -------------------------------------------------------------------------
    tree_lines = []
    if cfg["print_tree"]:
        tree_lines = render_nav_lines(tree)
        logger.info("Tree Preview:\n" + "\n".join(tree_lines))

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    final_output = output_path or cfg["output_file"]
    if final_output:
        payload = build_payload(tree, props, cfg["output_mode"])
        ok, err = save_json(final_output, payload, pretty=cfg["pretty"])
        if not ok:
            return create_error_result(
                f"Failed to write output file {final_output}: {err}",
                data_dir,
                summary_extra=summary,
            )

    logger.info(
        f"Navigation build finished: {summary['pages']} pages, "
        f"{summary['groups']} groups, {summary['indexed']} indexed paths."
    )

    return create_success_result(
        data_dir=data_dir,
        tree=tree,
        props=props,
        tree_lines=tree_lines,
        output_path=final_output,
        summary_extra=summary,
    )


def build_payload(tree: GroupNode, props: FlatIndex, output_mode: str) -> Any:
    """
    Serialize the requested view(s) into JSON-compatible data.

    Args:
        tree: The navigation tree.
        props: The flat URL path index.
        output_mode: 'tree', 'props' or 'both'.

    Returns:
        Any: Tree dict, index dict, or both under 'tree'/'props' keys.
    """
    if output_mode == OUTPUT_PROPS:
        return flat_index_to_dict(props)
    if output_mode == OUTPUT_BOTH:
        return {"tree": tree.to_dict(), "props": flat_index_to_dict(props)}
    return tree.to_dict()


def summarize_tree(node: NavNode) -> Dict[str, int]:
    """Count pages, stubs and directories below (and including) a node."""
    counts = {"pages": 0, "stubs": 0, "groups": 0}
    _count_nodes(node, counts)
    return counts


def _count_nodes(node: NavNode, counts: Dict[str, int]) -> None:
    if isinstance(node, GroupNode):
        counts["groups"] += 1
        for child in node.children:
            _count_nodes(child, counts)
    elif isinstance(node, StubPage):
        counts["stubs"] += 1
    else:
        counts["pages"] += 1
