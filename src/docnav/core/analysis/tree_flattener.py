from __future__ import annotations

"""
Navigation Tree Flattener.

Derives the URL path lookup table from a built navigation tree.
"""

from typing import Any, Dict, Optional

from docnav.domain.nav_models import FlatEntry, FlatIndex, NavNode


def flatten_node_props(node: NavNode, props: Optional[FlatIndex] = None) -> FlatIndex:
    """
    Collect one entry per reachable node, keyed by its URL path.

    Nodes without a path (stubs and plain directories) add nothing
    themselves, but the children of every group are still visited.

    Args:
        node: Tree (or subtree) to flatten.
        props: Optional accumulator, updated in place.

    Returns:
        FlatIndex: The accumulator.
    """
    if props is None:
        props = {}

    if node.path is not None:
        props[node.path] = FlatEntry(
            title=node.title,
            description=node.description or "",
            path=node.path,
            data_path=node.data_path,
            mod_time=node.mod_time,
        )

    if node.is_group:
        for child in node.children:
            flatten_node_props(child, props)

    return props


def flat_index_to_dict(props: FlatIndex) -> Dict[str, Dict[str, Any]]:
    """Serialize a flat index into plain JSON-compatible dictionaries."""
    return {path: entry.to_dict() for path, entry in props.items()}
