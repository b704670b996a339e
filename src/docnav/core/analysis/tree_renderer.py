from __future__ import annotations

"""
Navigation Tree Renderer.

Converts a navigation tree into an ASCII outline for terminal previews.
"""

from typing import List

from docnav.domain.nav_models import GroupNode, NavNode, StubPage

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_nav_tree(node: GroupNode, lines: List[str], prefix: str = "") -> None:
    """
    Recursively append the outline of a group's children to `lines`.

    Uses standard ASCII connectors (├──, └──). Reachable nodes show their
    URL path, front-matter-only pages are marked as stubs.

    Args:
        node: Group whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(node.children)

    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(child)}")

        if isinstance(child, GroupNode) and child.is_group:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_nav_tree(child, lines, prefix=new_prefix)


def render_nav_lines(tree: GroupNode) -> List[str]:
    """Render a whole tree, root label first."""
    lines: List[str] = [_label(tree)]
    render_nav_tree(tree, lines)
    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _label(node: NavNode) -> str:
    if isinstance(node, StubPage):
        return f"{node.title} [stub]"
    if node.path is not None:
        return f"{node.title} ({node.path})"
    return node.title
