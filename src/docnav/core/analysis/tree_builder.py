from __future__ import annotations

"""
Navigation Tree Builder.

Walks the data directory and assembles the navigation tree. Each markdown
file becomes a page node; each directory becomes a group node that adopts
its 'index.md' page when one exists. I/O errors are not caught: a missing
root or an unreadable file aborts the whole build.
"""

import logging
import os
from typing import List, Optional, Tuple

from docnav.core.analysis.path_mapper import (
    file_path_to_data_path,
    file_path_to_url_path,
    strip_order_prefix,
)
from docnav.core.parsing.front_matter import parse_front_matter
from docnav.core.parsing.metadata import extract_description, extract_title
from docnav.domain.constants import (
    DESCRIPTION_MAX_LENGTH,
    INDEX_FILE_NAME,
    MARKDOWN_EXT,
    META_MODTIME,
    ROOT_REL_DIR,
    ROOT_TITLE,
)
from docnav.domain.nav_models import FullPage, GroupNode, NavNode, PageNode, StubPage
from docnav.infra.fs import format_mtime, read_text_file, to_display_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_data_file_tree(
        data_dir: str,
        encoding: str = "utf-8",
        description_length: int = DESCRIPTION_MAX_LENGTH,
) -> GroupNode:
    """
    Build the navigation tree for a data directory.

    Args:
        data_dir: Root directory holding the markdown sources.
        encoding: Text encoding used to read markdown files.
        description_length: Maximum description length in characters.

    Returns:
        GroupNode: Root node titled 'TOP' (unless a root 'index.md'
                   supplies its own title).

    Raises:
        OSError: If the root or any entry cannot be listed or read.
    """
    root = os.path.realpath(data_dir)
    logger.info(f"Building navigation tree for: {root}")

    tree = _walk(root, ROOT_REL_DIR, ROOT_TITLE, encoding, description_length)

    logger.debug(f"Navigation tree built with {len(tree.children)} top-level entries")
    return tree


def build_page_node(
        file_path: str,
        data_dir: str,
        encoding: str = "utf-8",
        description_length: int = DESCRIPTION_MAX_LENGTH,
) -> PageNode:
    """
    Turn a single markdown file into a page node.

    Files whose body is empty after the front matter become stubs without
    a URL path or timestamp.

    Args:
        file_path: Absolute path of the markdown file.
        data_dir: Absolute path of the data root.
        encoding: Text encoding used to read the file.
        description_length: Maximum description length in characters.

    Returns:
        PageNode: A FullPage or a StubPage.
    """
    markdown = read_text_file(file_path, encoding)
    parsed = parse_front_matter(markdown)

    # Undecodable name bytes must not leak into titles or paths
    shown_path = to_display_path(file_path)
    shown_root = to_display_path(data_dir)

    title = extract_title(markdown, shown_path)
    description = extract_description(markdown, description_length)
    data_path = file_path_to_data_path(shown_path, shown_root)

    if not parsed.content.strip():
        logger.debug(f"Front-matter-only page excluded from navigation: {data_path}")
        return StubPage(title=title, description=description, data_path=data_path)

    mod_time = parsed.metadata.get(META_MODTIME) or format_mtime(os.path.getmtime(file_path))

    return FullPage(
        title=title,
        description=description,
        path=file_path_to_url_path(shown_path, shown_root),
        data_path=data_path,
        mod_time=mod_time,
    )


def sort_key(node: NavNode) -> str:
    """Sibling ordering key: data path when known, title otherwise."""
    if node.data_path is not None:
        return node.data_path
    return node.title

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(
        root: str,
        rel_dir: str,
        title: str,
        encoding: str,
        description_length: int,
) -> GroupNode:
    """
    Build the group node for one directory and, recursively, its subtree.
    """
    children: List[NavNode] = []
    index_page: Optional[PageNode] = None

    for name, full_path, is_dir in _list_entries(os.path.join(root, rel_dir.lstrip("/"))):
        if is_dir:
            subtree = _walk(
                root,
                f"{rel_dir}{name}/",
                strip_order_prefix(to_display_path(name)),
                encoding,
                description_length,
            )
            children.append(subtree)
            continue

        if os.path.splitext(name)[1] != MARKDOWN_EXT:
            continue

        page = build_page_node(full_path, root, encoding, description_length)
        if name == INDEX_FILE_NAME:
            index_page = page
        else:
            children.append(page)

    children.sort(key=sort_key)

    if index_page is None:
        return GroupNode(title=title, children=tuple(children))

    return GroupNode(
        title=index_page.title,
        children=tuple(children),
        description=index_page.description,
        data_path=index_page.data_path,
        path=index_page.path,
        mod_time=index_page.mod_time,
    )


def _list_entries(directory: str) -> List[Tuple[str, str, bool]]:
    """
    List directory entries as (name, full path, is directory), by name.
    """
    with os.scandir(directory) as it:
        entries = [(e.name, e.path, e.is_dir()) for e in it]
    entries.sort(key=lambda item: item[0])
    return entries
