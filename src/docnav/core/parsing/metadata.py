from __future__ import annotations

"""
Page Metadata Extractor.

Derives the display title and the short description of a markdown page.
Front matter values always win; otherwise the body is inspected, and for
titles the file name serves as the last resort.
"""

import os
import re
from typing import Optional

from docnav.core.analysis.path_mapper import strip_order_prefix
from docnav.core.parsing.front_matter import parse_front_matter
from docnav.domain.constants import (
    DESCRIPTION_MAX_LENGTH,
    INDEX_BASENAME,
    MARKDOWN_EXT,
    META_DESCRIPTION,
    META_TITLE,
    UNTITLED,
)

_HEADING_RX = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_HEADING_LINE_RX = re.compile(r"^#\s+.+$", re.MULTILINE)
_PARAGRAPH_RX = re.compile(r"^\s*(.+?)(?:\n\n|$)", re.DOTALL)
_COMMENT_RX = re.compile(r"<!--.*?-->", re.DOTALL)
_TAG_RX = re.compile(r"<[^>]*>")
_WHITESPACE_RX = re.compile(r"\s+")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_title(markdown: str, file_path: Optional[str] = None) -> str:
    """
    Resolve the page title.

    Order: front matter 'title', first level-one heading, file name
    (parent directory name for 'index.md'), then 'Untitled'. Numeric
    ordering prefixes are stripped from file-derived titles.

    Args:
        markdown: Full markdown source.
        file_path: Optional path of the source file.

    Returns:
        str: The resolved title.
    """
    parsed = parse_front_matter(markdown)
    title = parsed.metadata.get(META_TITLE)
    if title:
        return title

    m = _HEADING_RX.search(parsed.content)
    if m:
        return m.group(1).strip()

    if file_path:
        return _title_from_file_name(file_path)

    return UNTITLED


def extract_description(markdown: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    """
    Resolve the page description.

    Uses the front matter 'description' when present. Otherwise takes the
    first paragraph of the body (after dropping the first heading line),
    strips markup, collapses whitespace and truncates to `max_length`
    characters.

    Args:
        markdown: Full markdown source.
        max_length: Maximum number of characters kept.

    Returns:
        str: The description, or an empty string when the body has no text.
    """
    parsed = parse_front_matter(markdown)
    description = parsed.metadata.get(META_DESCRIPTION)
    if description:
        return description

    body = _HEADING_LINE_RX.sub("", parsed.content, count=1).strip()
    m = _PARAGRAPH_RX.match(body)
    if not m:
        return ""

    paragraph = strip_tags(m.group(1))
    paragraph = _WHITESPACE_RX.sub(" ", paragraph)
    return paragraph[:max_length]


def strip_tags(text: str) -> str:
    """Remove HTML comments and tags, keeping the enclosed text."""
    return _TAG_RX.sub("", _COMMENT_RX.sub("", text))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _title_from_file_name(file_path: str) -> str:
    """Derive a title from the file name or, for index files, its directory."""
    normalized = file_path.replace("\\", "/")
    basename = os.path.basename(normalized)
    if basename.endswith(MARKDOWN_EXT):
        basename = basename[:-len(MARKDOWN_EXT)]

    if basename == INDEX_BASENAME:
        basename = os.path.basename(os.path.dirname(normalized))

    return strip_order_prefix(basename)
