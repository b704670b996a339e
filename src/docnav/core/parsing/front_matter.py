from __future__ import annotations

"""
Front Matter Parser.

Splits a markdown document into its leading '---' delimited metadata block
and the remaining body. Only flat 'key: value' lines are understood; there
is no nesting, list or multi-line value support.
"""

import logging
import re
from typing import Dict

from docnav.domain.nav_models import ParsedDocument

logger = logging.getLogger(__name__)

_FRONT_MATTER_RX = re.compile(r"^---\s*\n(.*?)\n---\s*\n(.*)$", re.DOTALL)
_META_LINE_RX = re.compile(r"^(\w+):\s*(.+)$", re.ASCII)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_front_matter(raw_text: str) -> ParsedDocument:
    """
    Separate front matter from the markdown body.

    Documents without a delimited block are returned untouched with an
    empty metadata mapping.

    Args:
        raw_text: Full markdown source.

    Returns:
        ParsedDocument: Metadata and body content.
    """
    match = _FRONT_MATTER_RX.match(raw_text)
    if not match:
        return ParsedDocument(metadata={}, content=raw_text)

    yaml_block, content = match.group(1), match.group(2)
    return ParsedDocument(metadata=_parse_meta_block(yaml_block), content=content)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_meta_block(block: str) -> Dict[str, str]:
    """Collect 'key: value' pairs, skipping any line that does not match."""
    meta: Dict[str, str] = {}
    for line in block.split("\n"):
        m = _META_LINE_RX.match(line.strip())
        if m:
            meta[m.group(1)] = m.group(2).strip()
        elif line.strip():
            logger.debug(f"Ignoring unrecognized front matter line: {line.strip()!r}")
    return meta
