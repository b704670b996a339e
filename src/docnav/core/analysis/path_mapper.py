from __future__ import annotations

"""
File Path to URL Path Mapping.

Translates markdown file locations under the data root into public URL
paths. Numeric ordering prefixes ('01_', '02_', ...) only control sort
order on disk and never appear in URLs or titles.
"""

import posixpath
import re

from docnav.domain.constants import INDEX_BASENAME, MARKDOWN_EXT

_ORDER_PREFIX_RX = re.compile(r"^\d+_")
_SEGMENT_PREFIX_RX = re.compile(r"/\d+_")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def strip_order_prefix(name: str) -> str:
    """Remove a leading numeric ordering prefix such as '01_'."""
    return _ORDER_PREFIX_RX.sub("", name)


def file_path_to_data_path(file_path: str, data_root_dir: str) -> str:
    """
    Compute the data path of a markdown file.

    The data path is the path relative to the data root, with a leading
    '/', forward slashes and no '.md' suffix. Ordering prefixes are kept,
    which makes it the natural sort key for siblings.

    Args:
        file_path: Absolute path of the markdown file.
        data_root_dir: Absolute path of the data root.

    Returns:
        str: The data path (e.g. '/01_docs/02_setup/index').

    Raises:
        ValueError: If the file does not live under the data root.
    """
    rel_path = _relative_posix_path(file_path, data_root_dir)
    if rel_path.endswith(MARKDOWN_EXT):
        rel_path = rel_path[:-len(MARKDOWN_EXT)]
    return rel_path


def file_path_to_url_path(file_path: str, data_root_dir: str) -> str:
    """
    Convert an absolute markdown file path into its public URL path.

    Ordering prefixes are removed from every segment and 'index' files
    collapse onto their directory ('/docs/index.md' -> '/docs/').

    Args:
        file_path: Absolute path of the markdown file.
        data_root_dir: Absolute path of the data root.

    Returns:
        str: The URL path.

    Raises:
        ValueError: If the file does not live under the data root.
    """
    url_path = _SEGMENT_PREFIX_RX.sub("/", file_path_to_data_path(file_path, data_root_dir))

    if posixpath.basename(url_path) == INDEX_BASENAME:
        parent = posixpath.dirname(url_path)
        if parent == "/":
            return "/"
        return parent + "/"

    return url_path

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _relative_posix_path(file_path: str, data_root_dir: str) -> str:
    """
    Strip the data root prefix and normalize separators to '/'.

    The root only matches at a segment boundary: '/srv/data' is not a
    prefix of '/srv/data2/x.md'.

    Raises:
        ValueError: If the file does not live under the data root.
    """
    path = file_path.replace("\\", "/")
    root = data_root_dir.replace("\\", "/").rstrip("/")
    if not path.startswith(root + "/"):
        raise ValueError(f"'{file_path}' is not under data root '{data_root_dir}'")
    return path[len(root):]
