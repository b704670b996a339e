from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, data directory resolution, text reading and
JSON persistence used by the tree builder and the pipeline. Read errors are
left to propagate; only output writing reports failures to the caller.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Optional, Tuple

from docnav.domain.constants import DATA_DIR_ENV_VAR, DEFAULT_DATA_SUBDIR, MODTIME_FORMAT

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_project_root() -> str:
    """
    Resolve the directory the project is installed in (the parent of 'src').

    Returns:
        str: Absolute path to the project root.
    """
    here = os.path.dirname(os.path.abspath(__file__))
    return os.path.abspath(os.path.join(here, "..", "..", ".."))


def get_default_data_dir() -> str:
    """
    Resolve the default data directory.

    The DOCNAV_DATA_DIR environment variable takes precedence over
    '<project root>/data'.

    Returns:
        str: Absolute path to the data directory.
    """
    fallback = os.path.join(get_project_root(), DEFAULT_DATA_SUBDIR)
    return normalize_path(os.environ.get(DATA_DIR_ENV_VAR), fallback)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def read_text_file(file_path: str, encoding: str = "utf-8") -> str:
    """
    Read a whole text file.

    Args:
        file_path: Path to the file.
        encoding: Text encoding.

    Returns:
        str: File content with universal newlines.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the content does not match the encoding.
    """
    with open(file_path, "r", encoding=encoding) as f:
        return f.read()


def format_mtime(timestamp: float) -> str:
    """Format a POSIX timestamp as local 'YYYY-MM-DD HH:MM:SS'."""
    return datetime.fromtimestamp(timestamp).strftime(MODTIME_FORMAT)


def to_display_path(path: str) -> str:
    """
    Return a path safe to show or serialize as UTF-8 text.

    Names that are not valid UTF-8 reach Python as surrogate escapes; their
    undecodable bytes are replaced with U+FFFD. The result must not be used
    to open files.
    """
    return os.fsencode(path).decode("utf-8", errors="replace")

# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def save_json(path: str, payload: Any, pretty: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Persist a JSON document atomically, creating parent directories as needed.

    The document is encoded before anything touches the disk and written to a
    temporary file that replaces the destination only once complete, so a
    failure never leaves a partial file behind.

    Args:
        path: Destination file path.
        payload: JSON-compatible data.
        pretty: Indent the output when True.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    tmp_path = None
    try:
        data = json.dumps(payload, ensure_ascii=False, indent=2 if pretty else None) + "\n"
        encoded = data.encode("utf-8")

        out_dir = os.path.dirname(os.path.abspath(path))
        os.makedirs(out_dir, exist_ok=True)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "wb") as f:
            f.write(encoded)
        os.replace(tmp_path, path)
        tmp_path = None

        logger.info(f"Navigation data saved to file: {path}")
        return True, None
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Failed to save navigation data to '{path}': {e}")
        return False, str(e)
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
