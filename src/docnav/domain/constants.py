from __future__ import annotations

"""
Domain Constants.

Centralizes the sentinels, file conventions and extraction limits shared
by the parsing and tree-building layers.
"""

# Environment variable that overrides the default data directory
DATA_DIR_ENV_VAR = "DOCNAV_DATA_DIR"
DEFAULT_DATA_SUBDIR = "data"

# -----------------------------------------------------------------------------
# TREE CONVENTIONS
# -----------------------------------------------------------------------------
ROOT_TITLE = "TOP"
ROOT_REL_DIR = "/"
MARKDOWN_EXT = ".md"
INDEX_FILE_NAME = "index.md"
INDEX_BASENAME = "index"

# -----------------------------------------------------------------------------
# METADATA EXTRACTION
# -----------------------------------------------------------------------------
UNTITLED = "Untitled"
DESCRIPTION_MAX_LENGTH = 150
MODTIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Recognized front matter keys
META_TITLE = "title"
META_DESCRIPTION = "description"
META_MODTIME = "modtime"

# -----------------------------------------------------------------------------
# OUTPUT MODES
# -----------------------------------------------------------------------------
OUTPUT_TREE = "tree"
OUTPUT_PROPS = "props"
OUTPUT_BOTH = "both"
OUTPUT_MODES = (OUTPUT_TREE, OUTPUT_PROPS, OUTPUT_BOTH)
