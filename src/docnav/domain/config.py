from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration dictionary and loads optional overrides
from a JSON file. The data directory is resolved here once and then passed
explicitly to the builder, never read from process-wide state afterwards.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from docnav.domain.constants import DESCRIPTION_MAX_LENGTH, OUTPUT_TREE
from docnav.infra.fs import get_default_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "data_dir": get_default_data_dir(),
        "encoding": "utf-8",

        # Extraction
        "description_length": DESCRIPTION_MAX_LENGTH,

        # Output
        "output_mode": OUTPUT_TREE,
        "output_file": "",
        "print_tree": False,
        "pretty": True,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration, merging a JSON file over the defaults.

    A missing path or file yields the defaults. A corrupted file is logged
    and ignored.

    Args:
        path: Optional JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not path:
        return config

    if not os.path.exists(path):
        logger.debug(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config
