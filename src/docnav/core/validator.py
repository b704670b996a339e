from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (defaults, JSON file, CLI
overrides) and the pipeline. Handles type coercion, path normalization and
default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from docnav.domain.config import get_default_config
from docnav.domain.constants import OUTPUT_MODES
from docnav.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (e.g., from the CLI or a JSON file) into
    strictly typed parameters. Fills missing keys with domain defaults and
    drops keys the pipeline does not know.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    for key, value in config.items():
        if key not in defaults:
            msg = f"Unknown config key '{key}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Ignored.")
            continue
        merged[key] = value

    # 2. Schema Definition
    string_fields = ["data_dir", "encoding", "output_mode", "output_file"]
    bool_fields = ["print_tree", "pretty"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        # output_file is the only field where an empty string is meaningful
        fallback = "" if field == "output_file" else defaults[field]
        merged[field] = _as_str(merged.get(field), fallback, field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["description_length"] = _as_positive_int(
        merged.get("description_length"),
        defaults["description_length"],
        "description_length",
        warnings,
        strict,
    )

    # 4. Domain-Specific Normalization
    merged["data_dir"] = normalize_path(merged["data_dir"], defaults["data_dir"])
    merged["output_mode"] = _normalize_output_mode(
        merged["output_mode"], defaults["output_mode"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric strings and reject non-positive values."""
    if value is None:
        return fallback

    if isinstance(value, str) and not strict:
        try:
            coerced = int(value.strip())
        except ValueError:
            coerced = None
        if coerced is not None:
            warnings.append(f"Field '{field}' converted from '{value}' to int.")
            value = coerced

    if isinstance(value, int) and not isinstance(value, bool):
        if value > 0:
            return value
        msg = f"Invalid field '{field}': must be positive, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_output_mode(mode: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Restrict the output mode to the supported choices."""
    m = mode.strip().lower()
    if m in OUTPUT_MODES:
        return m

    msg = f"Invalid output mode '{mode}': expected one of {', '.join(OUTPUT_MODES)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
