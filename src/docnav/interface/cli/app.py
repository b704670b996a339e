from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, JSON file, CLI overrides), pipeline execution and output.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from docnav.core.pipeline.engine import build_payload, run_pipeline
from docnav.core.validator import validate_config
from docnav.domain.config import get_default_config, load_config
from docnav.domain.pipeline_models import NavResult
from docnav.infra.logging import LoggingConfig, configure_logging, get_logger
from docnav.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 build failure, 2 bad input, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (console on stderr so stdout stays pure JSON)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 2. Resolve base configuration
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    # 3. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    data_dir = clean_conf["data_dir"]
    if not os.path.isdir(data_dir):
        msg = f"Data directory does not exist: {data_dir}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Pipeline execution
    logger.info(f"Targeting data directory: {data_dir}")
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        msg = "Operation interrupted by user."
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1

    # 6. Output rendering
    if result.output_path:
        _print_human_summary(result)
    else:
        try:
            _print_json(result, clean_conf)
        except UnicodeEncodeError as e:
            logger.error(f"Navigation data could not be written to stdout: {e}")
            print(f"ERROR: Cannot encode navigation data for stdout: {e}", file=sys.stderr)
            return 1

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-empty override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_json(result: NavResult, cfg: Dict[str, Any]) -> None:
    """Write the requested payload to stdout."""
    payload = build_payload(result.tree, result.props, cfg["output_mode"])
    indent = 2 if cfg["pretty"] else None
    print(json.dumps(payload, ensure_ascii=False, indent=indent))


def _print_human_summary(result: NavResult) -> None:
    """Print a short report after the payload was written to a file."""
    summary = result.summary
    print("Navigation build completed.")
    print(f"Output file: {result.output_path}")
    labels = {
        "pages": "Pages",
        "stubs": "Front-matter-only pages",
        "groups": "Directories",
        "indexed": "Indexed URL paths",
    }
    for key, label in labels.items():
        if key in summary:
            print(f"{label}: {summary[key]}")


if __name__ == "__main__":
    sys.exit(main())
