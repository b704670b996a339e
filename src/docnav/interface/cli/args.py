from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from docnav.domain.constants import OUTPUT_BOTH, OUTPUT_PROPS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docnav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docnav",
        description="Build a navigation tree and URL index from a directory of markdown files.",
    )

    # --- Input ---
    p.add_argument(
        "-d", "--data-dir",
        dest="data_dir",
        default=None,
        help="Root directory of the markdown sources (default: $DOCNAV_DATA_DIR or <project>/data).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration overrides.",
    )

    # --- Output Selection ---
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--props",
        action="store_true",
        help="Emit the flat URL path index instead of the tree.",
    )
    mode.add_argument(
        "--both",
        action="store_true",
        help="Emit the tree and the flat index together.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    p.add_argument(
        "--compact",
        action="store_true",
        help="Write JSON without indentation.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log an ASCII outline of the navigation tree.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the --config file and start from built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["data_dir"] = args.data_dir
    overrides["output_file"] = args.output_file

    if args.props:
        overrides["output_mode"] = OUTPUT_PROPS
    elif args.both:
        overrides["output_mode"] = OUTPUT_BOTH

    if args.print_tree:
        overrides["print_tree"] = True
    if args.compact:
        overrides["pretty"] = False

    return overrides
