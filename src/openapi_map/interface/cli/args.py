from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from openapi_map.domain.constants import DEFAULT_ROOT_TYPE

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the openapi-map CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="openapi-map",
        description="Build a navigable documentation tree from a type registry document.",
    )

    # --- Input ---
    p.add_argument(
        "registry_path",
        nargs="?",
        default=None,
        help="Registry JSON document (type name -> definition).",
    )
    p.add_argument(
        "-r", "--root",
        dest="root_type",
        default=None,
        help=f"Root type of the tree (default: '{DEFAULT_ROOT_TYPE}').",
    )
    p.add_argument(
        "-u", "--spec-url",
        dest="specification_url",
        default=None,
        help="Specification URL used to build documentation links.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the JSON tree to this file instead of stdout.",
    )
    p.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (0 for compact output).",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file providing defaults for the options above.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
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

    Options left unset map to None so they do not override lower layers.
    """
    overrides: Dict[str, Any] = {
        "registry_path": args.registry_path,
        "root_type": args.root_type,
        "specification_url": args.specification_url,
        "output_path": args.output_path,
        "indent": args.indent,
        "log_file": args.log_file,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides
