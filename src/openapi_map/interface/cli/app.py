from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a CLI run: argument parsing, configuration resolution
(defaults, optional configuration file, command-line overrides), logging
bootstrap, registry loading, tree construction and JSON output.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from openapi_map.core.analysis.tree_builder import build_tree
from openapi_map.core.validator import validate_config
from openapi_map.domain.config import load_config_file, merge_config
from openapi_map.domain.errors import OpenapiMapError
from openapi_map.domain.registry_models import TypeDefinition, registry_from_mapping
from openapi_map.domain.tree_models import node_to_dict
from openapi_map.infra.fs import normalize_path, read_json_document, write_text
from openapi_map.infra.logging import LoggingConfig, configure_logging, get_logger
from openapi_map.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BUILD_ERROR = 1
EXIT_INPUT_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on registry errors, 2 on input errors,
        130 when interrupted.
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy: defaults < config file < command line
    try:
        base_conf = load_config_file(args.config_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: Cannot load configuration file: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    raw_conf = merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=normalize_path(conf["log_file"]) or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Registry loading
    registry_path = normalize_path(conf["registry_path"])
    if not registry_path:
        parser.print_usage(sys.stderr)
        print("ERROR: A registry document is required.", file=sys.stderr)
        return EXIT_INPUT_ERROR
    if not os.path.isfile(registry_path):
        logger.error(f"Registry document does not exist: {registry_path}")
        return EXIT_INPUT_ERROR

    try:
        registry = _load_registry(registry_path)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error(f"Invalid registry document '{registry_path}': {e!r}")
        return EXIT_INPUT_ERROR

    # 5. Tree construction
    try:
        root = build_tree(
            registry,
            conf["root_type"],
            conf["specification_url"] or None,
        )
    except OpenapiMapError as e:
        logger.error(f"Cannot build documentation tree: {e}")
        return EXIT_BUILD_ERROR
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    # 6. Output
    payload = json.dumps(
        node_to_dict(root),
        ensure_ascii=False,
        indent=conf["indent"] or None,
    )
    if conf["output_path"]:
        try:
            write_text(normalize_path(conf["output_path"]), payload + "\n")
        except OSError as e:
            logger.error(f"Failed to write '{conf['output_path']}': {e}")
            return EXIT_INPUT_ERROR
    else:
        print(payload)

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _load_registry(path: str) -> Dict[str, TypeDefinition]:
    document: Any = read_json_document(path)
    if not isinstance(document, dict):
        raise ValueError("registry document must be a JSON object")
    registry = registry_from_mapping(document)
    logger.debug(f"Loaded {len(registry)} registry entries from {path}")
    return registry


if __name__ == "__main__":
    sys.exit(main())
