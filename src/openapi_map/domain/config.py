from __future__ import annotations

"""
Configuration Domain Management.

Dict-based run configuration of the command-line host: defaults, optional
JSON configuration files, and a shallow merge of overrides.
"""

import logging
from typing import Any, Dict, Optional

from openapi_map.domain.constants import DEFAULT_ROOT_TYPE
from openapi_map.infra.fs import read_json_document

logger = logging.getLogger(__name__)

CONFIG_KEYS = (
    "registry_path",
    "root_type",
    "specification_url",
    "output_path",
    "indent",
    "log_level",
    "log_file",
)

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "registry_path": "",
        "root_type": DEFAULT_ROOT_TYPE,
        "specification_url": "",

        # Output
        "output_path": "",
        "indent": 2,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# LOADING AND MERGING
# -----------------------------------------------------------------------------

def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """
    Load a JSON configuration file over the defaults.

    Unknown keys are dropped with a warning.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON object.
    """
    config = get_default_config()
    if not path:
        return config

    data = read_json_document(path)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file '{path}' must contain a JSON object.")

    for key, value in data.items():
        if key in CONFIG_KEYS:
            config[key] = value
        else:
            logger.warning(f"Ignoring unknown configuration key: {key}")
    return config


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into base."""
    out = dict(base)
    for key in CONFIG_KEYS:
        if overrides.get(key) is not None:
            out[key] = overrides[key]
    return out
