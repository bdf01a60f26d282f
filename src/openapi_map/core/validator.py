from __future__ import annotations

"""
Configuration Validation Service.

Normalizes a raw run configuration (from files or the command line) into
strictly typed values, filling gaps with defaults. In lenient mode bad values
are replaced by their default and reported as warnings; in strict mode they
raise.
"""

import logging
from typing import Any, Dict, List, Tuple

from openapi_map.domain.config import get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = (
    "registry_path", "root_type", "specification_url",
    "output_path", "log_level", "log_file",
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a run configuration.

    Args:
        config: Raw configuration, usually a dictionary.
        strict: Raise TypeError/ValueError instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["indent"] = _as_int(merged.get("indent"), defaults["indent"], "indent", warnings, strict)
    if merged["indent"] < 0:
        msg = f"Invalid field 'indent': must be >= 0, received {merged['indent']}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["indent"] = defaults["indent"]

    # Text fields may legitimately be empty; root_type may not
    if not merged["root_type"]:
        merged["root_type"] = defaults["root_type"]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept ints and, in lenient mode, numeric strings."""
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        return value
    elif value is None:
        return fallback
    elif isinstance(value, str) and not strict:
        s = value.strip()
        if s.isdigit():
            warnings.append(f"Field '{field}' converted from '{value}' to {int(s)}.")
            return int(s)

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
