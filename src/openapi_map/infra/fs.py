from __future__ import annotations

"""
FileSystem Infrastructure Layer.

File access used by the command-line host: reading registry documents and
persisting rendered trees. The tree builder itself performs no I/O.
"""

import json
import logging
import os
from typing import Any, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str]) -> str:
    """
    Expand '~' and environment variables, then make the path absolute.

    Args:
        path: Raw path string. Empty or None yields an empty string.

    Returns:
        str: Absolute path, or '' when no path was given.
    """
    p = (path or "").strip()
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# DOCUMENT I/O
# -----------------------------------------------------------------------------

def read_json_document(path: str) -> Any:
    """
    Load a JSON document.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not valid JSON.
    """
    logger.debug(f"Reading JSON document: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_text(path: str, content: str) -> None:
    """Write text to a file, creating parent directories as needed."""
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Output saved to file: {path}")
