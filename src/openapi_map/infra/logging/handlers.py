from __future__ import annotations

"""
Logging Handler Factories.

Handlers created here are tagged so that reconfiguration only detaches what
openapi_map attached, never handlers installed by the embedding application.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

HANDLER_TAG_ATTR: str = "_openapi_map_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_tagged(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return tag_handler(handler)


def rotating_file_handler(
        log_file: str,
        level: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open a size-rotated log file.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None if the file cannot
        be opened (a warning is written to stderr instead).
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(formatter)
    tag_handler(handler)
    return handler
