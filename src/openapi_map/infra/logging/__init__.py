from __future__ import annotations

from .config import LoggingConfig
from .core import (
    CONFIGURED_ATTR,
    LISTENER_ATTR,
    configure_logging,
    get_logger,
    parse_level,
    reset_logging,
)
from .handlers import HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "reset_logging",
    "get_logger",
    "parse_level",
    "CONFIGURED_ATTR",
    "LISTENER_ATTR",
    "HANDLER_TAG_ATTR",
]
