from __future__ import annotations

"""
Logging Setup.

Configures the root logger once per process: a single tagged QueueHandler on
the root feeds a QueueListener that owns the real console and file handlers,
so file writes never happen on the building thread. Library modules only
call logging.getLogger(__name__); configuring is left to hosts such as the CLI.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from openapi_map.infra.logging.config import LEVELS, LoggingConfig
from openapi_map.infra.logging.handlers import (
    console_handler,
    is_tagged,
    rotating_file_handler,
    tag_handler,
)

CONFIGURED_ATTR: str = "_openapi_map_configured"
LISTENER_ATTR: str = "_openapi_map_listener"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach openapi_map's handlers to the root logger.

    Repeated calls are no-ops unless force is set, in which case the previous
    handlers and listener are released first.

    Args:
        cfg: Logging settings.
        force: Reconfigure even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, CONFIGURED_ATTR, False) and not force:
        return root

    level = parse_level(cfg.level)
    root.setLevel(level)
    reset_logging(root)

    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(console_handler(level, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = rotating_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            sinks.append(fh)

    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_ATTR, True)
    return root


def reset_logging(root: Optional[logging.Logger] = None) -> None:
    """Detach openapi_map's handlers and stop its listener, flushing pending records."""
    root = root or logging.getLogger()

    _stop_listener(getattr(root, LISTENER_ATTR, None))
    setattr(root, LISTENER_ATTR, None)

    for handler in list(root.handlers):
        if is_tagged(handler):
            root.removeHandler(handler)
            handler.close()

    setattr(root, CONFIGURED_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def parse_level(level: Optional[str]) -> int:
    """Map a level name to its constant; unknown or empty names mean INFO."""
    if not level:
        return logging.INFO
    return LEVELS.get(str(level).strip().upper(), logging.INFO)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _stop_listener(listener: Optional[QueueListener]) -> None:
    # QueueListener.stop() fails when called twice (atexit after reset)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
