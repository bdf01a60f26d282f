from __future__ import annotations

"""
Logging Configuration Model.

Immutable settings consumed by configure_logging, plus the mapping from
textual level names to logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings of the host's logging setup.

    Attributes:
        level: Minimum severity captured, by name.
        console: Emit to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Rotation threshold of the log file.
        backup_count: Rotated files kept.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
