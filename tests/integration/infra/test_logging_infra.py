from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
that only tagged handlers are removed on reset.
"""

import logging
from logging.handlers import QueueHandler
from pathlib import Path

import pytest

from openapi_map.infra.logging import (
    HANDLER_TAG_ATTR,
    LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    parse_level,
    reset_logging,
)


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


def test_logging_idempotency() -> None:
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == count


def test_single_tagged_queue_handler() -> None:
    root = configure_logging(LoggingConfig(level="DEBUG"))
    tagged = [h for h in root.handlers if getattr(h, HANDLER_TAG_ATTR, False)]
    assert len(tagged) == 1
    assert isinstance(tagged[0], QueueHandler)
    assert getattr(root, LISTENER_ATTR) is not None
    assert root.level == logging.DEBUG


def test_file_logging(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "openapi-map.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("openapi_map.test").info("tree built")
    # Stopping the listener flushes queued records
    reset_logging()

    assert "tree built" in log_file.read_text(encoding="utf-8")


def test_reset_keeps_foreign_handlers() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig())
        reset_logging()
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_force_reconfigures() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    root = configure_logging(LoggingConfig(level="ERROR"), force=True)
    assert root.level == logging.ERROR


@pytest.mark.parametrize("name, level", [
    ("debug", logging.DEBUG),
    (" warn ", logging.WARNING),
    ("", logging.INFO),
    (None, logging.INFO),
    ("verbose", logging.INFO),
])
def test_parse_level(name, level) -> None:
    assert parse_level(name) == level
