from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, and log file rotation logic.
"""

import logging
import time
from pathlib import Path

import pytest

from dirsim.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up the root logger before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_reconfigure_after_shutdown() -> None:
    """TC-02: A second configuration only takes effect after shutdown."""
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"))
    assert logging.getLogger().level == logging.INFO

    shutdown_logging()
    configure_logging(LoggingConfig(level="DEBUG"))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert len(ours) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = get_logger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    tagged = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(tagged) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_shutdown_detaches_handlers() -> None:
    """TC-05: shutdown_logging leaves no tagged handler behind."""
    configure_logging(LoggingConfig(level="INFO"))

    shutdown_logging()

    root = logging.getLogger()
    assert not [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="CHATTY"))

    assert logging.getLogger().level == logging.INFO


@pytest.mark.parametrize("save_log_file,expected", [(True, "dirsim.log"), (False, None)])
def test_config_from_settings(save_log_file, expected) -> None:
    settings = {"log_level": "WARNING", "save_log_file": save_log_file}

    cfg = LoggingConfig.from_settings(settings, "dirsim.log")

    assert cfg.level == "WARNING"
    assert cfg.console is True
    assert cfg.log_file == expected
