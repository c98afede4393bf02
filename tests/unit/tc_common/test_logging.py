"""Tests for structlog configuration."""

from __future__ import annotations

import logging

import pytest
import structlog

from tc_common.logging import configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_configure_logging_honours_env_level(monkeypatch, restore_root_logger) -> None:
    monkeypatch.setenv("TC_LOG_LEVEL", "warning")
    monkeypatch.delenv("TC_LOG_FILE", raising=False)
    configure_logging(force=True)
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1


def test_configure_logging_writes_file(tmp_path, monkeypatch, restore_root_logger) -> None:
    monkeypatch.delenv("TC_LOG_LEVEL", raising=False)
    log_file = tmp_path / "editor.log"
    configure_logging(debug=True, log_file=str(log_file), json=True, force=True)

    logging.getLogger("tc_core.test").debug("hello from the editor")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    assert "hello from the editor" in log_file.read_text()
