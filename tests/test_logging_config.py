"""Tests for logger configuration.

An isolated logger is configured instead of the root logger, which
pytest already equips with its own capture handlers.
"""

from __future__ import annotations

import logging

import pytest

from blog_service_api.app.core.logging_config import setup_logging


@pytest.fixture
def isolated_logger():
    logger = logging.Logger("blog_service_api.isolated")
    yield logger
    for handler in logger.handlers:
        handler.close()


class TestSetupLogging:
    def test_writes_formatted_records_to_log_file(self, isolated_logger, tmp_path):
        log_file = tmp_path / "blog.log"

        setup_logging("debug", str(log_file), target=isolated_logger)
        isolated_logger.info("User %s created blog %s", "alice", "blog-0001")
        for handler in isolated_logger.handlers:
            handler.flush()

        assert isolated_logger.level == logging.DEBUG
        line = log_file.read_text(encoding="utf-8").strip()
        assert line.endswith("[INFO] blog_service_api.isolated: User alice created blog blog-0001")

    def test_unknown_level_falls_back_to_info(self, isolated_logger):
        setup_logging("chatty", target=isolated_logger)

        assert isolated_logger.level == logging.INFO
        assert len(isolated_logger.handlers) == 1

    def test_second_call_adds_no_handlers(self, isolated_logger):
        setup_logging("info", target=isolated_logger)
        setup_logging("debug", target=isolated_logger)

        assert len(isolated_logger.handlers) == 1
        assert isolated_logger.level == logging.INFO
