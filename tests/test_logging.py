"""Tests for logging setup."""

from __future__ import annotations

import logging
import os
import sys
from unittest.mock import patch

import structlog

from srigen.logging import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_default_level_info(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SRIGEN_LOG_LEVEL", None)
            setup_logging()
        assert logging.getLogger("srigen").level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_explicit_level_wins(self):
        with patch.dict(os.environ, {"SRIGEN_LOG_LEVEL": "ERROR"}):
            setup_logging("debug")
        assert logging.getLogger("srigen").level == logging.DEBUG

    def test_json_format(self):
        with patch.dict(os.environ, {"SRIGEN_LOG_FORMAT": "json"}):
            setup_logging()
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_console_format_by_default(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SRIGEN_LOG_FORMAT", None)
            setup_logging()
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_pre_chain_limited_to_level_name_and_time(self):
        setup_logging()
        formatter = logging.getLogger().handlers[0].formatter
        names = [type(p).__name__ for p in formatter.foreign_pre_chain]
        assert "StackInfoRenderer" not in names
        assert "UnicodeDecoder" not in names
        assert len(formatter.foreign_pre_chain) == 3

    def test_handler_writes_to_stderr(self):
        setup_logging()
        handler = logging.getLogger().handlers[0]
        assert handler.stream is sys.stderr
