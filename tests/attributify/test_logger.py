"""Tests for logger setup."""

import json
import logging
import uuid

from attributify.logger import JsonFormatter, configure_from_config, get_logger


def unique_name():
    return f"attributify.test.{uuid.uuid4().hex}"


class TestGetLogger:

    def test_console_only(self):
        logger = get_logger(unique_name())
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_file_handlers(self, tmp_path):
        logger = get_logger(unique_name(), level=logging.INFO, log_dir=tmp_path / "logs")
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in (tmp_path / "logs" / "attributify.log").read_text()
        record = json.loads((tmp_path / "logs" / "attributify.json").read_text().splitlines()[0])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"

    def test_handlers_added_once(self):
        name = unique_name()
        get_logger(name)
        assert len(get_logger(name).handlers) == 1


class TestJsonFormatter:

    def test_format(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg %s", ("a",), None)
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == "msg a"
        assert data["logger"] == "x"


class TestConfigureFromConfig:

    def test_level_from_config(self):
        logger = configure_from_config({"logging": {"level": "error"}})
        assert logger.name == "attributify"
        assert logger.level == logging.ERROR

    def test_unknown_level_falls_back(self):
        logger = configure_from_config({"logging": {"level": "LOUD"}})
        assert logger.level == logging.WARNING
