"""
Logger utility for attributify.

Library modules only call logging.getLogger(__name__); handlers are set
up here, by the CLI or by the host application.

When a log directory is given:
- attributify.log: Main log with 5MB rotation, keeps 3 backups
- attributify.json: Structured JSON, 5MB rotation, keeps 2 backups
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional, Union

PACKAGE_LOGGER = "attributify"


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def get_logger(
    name: str = PACKAGE_LOGGER,
    level: Optional[int] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Get or create a logger with console and optional rotating file handlers.

    Logs to:
    - stderr (console) - warnings and errors only
    - {log_dir}/attributify.log (rotating, 5MB max, 3 backups)
    - {log_dir}/attributify.json (structured JSON, 5MB max, 2 backups)

    Args:
        name: Logger name
        level: Optional logging level (defaults to WARNING)
        log_dir: Optional directory for the file handlers

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        text_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(text_formatter)
        logger.addHandler(console_handler)

        if log_dir is not None:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            main_handler = RotatingFileHandler(
                log_path / "attributify.log",
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            main_handler.setLevel(logging.DEBUG)
            main_handler.setFormatter(text_formatter)
            logger.addHandler(main_handler)

            json_handler = RotatingFileHandler(
                log_path / "attributify.json",
                maxBytes=5 * 1024 * 1024,
                backupCount=2,
                encoding="utf-8",
            )
            json_handler.setLevel(logging.INFO)
            json_handler.setFormatter(JsonFormatter())
            logger.addHandler(json_handler)

    if level is not None:
        logger.setLevel(level)
    elif not logger.level:
        logger.setLevel(logging.WARNING)

    return logger


def configure_from_config(config: Dict[str, Any]) -> logging.Logger:
    """Set up the package logger from the `logging` section of a config dict."""
    section = config.get("logging") or {}
    level_name = str(section.get("level") or "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    return get_logger(PACKAGE_LOGGER, level=level, log_dir=section.get("log_dir"))
