"""Logging setup for the CLI and the HTTP service."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "opportunity_matcher"
LOG_FILE = "opportunity_matcher.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def resolve_level(level: Union[int, str, None]) -> int:
    """Accept a numeric level or a name like "debug"; anything unknown means INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "").strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(log_dir: Optional[str] = "logs", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach stderr and (when log_dir is set) rotating-file handlers to the package logger.

    Safe to call more than once: previous handlers are closed and replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / LOG_FILE,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        ))

    # Handlers inherit the logger's level; stdout stays free for --json output
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
