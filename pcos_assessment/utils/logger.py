# -*- coding: utf-8 -*-
"""
Logging for the assessment app.

Everything logs under the "pcos_assessment" logger: DEBUG and up go to a
rotating file in Config.LOGS_DIR, INFO and up to stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

ROOT_LOGGER = "pcos_assessment"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(config) -> RotatingFileHandler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(console_level: int = logging.INFO) -> logging.Logger:
    """
    Attach the file and console handlers to the app logger.

    Calling it again replaces the handlers, closing the old log file.
    """
    from pcos_assessment.app.config import Config

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_file_handler(Config))
    logger.addHandler(_console_handler(console_level))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; pass __name__."""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        setup_logger()

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return root.getChild(name)
