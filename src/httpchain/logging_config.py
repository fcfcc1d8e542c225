"""
Logging setup for applications using httpchain.

Library modules only log through ``logging.getLogger(__name__)``; nothing
is printed until setup_logging() attaches handlers to the ``httpchain``
logger. At DEBUG the request builder writes one line per request
(``-> GET https://...``) and one per response (``<- 200: OK (12ms)``).

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "httpchain"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s %(message)s"
DEFAULT_LOG_DIR = Path.home() / ".httpchain" / "logs"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_dir: str | None = None,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Attach console and/or rotating file handlers to the httpchain logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Logging level name; DEBUG shows the request/response lines
        log_file: Log file path (overrides log_dir)
        log_dir: Directory for httpchain.log (defaults to ~/.httpchain/logs)
        enable_console: Log to stdout
        enable_file: Log to a file rotated at 10MB, five backups kept
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = []

    if enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))

    if enable_file:
        log_path = Path(log_file) if log_file else Path(log_dir or DEFAULT_LOG_DIR) / "httpchain.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Records stop here instead of reaching the root logger's handlers
    logger.propagate = False
    return logger
