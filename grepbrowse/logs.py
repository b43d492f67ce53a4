"""Logging setup.

The list owns the terminal while it runs, so records go to a file named by
``GREPBROWSE_LOG`` or nowhere at all.
"""

from __future__ import annotations

import logging
import os

LOG_FILE_ENV = "GREPBROWSE_LOG"
LOG_LEVEL_ENV = "GREPBROWSE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

PACKAGE_LOGGER = "grepbrowse"


def configure_logging(environ: dict[str, str] | None = None) -> logging.Logger:
    """Attach a file or null handler to the package logger and return it."""
    env = os.environ if environ is None else environ
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = False
    package_logger.setLevel(logging.NOTSET)

    log_path = env.get(LOG_FILE_ENV, "").strip()
    if not log_path:
        package_logger.addHandler(logging.NullHandler())
        return package_logger

    level_name = env.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
