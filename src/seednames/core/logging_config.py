"""Logging configuration for seednames.

The library itself only emits through ``logging.getLogger("seednames.*")``
and never installs handlers on import. Applications that want output call
:func:`setup_logging` once at startup: records go to stdout and, when a
log directory is given, to a rotating ``seednames.log`` file.
"""
from __future__ import annotations

import logging
import logging.handlers
import os
from typing import Optional

LOGGER_NAME = "seednames"

# Module-level log directory — set by setup_logging()
_log_dir: Optional[str] = None


def get_log_dir() -> Optional[str]:
    """Return the configured log directory, if any."""
    return _log_dir or os.getenv("SEEDNAMES_LOG_DIR") or None


def setup_logging(log_dir: Optional[str] = None, log_level: str = "warning") -> None:
    """Attach stdout (and optional rotating file) handlers to the package logger."""
    global _log_dir
    _log_dir = log_dir

    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers (avoid duplicate output on re-init)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(
        "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(fmt)
    logger.addHandler(stdout_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, "seednames.log"),
            maxBytes=1024 * 1024,  # 1 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # Capture everything to file
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    logger.propagate = False  # Don't bubble up to root

    logger.info("Logging initialized: log_dir=%s, level=%s", log_dir, log_level)
