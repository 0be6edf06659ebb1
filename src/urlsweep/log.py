# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for UrlSweep."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_LOG_LEVEL = os.getenv("URLSWEEP_LOG_LEVEL", "WARNING").upper()
SINK_FORMAT = "%(asctime)s [%(levelname)s] - %(message)s"
SINK_DATEFMT = "%Y-%m-%d %H:%M:%S"
SINK_LOGGER_NAME = "urlsweep.sink"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def open_log_sink(path: Path | str) -> logging.Logger:
    """
    Return a logger that appends timestamped lines to ``path``.

    The logger does not propagate, so sink lines never reach the console
    handlers configured by ``setup_logging``. Calling this again for the same
    path reuses the existing handler instead of stacking a second one.
    """
    resolved = Path(path).resolve()
    logger = logging.getLogger(f"{SINK_LOGGER_NAME}.{resolved}")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == resolved:
            return logger

    handler = logging.FileHandler(resolved, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter(SINK_FORMAT, datefmt=SINK_DATEFMT))
    logger.addHandler(handler)
    return logger


def close_log_sink(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


__all__ = ["close_log_sink", "open_log_sink", "setup_logging"]
