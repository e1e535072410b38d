from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

LOGGER_NAME = "vectorlab"
LOG_FORMAT = "ts=%(asctime)s level=%(levelname)s msg=%(message)s"

_HANDLER: Optional[logging.FileHandler] = None


def configure_logging(base_dir: Optional[Path] = None) -> Dict[str, str]:
    """Attach one file handler to the app logger.

    ``base_dir`` only moves the log file; repeat calls with the same location
    keep the existing handler, a new location replaces it.
    """
    global _HANDLER
    root = base_dir or Path("data/roaming")
    log_dir = root / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = os.path.abspath(log_dir / "vectorlab.log")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if _HANDLER is not None and _HANDLER.baseFilename != log_path:
        logger.removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None

    if _HANDLER is None:
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _HANDLER = handler

    return {
        "log_path": _HANDLER.baseFilename,
        "format": "kv",
        "handlers": "file",
        "logger_name": LOGGER_NAME,
    }


def shutdown_logging() -> None:
    """Detach the file handler and let records propagate again."""
    global _HANDLER
    logger = logging.getLogger(LOGGER_NAME)
    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the app logger, or a child of it for ``name``."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
