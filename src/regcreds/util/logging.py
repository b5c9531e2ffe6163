"""Logging setup shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def configure_logging(*, log_path: Path | None = None, level: str = "INFO") -> logging.Logger:
    """Configure the ``regcreds`` logger, adding handlers only once."""

    logger = logging.getLogger("regcreds")
    logger.setLevel(level)

    has_stream = any(type(h) is logging.StreamHandler for h in logger.handlers)
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not has_stream:
        stream_handler = logging.StreamHandler(stream=sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path:
        resolved = log_path.expanduser().resolve()
        if str(resolved) not in existing_files:
            resolved.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(resolved, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
