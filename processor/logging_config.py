"""Centralized logging configuration for the revenue engine."""

import os
import sys
from pathlib import Path

from loguru import logger

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))


def setup_logging(level: str | None = None, log_dir: str | Path | None = None) -> Path:
    """Configure loguru sinks: stderr + daily-rotated file.

    Returns the directory the file sink writes to.
    """
    level = (level or LOG_LEVEL).upper()
    target_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level:<7} | {message}")
    logger.add(
        str(target_dir / "rpmscope_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="7 days",
        level="DEBUG",
        encoding="utf-8",
    )
    return target_dir
