# infrastructure/logging/log_setup.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message} | {extra}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <8}</level> {message}"


def setup_logging(console_level: Optional[str] = None, log_file: Optional[Path] = None) -> None:
    """
    Replace loguru's default sink: stderr at console_level (none when None),
    plus a DEBUG file sink when log_file is given.
    """
    logger.remove()
    if console_level is not None:
        logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)
    if log_file is not None:
        logger.add(str(log_file), level="DEBUG", format=FILE_FORMAT, encoding="utf-8")
