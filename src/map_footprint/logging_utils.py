"""Logger setup shared by the CLI and library users."""

from __future__ import annotations

import logging
import sys
import time
from logging.handlers import TimedRotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03dZ %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    name: str = "map_footprint",
    logs_dir: Path | None = None,
    level: str = "INFO",
    to_console: bool = True,
) -> logging.Logger:
    """
    Configure and return the logger called ``name``.

    Existing handlers are replaced, so calling this twice does not duplicate
    output. Console output goes to stderr to keep stdout free for results.

    Args:
        name: Logger name; ``map_footprint`` covers every module in the package.
        logs_dir: When set, also log to ``{logs_dir}/{name}.log``, rotated daily.
        level: Level name, e.g. ``"DEBUG"``. Unknown names fall back to INFO.
        to_console: Attach a stderr handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    if logger.handlers:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    # The format ends timestamps in "Z"
    fmt.converter = time.gmtime

    if logs_dir is not None:
        logs_dir.mkdir(parents=True, exist_ok=True)
        fh = TimedRotatingFileHandler(
            str(logs_dir / f"{name}.log"),
            when="D",
            interval=1,
            backupCount=14,
            encoding="utf-8",
            utc=True,
        )
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if to_console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger
