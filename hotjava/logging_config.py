"""Logging setup.

The TUI owns the terminal, so log records go to a rotating file.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = Path.home() / ".local" / "share" / "hotjava" / "hotjava.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """Configure the ``hotjava`` logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Destination file. Defaults to
                  ~/.local/share/hotjava/hotjava.log

    Returns:
        The configured package logger
    """
    path = Path(log_file) if log_file else DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("hotjava")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    # Suppress noisy loggers
    for noisy in ("httpx", "httpcore", "anthropic"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
