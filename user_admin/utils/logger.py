"""
Logging for the user administration console.

Everything logs through one named logger ("user_admin"). The Streamlit page
calls configure_logging() once at startup; library modules only call
get_logger() and never add handlers themselves.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from user_admin.utils.config import log_file as configured_log_file
from user_admin.utils.config import log_level as configured_log_level

LOGGER_NAME = "user_admin"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: int | str | None) -> int:
    """Turn an int or a level name ("debug", "WARNING") into a logging level; unknown names give INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _has_file_handler(log: logging.Logger, path: Path) -> bool:
    target = str(path.resolve())
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in log.handlers
    )


def setup_logger(
    name: str = LOGGER_NAME,
    level: int | str = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return a logger.

    Safe to call on every Streamlit rerun: the level is updated each time, the
    stderr handler is added once and a file handler once per path.

    Args:
        name: Logger name.
        level: Logging level, as an int or a level name.
        log_file: Optional path to log file. If None, logs to stderr only.

    Returns:
        Configured logger.
    """
    log = logging.getLogger(name)
    log.setLevel(resolve_level(level))
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(fmt)
        log.addHandler(h)

    if log_file:
        path = Path(log_file)
        if not _has_file_handler(log, path):
            path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(path, encoding="utf-8")
            fh.setFormatter(fmt)
            log.addHandler(fh)

    return log


def configure_logging() -> logging.Logger:
    """Set up the app logger from LOG_LEVEL and LOG_FILE (call after load_config)."""
    return setup_logger(LOGGER_NAME, level=configured_log_level(), log_file=configured_log_file())


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the application logger."""
    return logging.getLogger(name)
