# storefront/config/logging_config.py

"""Per-session logging configuration for the storefront.

Every launch (TUI or headless CLI) writes a dedicated log file inside
``logs/`` named after the launch time, e.g.
``logs/session_20261018_091500.log``. All ``storefront.*`` loggers
propagate to the single project logger configured here, so engine,
loader and front-end records end up in one file.

The console only receives WARNING and above, which keeps the TUI screen
and the CLI's stdout output clean.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from storefront.config.settings import Settings

PROJECT_LOGGER = "storefront"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(name: str) -> int:
    """Map a level name from configuration to a logging constant."""
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.DEBUG


def setup_logging() -> Path:
    """Initialise the ``storefront`` logger for the current session.

    Returns:
        The :class:`~pathlib.Path` of this session's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"session_{stamp}.log"

    project_logger = logging.getLogger(PROJECT_LOGGER)
    file_level = _resolve_level(Settings.LOG_LEVEL)
    project_logger.setLevel(file_level)

    # Already configured in this process
    if project_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    project_logger.addHandler(file_handler)
    project_logger.addHandler(console_handler)

    project_logger.info("Session log opened at %s", log_file)

    return log_file
