"""Application-wide logger writing to platformdirs user_log_dir.

File output captures everything at DEBUG; a Rich handler on stderr surfaces
warnings (such as an unreadable task file) to the person at the terminal.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir
from rich.logging import RichHandler

from tasktracker_cli.utils.ui.console import get_error_console

_APP_NAME = "tasktracker_cli"
_LOG_FILE = "tasktracker.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_DEFAULT_CONSOLE_LEVEL = logging.WARNING

# Pass as `extra=` for records whose message was already shown to the user.
RENDERED = {"rendered": True}

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    console_handler = RichHandler(
        console=get_error_console(),
        level=_DEFAULT_CONSOLE_LEVEL,
        show_time=False,
        show_path=False,
    )
    console_handler.set_name("console")
    console_handler.addFilter(lambda record: not getattr(record, "rendered", False))

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
    logger.propagate = False

    _logger = logger
    return _logger


def set_console_level(level: str | int) -> None:
    """Change the threshold of the stderr handler (e.g. "INFO", "ERROR")."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    for handler in get_logger().handlers:
        if handler.get_name() == "console":
            handler.setLevel(level)
