"""Logging setup shared by the viewer and its command line entry point."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from pathlib import Path

LOG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "foldline" / "logs"
LOG_FILE = LOG_DIR / "foldline.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

CONSOLE_HANDLER = "foldline.console"
FILE_HANDLER = "foldline.file"


def installed_handlers() -> list[logging.Handler]:
    """Return the handlers this module attached to the root logger."""

    return [
        handler
        for handler in logging.getLogger().handlers
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)
    ]


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Attach console and rotating file handlers to the root logger once.

    Later calls only change the level. If the log file cannot be opened the
    viewer keeps logging to the console.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if installed_handlers():
        return

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    target = log_file or LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(target, maxBytes=512_000, backupCount=5, encoding="utf-8")
    except OSError as exc:
        root_logger.warning("File logging disabled, cannot write %s: %s", target, exc)
        return
    file_handler.set_name(FILE_HANDLER)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger, configuring logging on first use."""

    if not installed_handlers():
        configure_logging()
    return logging.getLogger(name)
