from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from task_api.config import PROJECT_ROOT, SETTINGS, Settings

LOG_FILE_NAME = "task_api.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def log_file_path(settings: Settings) -> Path:
    """Resolve ``settings.log_dir`` against the project root unless it is absolute."""
    return PROJECT_ROOT / settings.log_dir / LOG_FILE_NAME


def setup_logging(settings: Settings = SETTINGS) -> Path:
    log_file = log_file_path(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    level = settings.log_level.upper()
    # force: calling again (tests, reloads) replaces the handlers instead of stacking them
    logging.basicConfig(level=level, handlers=[file_handler, console_handler], force=True)
    # per-request access lines from the dev server follow the service level
    logging.getLogger("werkzeug").setLevel(level)
    return log_file
