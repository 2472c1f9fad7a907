"""Logging setup.

The editor owns the whole screen, so records go to a file in the user's
log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs

from .config import APP_NAME

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(platformdirs.user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


def configure_logging(level: str = "WARNING", log_path: Optional[Path] = None) -> Optional[logging.Handler]:
    """Send the package's log records to a file.

    The file is only created once something is logged at `level` or above.

    Returns:
        The installed handler, or None if the log directory is unusable.
    """
    path = log_path or default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None

    handler = logging.FileHandler(path, encoding='utf-8', delay=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    return handler
