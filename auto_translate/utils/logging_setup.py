"""
Logging setup - dedicated log file for the translation pipeline
"""

import logging
from pathlib import Path
from typing import Optional

from .config import LoggingSettings

PACKAGE_LOGGER = "auto_translate"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    settings: Optional[LoggingSettings] = None,
    base_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Attach a file handler to the package logger.

    The log directory is created if needed. Calling this twice with the same
    file does not add a second handler.

    Args:
        settings: Logging settings (file path and level)
        base_dir: Directory relative log paths are resolved against

    Returns:
        The package logger
    """
    settings = settings or LoggingSettings()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings.level.upper())

    if not settings.file:
        return package_logger

    log_path = Path(settings.file)
    if base_dir is not None and not log_path.is_absolute():
        log_path = base_dir / log_path
    log_path = log_path.resolve()

    for handler in package_logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path:
            return package_logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)

    package_logger.info(f"Translation log file: {log_path}")
    return package_logger
