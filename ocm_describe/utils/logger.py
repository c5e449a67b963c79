"""Logging configuration."""

import logging
from typing import Optional, Union

PACKAGE_LOGGER = "ocm_describe"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name or __name__)

    # Only configure if no handlers exist
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Apply a log level to every logger created for this package."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith(PACKAGE_LOGGER) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
