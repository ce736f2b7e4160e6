"""
Logging for suikeys.

Module loggers inside the package (suikeys.*) carry no handlers of their own. Their records propagate to the
"suikeys" package logger, which holds the one console handler and the optional file handler. Loggers outside the
package get their handlers directly.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

__all__ = ["PACKAGE_LOGGER", "get_logger"]

PACKAGE_LOGGER = "suikeys"
DEFAULT_FORMAT = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'


def _handler_owner(name: str) -> logging.Logger:
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(name)


def get_logger(name: str, log_level: str = "DEBUG", log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given level, attaching handlers to its owner the first time the owner is seen.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file, used when the owner gets its handlers
        format_string: Optional custom format string, used when the owner gets its handlers

    Returns:
        The logger for name
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    owner = _handler_owner(name)
    if owner.handlers:
        return logger

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    owner.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        owner.addHandler(file_handler)

    return logger
