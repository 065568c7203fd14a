"""
Centralized logging configuration with colored output
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog


LOGGER_ROOT = "sherlock"


def setup_logger(
    name: str,
    level: str = "WARNING",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file that receives every record
        console: Whether to output to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent duplicate handlers; the package NullHandler does not count
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    if console:
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))

        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            style='%'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger under the ``sherlock`` namespace.

    Module loggers carry no handlers of their own; records propagate to the
    ``sherlock`` logger, which applications configure with configure_logging().

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not name.startswith(LOGGER_ROOT):
        logger = logging.getLogger(f"{LOGGER_ROOT}.{name}")
    return logger


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach colored console (and optional file) output to the ``sherlock`` logger.

    Args:
        level: Logging level; defaults to Settings.log_level
        log_file: Optional log file path

    Returns:
        The configured ``sherlock`` logger
    """
    if level is None:
        from sherlock.utils.config import get_settings
        level = get_settings().log_level

    return setup_logger(LOGGER_ROOT, level=level, log_file=log_file)
