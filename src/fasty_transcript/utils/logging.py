import logging
from typing import Dict, Optional

import colorlog

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}


def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output on stderr.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = (log_level or "INFO").upper()
    level = LOG_LEVELS.get(log_level, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Only the package logger gets a handler; module loggers propagate to it
    if "." not in name:
        # Imported here: core.config's package imports modules that log through this one
        from ..core.config import get_config
        logging_config = get_config().logging

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + logging_config.format,
            datefmt=logging_config.date_format,
            log_colors=LOG_COLORS
        ))
        logger.addHandler(console_handler)

    if log_level not in LOG_LEVELS:
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    CONFIGURED_LOGGERS[name] = logger
    return logger


def get_log_level() -> str:
    """Get the log level from the logging configuration (``LOG_LEVEL``)."""
    from ..core.config import get_config
    return (get_config().logging.level or "INFO").upper()


def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the ``fasty_transcript`` hierarchy.

    Args:
        name: Short module name, e.g. ``"strategies.android"``
        log_level: The log level; defaults to ``LOG_LEVEL`` from the environment

    Returns:
        A configured logger instance
    """
    full_name = name if name.startswith("fasty_transcript") else f"fasty_transcript.{name}"
    if full_name in CONFIGURED_LOGGERS and log_level is None:
        return CONFIGURED_LOGGERS[full_name]
    return setup_logger(full_name, log_level or get_log_level())


def set_log_level(log_level: str) -> None:
    """Change the level of the package logger and every logger created so far."""
    level = LOG_LEVELS.get(log_level.upper(), logging.INFO)
    for logger in CONFIGURED_LOGGERS.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


# Create a default logger for the package
default_logger = setup_logger("fasty_transcript", get_log_level())
