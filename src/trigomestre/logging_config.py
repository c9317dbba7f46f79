"""
Logging Configuration
Sets up the 'trigomestre' logger for the command line and the session store.

Log records go to stderr so that tables printed on stdout stay clean for
piping into other tools.
"""
import logging
import sys
from typing import Optional, TextIO

from trigomestre.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT


def setup_logging(
    level: int = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configures the logger for the 'trigomestre' namespace.

    Calling it again replaces (and closes) the handlers of the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to save logs to a file (overwritten).
        stream: Console stream, stderr by default.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("trigomestre")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
