"""
Logging Configuration
Sets up the logger for the command line front end.

Diagnostics go to stderr so that stdout carries only the API call listing.
The library modules only create module loggers and never configure handlers.
"""
import logging
import sys
from typing import Optional, TextIO

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the 'rt3scene' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path of a detailed, timestamped log.
        stream: Console stream, stderr when omitted.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("rt3scene")
    logger.setLevel(level)
    # Records stop here; an application root handler would print them twice
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        # The file always gets the full walk trace
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    logger.debug(f"Logging initialized (console level {logging.getLevelName(level)}).")
    return logger
