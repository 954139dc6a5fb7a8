"""
Logging Configuration
Attaches handlers to the 'expo_slider' logger for scripts and notebooks.

The library modules only create loggers (config resolution at DEBUG,
degenerate configs at WARNING); nothing is printed until a caller runs
setup_logging. Console output goes to stderr because scripts/slider_table.py
reserves stdout for its JSON report.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "expo_slider"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route slider log records to stderr and, optionally, a file.

    Calling it again replaces the handlers from the previous call, so a
    script can switch level (e.g. for --verbose) without doubling output.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path; the file is truncated on each call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stderr), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.debug("Logging initialized at level %s.", logging.getLevelName(level))
