"""Logging configuration for AnkiTrans"""

import logging
import sys

ROOT_LOGGER = "ankitrans"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONCISE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure the ``ankitrans`` logger that every module logger propagates to.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives detailed records as well

    Returns:
        The configured package logger
    """
    level_upper = level.upper()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level_upper))

    # Reconfiguring replaces handlers instead of stacking them
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    detailed = logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)

    # stderr keeps card output on stdout pipeable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        detailed if level_upper == "DEBUG" else logging.Formatter(CONCISE_FORMAT)
    )
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(detailed)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)
