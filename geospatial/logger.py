import logging
import sys

from geospatial import config


def setup_logger(name: str, level=None):
    """
    Sets up a logger with the given name and level.
    Logs to console with a custom format including timestamp.
    """
    if level is None:
        level = config.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers if already added
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
