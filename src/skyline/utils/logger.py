import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from skyline.utils.config import settings

PACKAGE_LOGGER = "skyline"
LOG_FORMAT = "%(name)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a rich handler to the package logger.

    Only the ``skyline`` logger is touched so that applications embedding the
    solver keep control of the root logger.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False, log_time_format=LOG_DATE_FORMAT)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level or settings.LOG_LEVEL)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
