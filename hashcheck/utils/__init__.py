"""
Utility functions and helpers.

Components:
    - setup_logging: Logging configuration with a Rich handler on stderr

Example:
    ```python
    from hashcheck.utils import setup_logging

    setup_logging(level="DEBUG", log_file="hashcheck.log")
    ```
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the ``hashcheck`` logger.

    Log records go to stderr through Rich so they never mix with the report
    on stdout. Calling this again replaces the previously installed handlers.

    Args:
        level: Log level name or number
        log_file: Optional file receiving the same records

    Returns:
        logging.Logger: The package logger
    """
    logger = logging.getLogger("hashcheck")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


__all__ = ["setup_logging"]
