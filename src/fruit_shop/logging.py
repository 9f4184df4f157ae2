import os
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = False, log_dir: Optional[str] = None):
    """
    Configures Loguru logger.

    Logs go to stderr so they never mix with shop output on stdout.
    A rotating file log is added only when log_dir is given.
    """
    # Remove default handler
    logger.remove()

    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(os.path.join(log_dir, "fruit_shop_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.debug("Logging initialized.")
