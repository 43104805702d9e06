"""
Logging setup for the catalog package.
"""
import logging
import sys

from streamcatalog.config import settings


def setup_logging(level: str = None):
    """
    Configure the root logger with a single console handler.

    Args:
        level: Log level name; defaults to settings.LOG_LEVEL
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )
    root_logger.addHandler(console_handler)

    # SQL echo is controlled by settings.SQL_ECHO, keep the library quiet otherwise
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
