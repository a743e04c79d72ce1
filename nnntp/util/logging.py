"""Standard library logging setup.

NNNTP's own events go through logfire. uvicorn, httpx and SQLAlchemy log
through the logging module, so their output is shaped here.
"""

import logging
import sys

from nnntp.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Library loggers and their level outside debug mode
LIBRARY_LEVELS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quiet chatty libraries.

    In debug mode every library logs at DEBUG, SQL statements included.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, library_level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level if settings.debug else library_level)

    logging.getLogger("nnntp").info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
