"""Stdlib logging levels.

Structured events go through logfire; this only tunes plain ``logging``
output from uvicorn, SQLAlchemy and the ``threadtree`` namespace.
"""

import logging
import sys

from threadtree.config import Settings

# Libraries that log every statement or connection at INFO
_QUIET_LOGGERS = ("sqlalchemy", "aiosqlite", "asyncpg")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the process."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("threadtree").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
