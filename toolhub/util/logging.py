"""Stdlib logging for third-party libraries.

Application events go through logfire. uvicorn, SQLAlchemy and alembic log
through the standard library, configured here.
"""

import logging
import sys

from toolhub.config import Settings

# Libraries that are too chatty at DEBUG
QUIET_LOGGERS = ("sqlalchemy.pool", "asyncio", "urllib3")


def setup_logging(settings: Settings) -> None:
    """Configure root handlers and per-library levels.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQL statements are only logged when debugging in development
    sql_level = (
        logging.INFO
        if settings.debug and settings.environment == "development"
        else logging.WARNING
    )
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
    logging.getLogger("alembic").setLevel(logging.INFO)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
