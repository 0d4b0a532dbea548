"""
Logging configuration for the employee service.

Called once by the server entry point before settings are loaded, so the
level comes straight from the environment.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level_name: str | None = None) -> None:
    """Configure the root logger and quiet noisy third-party loggers."""
    level_name = (level_name or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)

    # SQL echo stays off unless explicitly asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.INFO))
