"""Standard library logging, forwarded to Logfire.

Scripts and third-party libraries log through ``logging``; the handler
installed here sends those records to the same place as Logfire spans.
"""

import logging

import logfire

from promptu.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into Logfire at the configured level."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
