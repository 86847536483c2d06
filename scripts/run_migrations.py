#!/usr/bin/env python3
"""Apply Alembic migrations (default: up to head).

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c9a7d2e40
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from promptu.config import Settings
from promptu.util.logging import get_logger, setup_logging
from promptu.util.observability import configure_logfire

logger = get_logger(__name__)


def main(argv: list[str]) -> int:
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    revision = argv[0] if argv else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Schema migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so the service never starts on a broken schema
            raise

    logger.info(f"Database schema at revision {revision}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
