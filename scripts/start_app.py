#!/usr/bin/env python3
"""Serve the Promptu API under uvicorn.

Logfire is configured before the app module is imported so that errors
raised while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from promptu.config import Settings
from promptu.util.logging import setup_logging
from promptu.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Promptu API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "promptu.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Promptu API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
