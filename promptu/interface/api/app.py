"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from promptu.config import Settings
from promptu.interface.api.error import validation_error_handler
from promptu.interface.api.routes import health, items, stats, trending, votes
from promptu.util.di.container import create_container
from promptu.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in production
    start_app.py handles this, in tests conftest.py does.

    Args:
        container: DI container to use instead of the production one

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Promptu API",
        description="Voting, trending and community statistics for Promptu",
        version=SERVICE_VERSION,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    app_instance.add_exception_handler(RequestValidationError, validation_error_handler)

    setup_dishka(container or create_container(), app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(items.router)
    app_instance.include_router(trending.router)
    app_instance.include_router(stats.router)

    return app_instance


# App instance for uvicorn; Logfire must be configured before import
app = create_app()
