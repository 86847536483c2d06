"""Logfire setup and instrumentation.

Services emit spans and events straight through ``logfire``:

    with logfire.span("voting_service.toggle_upvote", item=slug):
        ...
        logfire.info("Vote toggled", item_id=str(item.id), voted=True)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from promptu.config import Settings

SERVICE_NAME = "promptu-core"
SERVICE_VERSION = "0.1.0"

# Probed constantly by the load balancer
_UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported."""
    observability = settings.observability

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.export_enabled,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        export=observability.export_enabled,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Websocket scopes carry no method
    method = getattr(request, "method", None)
    return {
        **attributes,
        "path": request.url.path,
        **({"method": method} if method else {}),
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=_UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement, including the SAVEPOINTs around vote toggles."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
