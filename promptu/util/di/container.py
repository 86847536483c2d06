"""Production container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from promptu.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Container with every component on its production implementation.

    The FastAPI provider exposes the current ``Request`` to request-scoped
    factories. Scripts can use the same container outside a request.
    """
    return make_async_container(
        *(base.implementation(mock=False)() for base in PROVIDERS),
        FastapiProvider(),
    )
