"""Dependency injection wiring."""

from promptu.util.di.application import ProdApplicationProvider
from promptu.util.di.base import Component, ProviderBase
from promptu.util.di.core import ProdConfigProvider
from promptu.util.di.domain import ProdDomainProvider
from promptu.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Order is irrelevant to dishka; swappable components come last for readability
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
]
