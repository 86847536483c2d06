"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from promptu.domain.repository.unit_of_work import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Serializes atomic units and restores the store when one fails."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.store.lock:
            snapshot = self.store.snapshot()
            try:
                yield
            except BaseException:
                self.store.restore(snapshot)
                raise

    async def commit(self) -> None:
        # Writes are visible as soon as atomic() exits
        pass
