"""SQLAlchemy unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from promptu.domain.repository.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Atomic unit backed by a SAVEPOINT on the request session.

    Rolling back to the savepoint undoes only the writes made inside
    ``atomic()``. ``commit()`` commits the request transaction; anything
    left uncommitted is committed by the persistence provider when the
    request ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield

    async def commit(self) -> None:
        await self.session.commit()
