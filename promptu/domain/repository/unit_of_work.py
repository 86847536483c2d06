"""Atomic unit of work interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class UnitOfWork(ABC):
    """Groups repository writes into a single atomic unit.

    Everything executed inside ``atomic()`` is committed together or not at
    all. An exception raised inside the block rolls back every write made in
    it and propagates to the caller.

    Usage:
        async with unit_of_work.atomic():
            await vote_repository.record_vote(vote)
            await item_repository.adjust_upvote_count(item_id, 1)
        await unit_of_work.commit()
    """

    @abstractmethod
    def atomic(self) -> AsyncContextManager[None]:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make every write so far durable.

        Writes are only reported to a caller after this returns; a failure
        here must surface as an error to that caller.
        """
        pass
