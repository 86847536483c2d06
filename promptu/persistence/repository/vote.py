"""PostgreSQL implementation of Vote repository."""

from typing import Sequence

import logfire
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from promptu.domain.error import DuplicateVoteError
from promptu.domain.model import Vote
from promptu.domain.repository import VoteRepository
from promptu.domain.value import ItemId, UserId
from promptu.persistence.mappers import vote_to_dict
from promptu.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Uniqueness of (item_id, user_id) is the ``uq_votes_item_user``
    constraint, so two concurrent inserts cannot both commit.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def record_vote(self, vote: Vote) -> Vote:
        """Insert a vote, translating a unique violation."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            # Savepoint so a violation leaves the surrounding transaction usable
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            logfire.warn(
                "Duplicate vote rejected by constraint",
                item_id=str(vote.item_id),
                user_id=str(vote.user_id),
            )
            raise DuplicateVoteError(str(vote.item_id), str(vote.user_id))
        return vote

    async def remove_vote(self, item_id: ItemId, user_id: UserId) -> bool:
        """Delete a user's vote on an item."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.item_id == item_id,
                votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def has_voted(self, item_id: ItemId, user_id: UserId) -> bool:
        """Check whether a user holds a vote on an item."""
        stmt = select(votes_table.c.id).where(
            and_(
                votes_table.c.item_id == item_id,
                votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def count_votes(self, item_id: ItemId) -> int:
        """Count the votes held on an item."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.item_id == item_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_voted_item_ids(
        self, user_id: UserId, item_ids: Sequence[ItemId]
    ) -> set[ItemId]:
        """Find which of the given items a user has voted on (batch query)."""
        if not item_ids:
            return set()

        stmt = select(votes_table.c.item_id).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.item_id.in_(item_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {ItemId(row.item_id) for row in result.fetchall()}
