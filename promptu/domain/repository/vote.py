"""Vote ledger repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from promptu.domain.model.vote import Vote
from promptu.domain.value import ItemId, UserId


class VoteRepository(ABC):
    """Durable, uniqueness-enforcing storage of votes.

    The ledger is the source of truth for vote existence. The
    ``upvote_count`` stored on each item must always equal
    ``count_votes(item_id)``.
    """

    @abstractmethod
    async def record_vote(self, vote: Vote) -> Vote:
        """Insert a vote.

        Uniqueness of (item_id, user_id) is enforced by the storage layer so
        that concurrent writers cannot both succeed.

        Args:
            vote: The vote to record

        Returns:
            The recorded vote

        Raises:
            DuplicateVoteError: If the user already voted on the item
        """
        pass

    @abstractmethod
    async def remove_vote(self, item_id: ItemId, user_id: UserId) -> bool:
        """Delete a user's vote on an item.

        Args:
            item_id: ID of the item
            user_id: The user's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def has_voted(self, item_id: ItemId, user_id: UserId) -> bool:
        """Check whether a user holds a vote on an item."""
        pass

    @abstractmethod
    async def count_votes(self, item_id: ItemId) -> int:
        """Count the votes held on an item.

        Args:
            item_id: ID of the item

        Returns:
            Authoritative number of votes
        """
        pass

    @abstractmethod
    async def find_voted_item_ids(
        self, user_id: UserId, item_ids: Sequence[ItemId]
    ) -> set[ItemId]:
        """Find which of the given items a user has voted on (batch query).

        Args:
            user_id: The user's ID
            item_ids: Items to check

        Returns:
            Subset of ``item_ids`` the user has voted on
        """
        pass
