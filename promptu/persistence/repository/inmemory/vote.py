"""In-memory vote repository for testing."""

from typing import Sequence

from promptu.domain.error import DuplicateVoteError
from promptu.domain.model.vote import Vote
from promptu.domain.repository.vote import VoteRepository
from promptu.domain.value import ItemId, UserId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def record_vote(self, vote: Vote) -> Vote:
        """Insert a vote, rejecting a second vote for the same pair."""
        key = (vote.item_id, vote.user_id)
        if key in self.store.votes:
            raise DuplicateVoteError(str(vote.item_id), str(vote.user_id))
        self.store.votes[key] = vote
        return vote

    async def remove_vote(self, item_id: ItemId, user_id: UserId) -> bool:
        """Delete a user's vote on an item."""
        return self.store.votes.pop((item_id, user_id), None) is not None

    async def has_voted(self, item_id: ItemId, user_id: UserId) -> bool:
        """Check whether a user holds a vote on an item."""
        return (item_id, user_id) in self.store.votes

    async def count_votes(self, item_id: ItemId) -> int:
        """Count the votes held on an item."""
        return sum(1 for key in self.store.votes if key[0] == item_id)

    async def find_voted_item_ids(
        self, user_id: UserId, item_ids: Sequence[ItemId]
    ) -> set[ItemId]:
        """Find which of the given items a user has voted on."""
        return {
            item_id for item_id in item_ids if (item_id, user_id) in self.store.votes
        }
