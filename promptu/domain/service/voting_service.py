"""Voting domain service.

Owns the upvote toggle and is the only writer of ``ContentItem.upvote_count``.
The ledger write and the counter adjustment always happen in one atomic unit,
so the counter equals the number of votes in the ledger.
"""

from typing import Optional
from uuid import uuid4

import logfire

from promptu.domain.error import (
    DuplicateVoteError,
    ItemNotFoundError,
    SelfVoteForbiddenError,
)
from promptu.domain.model.item import ContentItem, utcnow
from promptu.domain.model.vote import Vote, VoteCounts, VoteState
from promptu.domain.repository import ItemRepository, UnitOfWork, VoteRepository
from promptu.domain.value import ItemId, UserId, VoteId, VoteType

from .base import Service
from .item_service import ItemService


class VotingService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        item_repository: ItemRepository,
        item_service: ItemService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize voting service.

        Args:
            vote_repository: Vote ledger
            item_repository: Item repository (upvote counter)
            item_service: Item domain service (lookup by slug or ID)
            unit_of_work: Atomic unit spanning ledger and counter writes
        """
        self.vote_repository = vote_repository
        self.item_repository = item_repository
        self.item_service = item_service
        self.unit_of_work = unit_of_work

    async def toggle_upvote(self, item_ref: str, user_id: UserId) -> VoteState:
        """Toggle a user's upvote on an item.

        Adds the vote if the user has none, removes it otherwise.

        Args:
            item_ref: Item UUID string or slug
            user_id: Voting user

        Returns:
            Vote state after the toggle

        Raises:
            ItemNotFoundError: If the item is absent or unpublished
            SelfVoteForbiddenError: If the user authored the item
        """
        with logfire.span(
            "voting_service.toggle_upvote", item=item_ref, user_id=str(user_id)
        ):
            item = await self.item_service.get_published_item(item_ref)

            if item.author_id == user_id:
                logfire.warn(
                    "Self-vote attempt", item_id=str(item.id), user_id=str(user_id)
                )
                raise SelfVoteForbiddenError(str(item.id), str(user_id))

            async with self.unit_of_work.atomic():
                if await self.vote_repository.has_voted(item.id, user_id):
                    state = await self._remove_upvote(item, user_id)
                else:
                    state = await self._add_upvote(item, user_id)

            logfire.info(
                "Vote toggled",
                item_id=str(item.id),
                user_id=str(user_id),
                voted=state.voted,
                upvote_count=state.upvote_count,
            )
            return state

    async def _add_upvote(self, item: ContentItem, user_id: UserId) -> VoteState:
        vote = Vote(
            id=VoteId(uuid4()),
            item_id=item.id,
            user_id=user_id,
            vote_type=VoteType.UPVOTE,
            created_at=utcnow(),
        )

        try:
            await self.vote_repository.record_vote(vote)
        except DuplicateVoteError:
            # A concurrent toggle inserted the same vote first
            logfire.warn(
                "Concurrent duplicate vote", item_id=str(item.id), user_id=str(user_id)
            )
            upvote_count = await self._current_upvote_count(item.id)
            return VoteState(
                voted=True, upvote_count=upvote_count, message="Already upvoted"
            )

        upvote_count = await self.item_repository.adjust_upvote_count(item.id, 1)
        return VoteState(voted=True, upvote_count=upvote_count, message="Item upvoted")

    async def _remove_upvote(self, item: ContentItem, user_id: UserId) -> VoteState:
        removed = await self.vote_repository.remove_vote(item.id, user_id)
        if not removed:
            # A concurrent toggle removed the vote first
            logfire.warn(
                "Concurrent vote removal", item_id=str(item.id), user_id=str(user_id)
            )
            upvote_count = await self._current_upvote_count(item.id)
            return VoteState(
                voted=False, upvote_count=upvote_count, message="Upvote removed"
            )

        upvote_count = await self.item_repository.adjust_upvote_count(item.id, -1)
        return VoteState(
            voted=False, upvote_count=upvote_count, message="Upvote removed"
        )

    async def _current_upvote_count(self, item_id: ItemId) -> int:
        item = await self.item_repository.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(str(item_id))
        return item.upvote_count

    async def get_voting_status(
        self, item_ref: str, user_id: Optional[UserId] = None
    ) -> VoteState:
        """Get a user's vote state on an item.

        Args:
            item_ref: Item UUID string or slug
            user_id: Viewing user, None for anonymous callers

        Returns:
            Vote state; ``voted`` is always False for anonymous callers

        Raises:
            ItemNotFoundError: If the item is absent or unpublished
        """
        item = await self.item_service.get_published_item(item_ref)

        voted = False
        if user_id is not None:
            voted = await self.vote_repository.has_voted(item.id, user_id)

        return VoteState(voted=voted, upvote_count=item.upvote_count)

    async def get_vote_counts(self, item_ref: str) -> VoteCounts:
        """Get the public vote counts of an item.

        Raises:
            ItemNotFoundError: If the item is absent or unpublished
        """
        item = await self.item_service.get_published_item(item_ref)
        return VoteCounts(upvote_count=item.upvote_count)

    async def get_voted_item_ids(
        self, user_id: UserId, item_ids: list[ItemId]
    ) -> set[ItemId]:
        """Check which of the given items a user has voted on.

        Args:
            user_id: User ID
            item_ids: Items to check

        Returns:
            Subset of ``item_ids`` holding a vote from the user
        """
        if not item_ids:
            return set()

        # Batch query to avoid one lookup per item
        return await self.vote_repository.find_voted_item_ids(user_id, item_ids)

    async def reconcile_upvote_count(self, item_id: ItemId) -> int:
        """Rewrite an item's upvote counter from the ledger if it drifted.

        Args:
            item_id: Item to reconcile

        Returns:
            Authoritative vote count

        Raises:
            ItemNotFoundError: If the item does not exist
        """
        with logfire.span(
            "voting_service.reconcile_upvote_count", item_id=str(item_id)
        ):
            async with self.unit_of_work.atomic():
                # Toggles on this item block until the reconcile commits
                item = await self.item_repository.find_by_id_for_update(item_id)
                if item is None:
                    raise ItemNotFoundError(str(item_id))

                actual = await self.vote_repository.count_votes(item_id)
                if item.upvote_count != actual:
                    logfire.warn(
                        "Upvote counter drifted from ledger",
                        item_id=str(item_id),
                        stored=item.upvote_count,
                        actual=actual,
                    )
                    await self.item_repository.set_upvote_count(item_id, actual)

            return actual

    async def reconcile_all_upvote_counts(self) -> int:
        """Reconcile every item's upvote counter.

        Returns:
            Number of items checked
        """
        item_ids = await self.item_repository.list_ids()
        for item_id in item_ids:
            await self.reconcile_upvote_count(item_id)
            await self.unit_of_work.commit()
        logfire.info("Upvote counters reconciled", items=len(item_ids))
        return len(item_ids)
