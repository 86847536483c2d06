"""Unit tests for VotingService."""

import asyncio
import random
from uuid import uuid4

import pytest

from promptu.domain.error import ItemNotFoundError, SelfVoteForbiddenError
from promptu.domain.repository import ItemRepository, UnitOfWork, VoteRepository
from promptu.domain.service import ItemService, VotingService
from promptu.domain.value import ItemId, UserId
from promptu.persistence.repository.inmemory import (
    InMemoryItemRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from tests.conftest import make_item
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class StaleReadVoteRepository(InMemoryVoteRepository):
    """Reports a fixed answer from has_voted, like a read racing a writer."""

    def __init__(self, store: InMemoryStore, reported: bool) -> None:
        super().__init__(store)
        self.reported = reported

    async def has_voted(self, item_id: ItemId, user_id: UserId) -> bool:
        return self.reported


class FailingCounterItemRepository(InMemoryItemRepository):
    """Fails every counter adjustment."""

    async def adjust_upvote_count(self, item_id: ItemId, delta: int) -> int:
        raise RuntimeError("counter update failed")


class CallOrderItemRepository(InMemoryItemRepository):
    """Records when the item row is locked."""

    def __init__(self, store: InMemoryStore, calls: list[str]) -> None:
        super().__init__(store)
        self.calls = calls

    async def find_by_id_for_update(self, item_id: ItemId):
        self.calls.append("lock_item")
        return await super().find_by_id_for_update(item_id)


class CallOrderVoteRepository(InMemoryVoteRepository):
    """Records when the ledger is counted."""

    def __init__(self, store: InMemoryStore, calls: list[str]) -> None:
        super().__init__(store)
        self.calls = calls

    async def count_votes(self, item_id: ItemId) -> int:
        self.calls.append("count_votes")
        return await super().count_votes(item_id)


async def _voting_service_with(
    unit_env,
    vote_repository: VoteRepository | None = None,
    item_repository: ItemRepository | None = None,
) -> VotingService:
    store = await unit_env.get(InMemoryStore)
    item_repository = item_repository or InMemoryItemRepository(store)
    return VotingService(
        vote_repository=vote_repository or InMemoryVoteRepository(store),
        item_repository=item_repository,
        item_service=ItemService(item_repository=item_repository),
        unit_of_work=await unit_env.get(UnitOfWork),
    )


class TestToggleUpvote:
    """Tests for toggle_upvote."""

    @pytest.mark.asyncio
    async def test_first_toggle_records_vote_and_increments_count(self, unit_env):
        """Toggling with no vote should add one and bump the counter."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("sql-explainer"))
        user_id = UserId(uuid4())

        # Act
        state = await voting_service.toggle_upvote("sql-explainer", user_id)

        # Assert
        assert state.voted is True
        assert state.upvote_count == 1
        assert await vote_repo.has_voted(item.id, user_id)
        assert (await item_repo.find_by_id(item.id)).upvote_count == 1

    @pytest.mark.asyncio
    async def test_second_toggle_removes_vote(self, unit_env):
        """Toggling twice should restore the original state."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("sql-explainer"))
        user_id = UserId(uuid4())

        # Act
        await voting_service.toggle_upvote("sql-explainer", user_id)
        state = await voting_service.toggle_upvote("sql-explainer", user_id)

        # Assert
        assert state.voted is False
        assert state.upvote_count == 0
        assert not await vote_repo.has_voted(item.id, user_id)
        assert await vote_repo.count_votes(item.id) == 0

    @pytest.mark.asyncio
    async def test_toggle_resolves_item_by_id(self, unit_env):
        """The item may be addressed by its UUID instead of its slug."""
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("code-reviewer"))

        state = await voting_service.toggle_upvote(str(item.id), UserId(uuid4()))

        assert state.voted is True
        assert state.upvote_count == 1

    @pytest.mark.asyncio
    async def test_self_vote_is_rejected_without_side_effects(self, unit_env):
        """Authors cannot vote on their own items."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author_id = UserId(uuid4())
        item = await item_repo.save(make_item("my-prompt", author_id=author_id))

        # Act & Assert
        with pytest.raises(SelfVoteForbiddenError):
            await voting_service.toggle_upvote("my-prompt", author_id)

        assert await vote_repo.count_votes(item.id) == 0
        assert (await item_repo.find_by_id(item.id)).upvote_count == 0

    @pytest.mark.asyncio
    async def test_unknown_item_raises_not_found(self, unit_env):
        """Voting on a missing item should raise ItemNotFoundError."""
        voting_service = await unit_env.get(VotingService)

        with pytest.raises(ItemNotFoundError):
            await voting_service.toggle_upvote("does-not-exist", UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_slug_raises_not_found(self, unit_env):
        """A string that cannot be a slug resolves to no item."""
        voting_service = await unit_env.get(VotingService)

        with pytest.raises(ItemNotFoundError):
            await voting_service.toggle_upvote("Not A Slug!", UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_unpublished_item_raises_not_found(self, unit_env):
        """Drafts cannot be voted on."""
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("draft-prompt", published=False))

        with pytest.raises(ItemNotFoundError):
            await voting_service.toggle_upvote("draft-prompt", UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_counter_matches_ledger_under_random_toggles(self, unit_env):
        """After every toggle the counter should equal the number of votes."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        items = [
            await item_repo.save(make_item(slug))
            for slug in ("alpha-prompt", "beta-prompt", "gamma-prompt")
        ]
        users = [UserId(uuid4()) for _ in range(5)]
        rng = random.Random(42)

        # Act & Assert
        for _ in range(200):
            item = rng.choice(items)
            await voting_service.toggle_upvote(str(item.slug), rng.choice(users))

            stored = await item_repo.find_by_id(item.id)
            assert stored.upvote_count == await vote_repo.count_votes(item.id)

    @pytest.mark.asyncio
    async def test_concurrent_toggles_from_different_users_all_count(self, unit_env):
        """Concurrent first votes from distinct users should all be counted."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("popular-prompt"))
        users = [UserId(uuid4()) for _ in range(20)]

        # Act
        await asyncio.gather(
            *(voting_service.toggle_upvote("popular-prompt", u) for u in users)
        )

        # Assert
        assert await vote_repo.count_votes(item.id) == 20
        assert (await item_repo.find_by_id(item.id)).upvote_count == 20

    @pytest.mark.asyncio
    async def test_concurrent_toggles_from_same_user_never_double_count(
        self, unit_env
    ):
        """Racing toggles for one (item, user) pair serialize into on then off."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("contested-prompt"))
        user_id = UserId(uuid4())

        # Act
        states = await asyncio.gather(
            voting_service.toggle_upvote("contested-prompt", user_id),
            voting_service.toggle_upvote("contested-prompt", user_id),
        )

        # Assert
        votes = await vote_repo.count_votes(item.id)
        assert votes in (0, 1)
        assert (await item_repo.find_by_id(item.id)).upvote_count == votes
        assert sorted(state.voted for state in states) == [False, True]

    @pytest.mark.asyncio
    async def test_odd_number_of_concurrent_toggles_leaves_one_vote(self, unit_env):
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("contested-prompt"))
        user_id = UserId(uuid4())

        toggles = [
            voting_service.toggle_upvote("contested-prompt", user_id) for _ in range(3)
        ]
        await asyncio.gather(*toggles)

        assert await vote_repo.count_votes(item.id) == 1
        assert (await item_repo.find_by_id(item.id)).upvote_count == 1

    @pytest.mark.asyncio
    async def test_lost_insert_race_is_a_no_op(self, unit_env):
        """A toggle that read 'not voted' after another insert won adds nothing."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("raced-prompt"))
        user_id = UserId(uuid4())
        await voting_service.toggle_upvote("raced-prompt", user_id)

        store = await unit_env.get(InMemoryStore)
        stale_service = await _voting_service_with(
            unit_env, vote_repository=StaleReadVoteRepository(store, reported=False)
        )

        # Act
        state = await stale_service.toggle_upvote("raced-prompt", user_id)

        # Assert
        assert state.voted is True
        assert state.upvote_count == 1
        assert await vote_repo.count_votes(item.id) == 1
        assert (await item_repo.find_by_id(item.id)).upvote_count == 1

    @pytest.mark.asyncio
    async def test_lost_delete_race_is_a_no_op(self, unit_env):
        """A toggle that read 'voted' after another removal won subtracts nothing."""
        # Arrange
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("raced-prompt"))
        store = await unit_env.get(InMemoryStore)
        stale_service = await _voting_service_with(
            unit_env, vote_repository=StaleReadVoteRepository(store, reported=True)
        )

        # Act
        state = await stale_service.toggle_upvote("raced-prompt", UserId(uuid4()))

        # Assert
        assert state.voted is False
        assert state.upvote_count == 0
        assert (await item_repo.find_by_id(item.id)).upvote_count == 0

    @pytest.mark.asyncio
    async def test_counter_failure_rolls_back_ledger_write(self, unit_env):
        """If the counter update fails the vote must not be kept."""
        # Arrange
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        item = await item_repo.save(make_item("fragile-prompt"))
        store = await unit_env.get(InMemoryStore)
        failing_service = await _voting_service_with(
            unit_env, item_repository=FailingCounterItemRepository(store)
        )
        user_id = UserId(uuid4())

        # Act
        with pytest.raises(RuntimeError):
            await failing_service.toggle_upvote("fragile-prompt", user_id)

        # Assert
        assert not await vote_repo.has_voted(item.id, user_id)
        assert (await item_repo.find_by_id(item.id)).upvote_count == 0


class TestVotingStatus:
    """Tests for get_voting_status and get_vote_counts."""

    @pytest.mark.asyncio
    async def test_anonymous_caller_never_voted(self, unit_env):
        """Anonymous callers see voted=False with the public count."""
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))
        await voting_service.toggle_upvote("sql-explainer", UserId(uuid4()))

        state = await voting_service.get_voting_status("sql-explainer", None)

        assert state.voted is False
        assert state.upvote_count == 1

    @pytest.mark.asyncio
    async def test_status_reflects_callers_vote(self, unit_env):
        """A voter sees voted=True, another user does not."""
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))
        voter = UserId(uuid4())
        await voting_service.toggle_upvote("sql-explainer", voter)

        mine = await voting_service.get_voting_status("sql-explainer", voter)
        theirs = await voting_service.get_voting_status("sql-explainer", UserId(uuid4()))

        assert mine.voted is True
        assert theirs.voted is False

    @pytest.mark.asyncio
    async def test_net_score_equals_upvote_count(self, unit_env):
        """There are no downvotes, so net score is the upvote count."""
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))
        for _ in range(3):
            await voting_service.toggle_upvote("sql-explainer", UserId(uuid4()))

        counts = await voting_service.get_vote_counts("sql-explainer")

        assert counts.upvote_count == 3
        assert counts.net_score == 3

    @pytest.mark.asyncio
    async def test_status_of_unknown_item_raises_not_found(self, unit_env):
        voting_service = await unit_env.get(VotingService)

        with pytest.raises(ItemNotFoundError):
            await voting_service.get_voting_status("missing-item", None)

        with pytest.raises(ItemNotFoundError):
            await voting_service.get_vote_counts("missing-item")

    @pytest.mark.asyncio
    async def test_voted_item_ids_batch_lookup(self, unit_env):
        """Only items holding the user's vote are returned."""
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        voted = await item_repo.save(make_item("voted-prompt"))
        other = await item_repo.save(make_item("other-prompt"))
        user_id = UserId(uuid4())
        await voting_service.toggle_upvote("voted-prompt", user_id)

        result = await voting_service.get_voted_item_ids(user_id, [voted.id, other.id])

        assert result == {voted.id}
        assert await voting_service.get_voted_item_ids(user_id, []) == set()


class TestReconcileUpvoteCount:
    """Tests for counter reconciliation."""

    @pytest.mark.asyncio
    async def test_drifted_counter_is_rewritten(self, unit_env):
        """The counter is reset to the number of votes in the ledger."""
        # Arrange
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("drifted-prompt"))
        await voting_service.toggle_upvote("drifted-prompt", UserId(uuid4()))
        await item_repo.set_upvote_count(item.id, 7)

        # Act
        actual = await voting_service.reconcile_upvote_count(item.id)

        # Assert
        assert actual == 1
        assert (await item_repo.find_by_id(item.id)).upvote_count == 1

    @pytest.mark.asyncio
    async def test_reconcile_all_checks_every_item(self, unit_env):
        voting_service = await unit_env.get(VotingService)
        item_repo = await unit_env.get(ItemRepository)
        first = await item_repo.save(make_item("first-prompt", upvotes=4))
        second = await item_repo.save(make_item("second-prompt", upvotes=2))

        checked = await voting_service.reconcile_all_upvote_counts()

        assert checked == 2
        assert (await item_repo.find_by_id(first.id)).upvote_count == 0
        assert (await item_repo.find_by_id(second.id)).upvote_count == 0

    @pytest.mark.asyncio
    async def test_reconcile_unknown_item_raises_not_found(self, unit_env):
        voting_service = await unit_env.get(VotingService)

        with pytest.raises(ItemNotFoundError):
            await voting_service.reconcile_upvote_count(ItemId(uuid4()))

    @pytest.mark.asyncio
    async def test_item_is_locked_before_the_ledger_is_counted(self, unit_env):
        """Counting after the lock keeps a concurrent toggle from being lost."""
        # Arrange
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("locked-prompt", upvotes=3))
        store = await unit_env.get(InMemoryStore)
        calls: list[str] = []
        service = await _voting_service_with(
            unit_env,
            vote_repository=CallOrderVoteRepository(store, calls),
            item_repository=CallOrderItemRepository(store, calls),
        )

        # Act
        actual = await service.reconcile_upvote_count(item.id)

        # Assert
        assert actual == 0
        assert calls == ["lock_item", "count_votes"]
