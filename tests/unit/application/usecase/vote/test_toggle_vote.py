"""Unit tests for the vote use cases."""

from uuid import uuid4

import pytest

from promptu.application.usecase.vote import (
    GetVoteStatusRequest,
    GetVoteStatusUseCase,
    ToggleVoteRequest,
    ToggleVoteUseCase,
)
from promptu.domain.error import InvalidArgumentError, SelfVoteForbiddenError
from promptu.domain.repository import ItemRepository
from promptu.domain.service import VotingService
from promptu.persistence.repository.inmemory import InMemoryStore, InMemoryUnitOfWork
from tests.conftest import make_item
from tests.di.persistence import FailingCommitUnitOfWork
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class CountingUnitOfWork(InMemoryUnitOfWork):
    """Counts commits."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1


class TestToggleVoteUseCase:
    """Tests for ToggleVoteUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_on_then_off(self, unit_env):
        """Toggling twice returns the item to its original state."""
        # Arrange
        use_case = await unit_env.get(ToggleVoteUseCase)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))
        user_id = str(uuid4())

        # Act
        on = await use_case.execute(ToggleVoteRequest(item="sql-explainer", user_id=user_id))
        off = await use_case.execute(ToggleVoteRequest(item="sql-explainer", user_id=user_id))

        # Assert
        assert (on.voted, on.upvote_count, on.net_score) == (True, 1, 1)
        assert on.message == "Item upvoted"
        assert (off.voted, off.upvote_count, off.net_score) == (False, 0, 0)
        assert off.message == "Upvote removed"

    @pytest.mark.asyncio
    async def test_unsupported_vote_type_is_rejected(self, unit_env):
        use_case = await unit_env.get(ToggleVoteUseCase)
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("sql-explainer"))

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                ToggleVoteRequest(
                    item="sql-explainer", user_id=str(uuid4()), vote_type="downvote"
                )
            )

        assert (await item_repo.find_by_id(item.id)).upvote_count == 0

    @pytest.mark.asyncio
    async def test_author_cannot_vote(self, unit_env):
        use_case = await unit_env.get(ToggleVoteUseCase)
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("own-prompt"))

        with pytest.raises(SelfVoteForbiddenError):
            await use_case.execute(
                ToggleVoteRequest(item="own-prompt", user_id=str(item.author_id))
            )


    @pytest.mark.asyncio
    async def test_toggle_is_committed_before_it_is_reported(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        unit_of_work = CountingUnitOfWork(store)
        use_case = ToggleVoteUseCase(
            voting_service=await unit_env.get(VotingService), unit_of_work=unit_of_work
        )
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))

        await use_case.execute(
            ToggleVoteRequest(item="sql-explainer", user_id=str(uuid4()))
        )

        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_commit_failure_propagates(self, unit_env):
        store = await unit_env.get(InMemoryStore)
        use_case = ToggleVoteUseCase(
            voting_service=await unit_env.get(VotingService),
            unit_of_work=FailingCommitUnitOfWork(store),
        )
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))

        with pytest.raises(RuntimeError, match="commit failed"):
            await use_case.execute(
                ToggleVoteRequest(item="sql-explainer", user_id=str(uuid4()))
            )

class TestGetVoteStatusUseCase:
    """Tests for GetVoteStatusUseCase."""

    @pytest.mark.asyncio
    async def test_status_for_voter_and_anonymous(self, unit_env):
        # Arrange
        toggle = await unit_env.get(ToggleVoteUseCase)
        status = await unit_env.get(GetVoteStatusUseCase)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("sql-explainer"))
        user_id = str(uuid4())
        await toggle.execute(ToggleVoteRequest(item="sql-explainer", user_id=user_id))

        # Act
        mine = await status.execute(
            GetVoteStatusRequest(item="sql-explainer", user_id=user_id)
        )
        anonymous = await status.execute(GetVoteStatusRequest(item="sql-explainer"))

        # Assert
        assert (mine.voted, mine.upvote_count, mine.net_score) == (True, 1, 1)
        assert (anonymous.voted, anonymous.upvote_count) == (False, 1)
