"""Unit tests for the stats use cases."""

import pytest

from promptu.application.usecase.stats import (
    GetActivityRequest,
    GetActivityUseCase,
    GetCommunityStatsRequest,
    GetCommunityStatsUseCase,
)
from promptu.domain.error import InvalidArgumentError
from promptu.domain.repository import ItemRepository, UserRepository
from promptu.domain.value import Timeframe
from tests.conftest import make_item, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommunityStatsUseCase:
    """Tests for GetCommunityStatsUseCase."""

    @pytest.mark.asyncio
    async def test_engagement_only_when_detailed(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommunityStatsUseCase)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_item("counted-prompt", upvotes=2, views=8, copies=2))

        # Act
        brief = await use_case.execute(GetCommunityStatsRequest())
        detailed = await use_case.execute(GetCommunityStatsRequest(detailed=True))

        # Assert
        assert brief.stats.total_items == 1
        assert brief.engagement is None
        assert detailed.engagement is not None
        assert detailed.engagement.copy_to_view_ratio == 0.25
        assert detailed.engagement.vote_to_view_ratio == 0.25


class TestGetActivityUseCase:
    """Tests for GetActivityUseCase."""

    @pytest.mark.asyncio
    async def test_all_time_activity(self, unit_env):
        use_case = await unit_env.get(GetActivityUseCase)
        item_repo = await unit_env.get(ItemRepository)
        user_repo = await unit_env.get(UserRepository)
        await item_repo.save(make_item("published-prompt"))
        await item_repo.save(make_item("draft-prompt", published=False))
        await user_repo.save(make_user())

        response = await use_case.execute(GetActivityRequest(timeframe="all-time"))

        assert response.users.timeframe == Timeframe.ALL_TIME
        assert response.users.new_users == 1
        assert response.items.total_created == 2
        assert response.items.drafts == 1

    @pytest.mark.asyncio
    async def test_unknown_timeframe_is_rejected(self, unit_env):
        use_case = await unit_env.get(GetActivityUseCase)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(GetActivityRequest(timeframe="fortnightly"))
