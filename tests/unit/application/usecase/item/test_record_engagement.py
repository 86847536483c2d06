"""Unit tests for RecordEngagementUseCase."""

import pytest

from promptu.application.usecase.item import (
    EngagementKind,
    RecordEngagementRequest,
    RecordEngagementUseCase,
)
from promptu.domain.error import ItemNotFoundError
from promptu.domain.repository import ItemRepository
from tests.conftest import make_item
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecordEngagementUseCase:
    """Tests for RecordEngagementUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kind, field",
        [(EngagementKind.VIEW, "view_count"), (EngagementKind.COPY, "copy_count")],
    )
    async def test_increments_matching_counter(self, unit_env, kind, field):
        use_case = await unit_env.get(RecordEngagementUseCase)
        item_repo = await unit_env.get(ItemRepository)
        item = await item_repo.save(make_item("engaging-prompt"))

        response = await use_case.execute(
            RecordEngagementRequest(item="engaging-prompt", kind=kind)
        )

        assert response.kind == kind
        assert response.count == 1
        assert getattr(await item_repo.find_by_id(item.id), field) == 1

    @pytest.mark.asyncio
    async def test_unknown_item_raises_not_found(self, unit_env):
        use_case = await unit_env.get(RecordEngagementUseCase)

        with pytest.raises(ItemNotFoundError):
            await use_case.execute(
                RecordEngagementRequest(item="missing-item", kind=EngagementKind.VIEW)
            )
