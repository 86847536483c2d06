"""Get hot items use case."""

from pydantic import BaseModel

from promptu.config import TrendingSettings
from promptu.domain.service import TrendingService

from ..base import BaseUseCase
from .get_trending import TrendingItem


class GetHotItemsRequest(BaseModel):
    """Get hot items request."""

    limit: int | None = None


class GetHotItemsResponse(BaseModel):
    """Get hot items response."""

    items: list[TrendingItem]


class GetHotItemsUseCase(BaseUseCase[GetHotItemsRequest, GetHotItemsResponse]):
    """Use case for listing the fastest-rising recent items."""

    def __init__(
        self, trending_service: TrendingService, settings: TrendingSettings
    ) -> None:
        self.trending_service = trending_service
        self.settings = settings

    async def execute(self, request: GetHotItemsRequest) -> GetHotItemsResponse:
        limit = request.limit
        if limit is None:
            limit = self.settings.default_limit
        entries = await self.trending_service.get_hot_items(limit)

        return GetHotItemsResponse(
            items=[
                TrendingItem.from_entry(entry, has_voted=False) for entry in entries
            ]
        )
