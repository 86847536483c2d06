"""Get trending items use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from promptu.config import TrendingSettings
from promptu.domain.error import InvalidArgumentError
from promptu.domain.model import TrendingEntry
from promptu.domain.service import TrendingService, VotingService
from promptu.domain.value import CategoryId, ContentType, Timeframe, UserId

from ..base import BaseUseCase


class TrendingItem(BaseModel):
    """Trending item in response."""

    item_id: str
    slug: str
    title: str
    content_type: ContentType
    category_id: str | None
    score: float
    rank: int
    upvote_count: int
    view_count: int
    copy_count: int
    created_at: datetime
    has_voted: bool

    @classmethod
    def from_entry(cls, entry: TrendingEntry, has_voted: bool) -> "TrendingItem":
        return cls(
            item_id=str(entry.item_id),
            slug=entry.slug,
            title=entry.title,
            content_type=entry.content_type,
            category_id=str(entry.category_id) if entry.category_id else None,
            score=round(entry.score, 4),
            rank=entry.rank,
            upvote_count=entry.upvote_count,
            view_count=entry.view_count,
            copy_count=entry.copy_count,
            created_at=entry.created_at,
            has_voted=has_voted,
        )


class TrendingMeta(BaseModel):
    """Echo of the effective query."""

    limit: int
    timeframe: Timeframe
    type: str | None
    category: str | None
    count: int


class GetTrendingRequest(BaseModel):
    """Get trending request."""

    limit: int | None = None  # Falls back to the configured default
    timeframe: str = Timeframe.WEEKLY.value
    type: str | None = None
    category: str | None = None
    user_id: str | None = None  # Current user ID (if authenticated)


class GetTrendingResponse(BaseModel):
    """Get trending response."""

    items: list[TrendingItem]
    meta: TrendingMeta


class GetTrendingUseCase(BaseUseCase[GetTrendingRequest, GetTrendingResponse]):
    """Use case for listing trending items with optional filters."""

    def __init__(
        self,
        trending_service: TrendingService,
        voting_service: VotingService,
        settings: TrendingSettings,
    ) -> None:
        """Initialize get trending use case.

        Args:
            trending_service: Trending domain service
            voting_service: Voting domain service (viewer's votes)
            settings: Trending settings (default limit)
        """
        self.trending_service = trending_service
        self.voting_service = voting_service
        self.settings = settings

    async def execute(self, request: GetTrendingRequest) -> GetTrendingResponse:
        """Execute get trending flow.

        An unknown type or category yields an empty listing.

        Raises:
            InvalidArgumentError: If limit or timeframe is invalid
        """
        limit = request.limit
        if limit is None:
            limit = self.settings.default_limit
        if limit <= 0:
            raise InvalidArgumentError(f"limit must be positive, got {limit}")

        timeframe = Timeframe.parse(request.timeframe)
        if timeframe is None:
            raise InvalidArgumentError(f"Unknown timeframe: {request.timeframe}")

        with logfire.span(
            "get_trending.execute",
            limit=limit,
            timeframe=timeframe.value,
            type=request.type,
            category=request.category,
        ):
            entries = await self._rank(request, limit, timeframe)

            voted_ids = set()
            if request.user_id and entries:
                voted_ids = await self.voting_service.get_voted_item_ids(
                    UserId(UUID(request.user_id)),
                    [entry.item_id for entry in entries],
                )

            items = [
                TrendingItem.from_entry(entry, has_voted=entry.item_id in voted_ids)
                for entry in entries
            ]

            return GetTrendingResponse(
                items=items,
                meta=TrendingMeta(
                    limit=limit,
                    timeframe=timeframe,
                    type=request.type,
                    category=request.category,
                    count=len(items),
                ),
            )

    async def _rank(
        self, request: GetTrendingRequest, limit: int, timeframe: Timeframe
    ) -> list[TrendingEntry]:
        content_type = None
        if request.type:
            content_type = ContentType.parse(request.type)
            if content_type is None:
                return []

        category_id = None
        if request.category:
            try:
                category_id = CategoryId(UUID(request.category))
            except ValueError:
                return []

        return await self.trending_service.rank(
            limit, timeframe, content_type=content_type, category_id=category_id
        )
