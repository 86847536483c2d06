"""Trending domain service."""

from datetime import datetime, timedelta
from typing import Callable, List, Optional, Sequence, Tuple
from uuid import UUID

import logfire

from promptu.config import TrendingSettings
from promptu.domain.error import InvalidArgumentError
from promptu.domain.model.item import ContentItem, utcnow
from promptu.domain.model.trending import TrendingEntry
from promptu.domain.repository import ItemRepository
from promptu.domain.value import CategoryId, ContentType, Timeframe

from .base import Service
from .engagement import EngagementScorer


class TrendingService(Service):
    """Ranks published items by time-decayed engagement.

    Results are recomputed on every call and never cached or persisted.
    Ties are broken by newer ``created_at`` first, then by item ID, so the
    same data and clock always produce the same order.
    """

    def __init__(
        self,
        item_repository: ItemRepository,
        scorer: EngagementScorer,
        settings: TrendingSettings,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize trending service.

        Args:
            item_repository: Item repository
            scorer: Engagement scorer
            settings: Trending settings (hot window)
            clock: Source of the current time
        """
        self.item_repository = item_repository
        self.scorer = scorer
        self.settings = settings
        self.clock = clock

    async def rank(
        self,
        limit: int,
        timeframe: Timeframe,
        content_type: Optional[ContentType] = None,
        category_id: Optional[CategoryId] = None,
    ) -> List[TrendingEntry]:
        """Rank published items within a timeframe.

        Filters are applied before scoring and truncation.

        Args:
            limit: Maximum number of entries
            timeframe: Ranking window
            content_type: Only items of this type
            category_id: Only items in this category

        Returns:
            Up to ``limit`` entries, best first, ranks starting at 1

        Raises:
            InvalidArgumentError: If limit is not positive
        """
        _check_limit(limit)

        with logfire.span(
            "trending_service.rank",
            limit=limit,
            timeframe=timeframe.value,
            content_type=content_type.value if content_type else None,
            category_id=str(category_id) if category_id else None,
        ):
            now = self.clock()
            window = timeframe.window
            created_after = now - window if window is not None else None

            candidates = await self.item_repository.find_published(
                created_after=created_after,
                content_type=content_type,
                category_id=category_id,
            )

            scored = [
                (self.scorer.score(item, timeframe, now), item)
                for item in candidates
                if window is None or now - item.created_at < window
            ]
            ordered = sorted(scored, key=lambda pair: (-pair[0], *_recency(pair[1])))
            entries = _to_entries(ordered[:limit], timeframe)

            logfire.info(
                "Trending ranked",
                timeframe=timeframe.value,
                candidates=len(candidates),
                returned=len(entries),
            )
            return entries

    async def get_trending_items(
        self, limit: int, timeframe: Timeframe = Timeframe.WEEKLY
    ) -> List[TrendingEntry]:
        """Top items across all types and categories."""
        return await self.rank(limit, timeframe)

    async def get_trending_by_type(
        self,
        content_type: ContentType | str,
        limit: int,
        timeframe: Timeframe = Timeframe.ALL_TIME,
    ) -> List[TrendingEntry]:
        """Top items of one content type.

        An unknown type yields an empty list.
        """
        _check_limit(limit)
        parsed = (
            content_type
            if isinstance(content_type, ContentType)
            else ContentType.parse(content_type)
        )
        if parsed is None:
            return []
        return await self.rank(limit, timeframe, content_type=parsed)

    async def get_trending_by_category(
        self,
        category_id: CategoryId | str,
        limit: int,
        timeframe: Timeframe = Timeframe.ALL_TIME,
    ) -> List[TrendingEntry]:
        """Top items in one category.

        An unknown or malformed category yields an empty list.
        """
        _check_limit(limit)
        if isinstance(category_id, str):
            try:
                category_id = CategoryId(UUID(category_id))
            except ValueError:
                return []
        return await self.rank(limit, timeframe, category_id=category_id)

    async def get_hot_items(self, limit: int) -> List[TrendingEntry]:
        """Recent items ranked by upvotes per hour of age.

        Only items from the last ``hot_window_hours`` are considered. Ages
        under one hour count as one hour.

        Raises:
            InvalidArgumentError: If limit is not positive
        """
        _check_limit(limit)

        with logfire.span("trending_service.get_hot_items", limit=limit):
            now = self.clock()
            window = timedelta(hours=self.settings.hot_window_hours)
            candidates = await self.item_repository.find_published(
                created_after=now - window
            )

            scored = []
            for item in candidates:
                age_hours = (now - item.created_at).total_seconds() / 3600
                scored.append((item.upvote_count / max(age_hours, 1.0), item))

            ordered = sorted(
                scored,
                key=lambda pair: (-pair[0], -pair[1].upvote_count, *_recency(pair[1])),
            )
            return _to_entries(ordered[:limit], Timeframe.DAILY)


def _check_limit(limit: int) -> None:
    if limit <= 0:
        raise InvalidArgumentError(f"limit must be positive, got {limit}")


def _recency(item: ContentItem) -> Tuple[float, str]:
    # Newer items first, then ID for a total order
    return -item.created_at.timestamp(), str(item.id)


def _to_entries(
    ordered: Sequence[Tuple[float, ContentItem]], timeframe: Timeframe
) -> List[TrendingEntry]:
    return [
        TrendingEntry(
            item_id=item.id,
            slug=str(item.slug),
            title=item.title,
            score=score,
            rank=position,
            timeframe=timeframe,
            upvote_count=item.upvote_count,
            view_count=item.view_count,
            copy_count=item.copy_count,
            content_type=item.content_type,
            category_id=item.category_id,
            created_at=item.created_at,
        )
        for position, (score, item) in enumerate(ordered, start=1)
    ]
