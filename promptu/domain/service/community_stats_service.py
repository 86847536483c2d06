"""Community statistics domain service."""

from datetime import datetime, timedelta
from typing import Callable, Optional

import logfire

from promptu.domain.model.item import utcnow
from promptu.domain.model.stats import (
    CommunityStats,
    EngagementStats,
    ItemActivity,
    MostUpvotedItem,
    UserActivity,
)
from promptu.domain.repository import ItemRepository, UserRepository
from promptu.domain.value import Timeframe

from .base import Service

TOP_TYPES_LIMIT = 5


def _ratio(numerator: float, denominator: float, digits: int) -> float:
    if not denominator:
        return 0.0
    return round(numerator / denominator, digits)


class CommunityStatsService(Service):
    """Aggregates platform-wide totals and engagement ratios.

    Everything is recomputed from the live counters on each call.
    """

    def __init__(
        self,
        item_repository: ItemRepository,
        user_repository: UserRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize community stats service.

        Args:
            item_repository: Item repository
            user_repository: User repository
            clock: Source of the current time
        """
        self.item_repository = item_repository
        self.user_repository = user_repository
        self.clock = clock

    def _since(self, timeframe: Timeframe) -> Optional[datetime]:
        window = timeframe.window
        return self.clock() - window if window is not None else None

    async def get_community_stats(self) -> CommunityStats:
        """Totals over published items and all users."""
        with logfire.span("community_stats_service.get_community_stats"):
            now = self.clock()
            totals = await self.item_repository.totals()
            total_users = await self.user_repository.count()
            weekly_items = await self.item_repository.count(
                created_after=now - timedelta(days=7)
            )
            monthly_items = await self.item_repository.count(
                created_after=now - timedelta(days=30)
            )
            top_types = await self.item_repository.count_by_type()

            return CommunityStats(
                total_items=totals.item_count,
                total_votes=totals.upvotes,
                total_views=totals.views,
                total_copies=totals.copies,
                total_users=total_users,
                weekly_items=weekly_items,
                monthly_items=monthly_items,
                top_types=top_types[:TOP_TYPES_LIMIT],
            )

    async def get_engagement_stats(self) -> EngagementStats:
        """Per-item averages and conversion ratios.

        Averages are rounded to two decimals, ratios to four. A zero
        denominator yields 0.0.
        """
        with logfire.span("community_stats_service.get_engagement_stats"):
            totals = await self.item_repository.totals()

            most_upvoted = None
            top_item = await self.item_repository.find_most_upvoted()
            if top_item is not None:
                most_upvoted = MostUpvotedItem(
                    slug=str(top_item.slug),
                    title=top_item.title,
                    upvote_count=top_item.upvote_count,
                )

            return EngagementStats(
                total_votes=totals.upvotes,
                total_copies=totals.copies,
                avg_votes_per_item=_ratio(totals.upvotes, totals.item_count, 2),
                avg_views_per_item=_ratio(totals.views, totals.item_count, 2),
                avg_copies_per_item=_ratio(totals.copies, totals.item_count, 2),
                copy_to_view_ratio=_ratio(totals.copies, totals.views, 4),
                vote_to_view_ratio=_ratio(totals.upvotes, totals.views, 4),
                most_upvoted=most_upvoted,
            )

    async def get_user_activity(self, timeframe: Timeframe) -> UserActivity:
        """Member sign-ups within a timeframe.

        Every member counts as active; returning members are those who
        joined before the window.
        """
        since = self._since(timeframe)
        total_users = await self.user_repository.count()
        new_users = await self.user_repository.count(created_after=since)

        return UserActivity(
            timeframe=timeframe,
            new_users=new_users,
            active_users=total_users,
            returning_users=max(total_users - new_users, 0),
        )

    async def get_item_activity(self, timeframe: Timeframe) -> ItemActivity:
        """Item creation within a timeframe, published and drafts alike."""
        since = self._since(timeframe)
        total_created = await self.item_repository.count(
            published=None, created_after=since
        )
        published = await self.item_repository.count(
            published=True, created_after=since
        )
        by_type = await self.item_repository.count_by_type(
            published=None, created_after=since
        )

        return ItemActivity(
            timeframe=timeframe,
            total_created=total_created,
            published=published,
            drafts=total_created - published,
            by_type={entry.name: entry.count for entry in by_type},
        )
