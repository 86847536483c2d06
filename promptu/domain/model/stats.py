"""Community statistics read models.

All of these are recomputed from the live counters on every request.
"""

from typing import Optional

from pydantic import Field

from promptu.domain.model.common import DomainModel
from promptu.domain.value import Timeframe


class ItemTotals(DomainModel):
    """Raw sums over a set of content items."""

    item_count: int = 0
    upvotes: int = 0
    views: int = 0
    copies: int = 0


class TypeCount(DomainModel):
    """Number of items of one content type."""

    name: str
    count: int


class CommunityStats(DomainModel):
    """Platform-wide totals over published items and all users."""

    total_items: int
    total_votes: int
    total_views: int
    total_copies: int
    total_users: int
    weekly_items: int
    monthly_items: int
    top_types: list[TypeCount] = Field(default_factory=list)


class MostUpvotedItem(DomainModel):
    """Headline item for the engagement panel."""

    slug: str
    title: str
    upvote_count: int


class EngagementStats(DomainModel):
    """Ratios derived from the engagement counters.

    Every ratio with a zero denominator is 0.0.
    """

    total_votes: int
    total_copies: int
    avg_votes_per_item: float
    avg_views_per_item: float
    avg_copies_per_item: float
    copy_to_view_ratio: float
    vote_to_view_ratio: float
    most_upvoted: Optional[MostUpvotedItem] = None


class UserActivity(DomainModel):
    """Member sign-ups within a timeframe."""

    timeframe: Timeframe
    new_users: int
    active_users: int
    returning_users: int


class ItemActivity(DomainModel):
    """Item creation within a timeframe."""

    timeframe: Timeframe
    total_created: int
    published: int
    drafts: int
    by_type: dict[str, int] = Field(default_factory=dict)
