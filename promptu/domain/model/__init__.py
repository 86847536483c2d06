"""Domain model entities for Promptu."""

from promptu.domain.model.item import ContentItem
from promptu.domain.model.stats import (
    CommunityStats,
    EngagementStats,
    ItemActivity,
    ItemTotals,
    MostUpvotedItem,
    TypeCount,
    UserActivity,
)
from promptu.domain.model.trending import TrendingEntry
from promptu.domain.model.user import User
from promptu.domain.model.vote import Vote, VoteCounts, VoteState

__all__ = [
    "CommunityStats",
    "ContentItem",
    "EngagementStats",
    "ItemActivity",
    "ItemTotals",
    "MostUpvotedItem",
    "TrendingEntry",
    "TypeCount",
    "User",
    "UserActivity",
    "Vote",
    "VoteCounts",
    "VoteState",
]
