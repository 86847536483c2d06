"""Trending results.

Produced fresh for every query and never persisted.
"""

from datetime import datetime
from typing import Optional

from promptu.domain.model.common import DomainModel
from promptu.domain.value import CategoryId, ContentType, ItemId, Timeframe


class TrendingEntry(DomainModel):
    """One ranked item in a trending listing."""

    item_id: ItemId
    slug: str
    title: str
    score: float
    rank: int
    timeframe: Timeframe
    upvote_count: int
    view_count: int
    copy_count: int
    content_type: ContentType
    category_id: Optional[CategoryId] = None
    created_at: datetime
