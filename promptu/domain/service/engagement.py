"""Engagement scoring for trending.

score = decay(age) * (upvote_weight * upvotes
                      + view_weight * views
                      + copy_weight * copies)
"""

from datetime import datetime, timedelta

from promptu.config import TrendingSettings
from promptu.domain.model.item import ContentItem
from promptu.domain.value import Timeframe


class EngagementScorer:
    """Combines an item's engagement counters into a time-decayed score."""

    def __init__(self, settings: TrendingSettings) -> None:
        self.settings = settings

    def weighted_sum(self, item: ContentItem) -> float:
        """Weighted engagement of an item, before decay."""
        return (
            self.settings.upvote_weight * item.upvote_count
            + self.settings.view_weight * item.view_count
            + self.settings.copy_weight * item.copy_count
        )

    def decay(self, age: timedelta, timeframe: Timeframe) -> float:
        """Decay factor in [0, 1] for an item of the given age.

        Halves every ``half_life_ratio * window``, reaches 0 at the window
        boundary and is 1 for non-positive ages. All-time never decays.

        Args:
            age: Time since the item was created
            timeframe: Ranking timeframe

        Returns:
            The decay factor
        """
        window = timeframe.window
        if window is None or age <= timedelta(0):
            return 1.0
        if age >= window:
            return 0.0

        half_life = window * self.settings.half_life_ratio
        return 0.5 ** (age / half_life)

    def score(self, item: ContentItem, timeframe: Timeframe, now: datetime) -> float:
        """Time-decayed trending score of an item at ``now``."""
        return self.decay(now - item.created_at, timeframe) * self.weighted_sum(item)
