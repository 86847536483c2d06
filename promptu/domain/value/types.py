"""Domain value objects for Promptu.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import timedelta
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, RootModel, field_validator


class VoteType(str, Enum):
    """Kind of vote.

    Closed set so new kinds can be added without a schema change.
    Only upvotes are active.
    """

    UPVOTE = "upvote"


class ContentType(str, Enum):
    """Category of a content item."""

    SYSTEM = "system"
    USER = "user"
    DEVELOPER = "developer"

    @classmethod
    def parse(cls, value: str) -> Optional["ContentType"]:
        """Return the matching member, or None for an unknown value."""
        try:
            return cls(value)
        except ValueError:
            return None


class Timeframe(str, Enum):
    """Window used by trending and activity queries."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ALL_TIME = "all-time"

    @classmethod
    def parse(cls, value: str) -> Optional["Timeframe"]:
        """Return the matching member, or None for an unknown value."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def window(self) -> Optional[timedelta]:
        """Length of the window, None for all-time."""
        return _WINDOWS[self]


_WINDOWS: dict[Timeframe, Optional[timedelta]] = {
    Timeframe.DAILY: timedelta(hours=24),
    Timeframe.WEEKLY: timedelta(days=7),
    Timeframe.MONTHLY: timedelta(days=30),
    Timeframe.ALL_TIME: None,
}


class Slug(RootModel[str]):
    """URL-safe slug for content items.

    Lowercase alphanumeric with single hyphens, 1-100 characters.
    Examples: 'senior-python-reviewer', 'sql-explainer-v2'
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v
