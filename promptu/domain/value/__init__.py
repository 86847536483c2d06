"""Domain value objects for Promptu."""

from promptu.domain.value.identifiers import (
    CategoryId,
    ItemId,
    UserId,
    VoteId,
)
from promptu.domain.value.types import (
    ContentType,
    Slug,
    Timeframe,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ItemId",
    "VoteId",
    "CategoryId",
    # Types
    "ContentType",
    "Slug",
    "Timeframe",
    "VoteType",
]
