"""Content item entity.

Content items (prompts) are owned by the content management collaborator.
This core reads them for existence, authorship and ranking signals, and
adjusts their engagement counters.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from promptu.domain.model.common import DomainModel
from promptu.domain.value import CategoryId, ContentType, ItemId, Slug, UserId


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ContentItem(DomainModel):
    """A published (or draft) piece of community content.

    ``upvote_count`` is a denormalized copy of the number of votes held in
    the vote ledger. Only the voting service adjusts it.
    """

    id: ItemId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    content_type: ContentType
    category_id: Optional[CategoryId] = None
    author_id: UserId
    upvote_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    copy_count: int = Field(default=0, ge=0)
    published: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
