"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import logfire

from promptu.domain.model import ContentItem, User
from promptu.domain.value import CategoryId, ContentType, ItemId, Slug, UserId

# Keep spans local; instrumentation helpers require a configured Logfire
logfire.configure(send_to_logfire=False, console=False)

# Fixed clock so decay-dependent assertions are exact
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def make_user(username: str = "member", created_at: Optional[datetime] = None) -> User:
    """Build a user with a random ID."""
    return User(
        id=UserId(uuid4()),
        username=f"{username}-{uuid4().hex[:6]}",
        created_at=created_at or NOW,
    )


def make_item(
    slug: str,
    author_id: Optional[UserId] = None,
    content_type: ContentType = ContentType.USER,
    category_id: Optional[CategoryId] = None,
    upvotes: int = 0,
    views: int = 0,
    copies: int = 0,
    age: timedelta = timedelta(0),
    published: bool = True,
) -> ContentItem:
    """Build a content item created ``age`` before ``NOW``."""
    return ContentItem(
        id=ItemId(uuid4()),
        slug=Slug(slug),
        title=slug.replace("-", " ").title(),
        content_type=content_type,
        category_id=category_id,
        author_id=author_id or UserId(uuid4()),
        upvote_count=upvotes,
        view_count=views,
        copy_count=copies,
        published=published,
        created_at=NOW - age,
        updated_at=NOW - age,
    )
