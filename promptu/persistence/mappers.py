"""Mappers for converting between database rows and domain models.

The domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from promptu.domain.model import ContentItem, User, Vote
from promptu.domain.value import (
    CategoryId,
    ContentType,
    ItemId,
    Slug,
    UserId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_item(row: Dict[str, Any]) -> ContentItem:
    """Convert database row to ContentItem domain model.

    Args:
        row: Database row as dict

    Returns:
        ContentItem domain model
    """
    category_id = _optional_uuid(row.get("category_id"))
    return ContentItem(
        id=ItemId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        content_type=ContentType(row["content_type"]),
        category_id=CategoryId(category_id) if category_id else None,
        author_id=UserId(_uuid(row["author_id"])),
        upvote_count=row["upvote_count"],
        view_count=row["view_count"],
        copy_count=row["copy_count"],
        published=row["published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def item_to_dict(item: ContentItem) -> Dict[str, Any]:
    """Convert ContentItem domain model to database dict.

    Args:
        item: ContentItem domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = item.model_dump()
    data["slug"] = str(item.slug)
    data["content_type"] = item.content_type.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        item_id=ItemId(_uuid(row["item_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data
