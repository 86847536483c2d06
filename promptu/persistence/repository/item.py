"""PostgreSQL implementation of Item repository."""

from datetime import datetime
from typing import Any, List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from promptu.domain.error import ItemNotFoundError
from promptu.domain.model import ContentItem, ItemTotals, TypeCount
from promptu.domain.repository.item import ItemRepository
from promptu.domain.value import CategoryId, ContentType, ItemId, Slug
from promptu.persistence.mappers import item_to_dict, row_to_item
from promptu.persistence.tables import items_table


def _filters(
    published: Optional[bool], created_after: Optional[datetime]
) -> List[Any]:
    conditions: List[Any] = []
    if published is not None:
        conditions.append(items_table.c.published.is_(published))
    if created_after is not None:
        conditions.append(items_table.c.created_at >= created_after)
    return conditions


class PostgresItemRepository(ItemRepository):
    """PostgreSQL implementation of ItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, item_id: ItemId) -> Optional[ContentItem]:
        """Find an item by ID."""
        stmt = select(items_table).where(items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_item(row._asdict()) if row else None

    async def find_by_id_for_update(self, item_id: ItemId) -> Optional[ContentItem]:
        """Find an item by ID with a row lock (SELECT ... FOR UPDATE)."""
        stmt = (
            select(items_table).where(items_table.c.id == item_id).with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_item(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[ContentItem]:
        """Find an item by slug."""
        stmt = select(items_table).where(items_table.c.slug == str(slug))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_item(row._asdict()) if row else None

    async def find_published(
        self,
        created_after: Optional[datetime] = None,
        content_type: Optional[ContentType] = None,
        category_id: Optional[CategoryId] = None,
    ) -> List[ContentItem]:
        """Find published items matching the filters."""
        with logfire.span(
            "item_repository.find_published",
            created_after=created_after.isoformat() if created_after else None,
            content_type=content_type.value if content_type else None,
            category_id=str(category_id) if category_id else None,
        ):
            stmt = select(items_table).where(*_filters(True, created_after))
            if content_type is not None:
                stmt = stmt.where(items_table.c.content_type == content_type.value)
            if category_id is not None:
                stmt = stmt.where(items_table.c.category_id == category_id)

            result = await self.session.execute(stmt)
            return [row_to_item(row._asdict()) for row in result.fetchall()]

    async def save(self, item: ContentItem) -> ContentItem:
        """Insert the item or overwrite the row with the same ID."""
        values = item_to_dict(item)
        stmt = insert(items_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[items_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        return item

    async def adjust_upvote_count(self, item_id: ItemId, delta: int) -> int:
        """Atomically add ``delta`` to the upvote counter (floor 0)."""
        stmt = (
            items_table.update()
            .where(items_table.c.id == item_id)
            .values(
                upvote_count=func.greatest(items_table.c.upvote_count + delta, 0),
                updated_at=func.now(),
            )
            .returning(items_table.c.upvote_count)
        )
        result = await self.session.execute(stmt)
        upvote_count = result.scalar_one_or_none()
        if upvote_count is None:
            raise ItemNotFoundError(str(item_id))
        return upvote_count

    async def set_upvote_count(self, item_id: ItemId, count: int) -> None:
        """Overwrite the upvote counter."""
        stmt = (
            items_table.update()
            .where(items_table.c.id == item_id)
            .values(upvote_count=count, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_view_count(self, item_id: ItemId) -> int:
        """Atomically increment the view counter by 1."""
        stmt = (
            items_table.update()
            .where(items_table.c.id == item_id)
            .values(view_count=items_table.c.view_count + 1)
            .returning(items_table.c.view_count)
        )
        result = await self.session.execute(stmt)
        view_count = result.scalar_one_or_none()
        if view_count is None:
            raise ItemNotFoundError(str(item_id))
        return view_count

    async def increment_copy_count(self, item_id: ItemId) -> int:
        """Atomically increment the copy counter by 1."""
        stmt = (
            items_table.update()
            .where(items_table.c.id == item_id)
            .values(copy_count=items_table.c.copy_count + 1)
            .returning(items_table.c.copy_count)
        )
        result = await self.session.execute(stmt)
        copy_count = result.scalar_one_or_none()
        if copy_count is None:
            raise ItemNotFoundError(str(item_id))
        return copy_count

    async def totals(self) -> ItemTotals:
        """Sum item count, upvotes, views and copies over published items."""
        stmt = select(
            func.count().label("item_count"),
            func.coalesce(func.sum(items_table.c.upvote_count), 0).label("upvotes"),
            func.coalesce(func.sum(items_table.c.view_count), 0).label("views"),
            func.coalesce(func.sum(items_table.c.copy_count), 0).label("copies"),
        ).where(items_table.c.published.is_(True))
        result = await self.session.execute(stmt)
        row = result.one()
        return ItemTotals(
            item_count=row.item_count,
            upvotes=int(row.upvotes),
            views=int(row.views),
            copies=int(row.copies),
        )

    async def count(
        self,
        published: Optional[bool] = True,
        created_after: Optional[datetime] = None,
    ) -> int:
        """Count items."""
        stmt = (
            select(func.count())
            .select_from(items_table)
            .where(*_filters(published, created_after))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_type(
        self,
        published: Optional[bool] = True,
        created_after: Optional[datetime] = None,
    ) -> List[TypeCount]:
        """Count items grouped by content type, largest group first."""
        count = func.count().label("count")
        stmt = (
            select(items_table.c.content_type, count)
            .where(*_filters(published, created_after))
            .group_by(items_table.c.content_type)
            .order_by(desc(count), items_table.c.content_type)
        )
        result = await self.session.execute(stmt)
        return [
            TypeCount(name=row.content_type, count=row.count)
            for row in result.fetchall()
        ]

    async def find_most_upvoted(self) -> Optional[ContentItem]:
        """Find the published item with the highest upvote count."""
        stmt = (
            select(items_table)
            .where(items_table.c.published.is_(True))
            .order_by(desc(items_table.c.upvote_count), desc(items_table.c.created_at))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_item(row._asdict()) if row else None

    async def list_ids(self) -> List[ItemId]:
        """List the IDs of every item."""
        result = await self.session.execute(select(items_table.c.id))
        return [ItemId(row.id) for row in result.fetchall()]
