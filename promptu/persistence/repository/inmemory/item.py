"""In-memory item repository for testing."""

from collections import Counter
from datetime import datetime
from typing import List, Optional

from promptu.domain.error import ItemNotFoundError
from promptu.domain.model.item import ContentItem, utcnow
from promptu.domain.model.stats import ItemTotals, TypeCount
from promptu.domain.repository.item import ItemRepository
from promptu.domain.value import CategoryId, ContentType, ItemId, Slug

from .store import InMemoryStore


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of ItemRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _matching(
        self, published: Optional[bool], created_after: Optional[datetime]
    ) -> List[ContentItem]:
        items = list(self.store.items.values())
        if published is not None:
            items = [i for i in items if i.published is published]
        if created_after is not None:
            items = [i for i in items if i.created_at >= created_after]
        return items

    def _get(self, item_id: ItemId) -> ContentItem:
        item = self.store.items.get(item_id)
        if item is None:
            raise ItemNotFoundError(str(item_id))
        return item

    async def find_by_id(self, item_id: ItemId) -> Optional[ContentItem]:
        """Find an item by ID."""
        return self.store.items.get(item_id)

    async def find_by_id_for_update(self, item_id: ItemId) -> Optional[ContentItem]:
        """Find an item by ID; callers already hold the store lock."""
        return self.store.items.get(item_id)

    async def find_by_slug(self, slug: Slug) -> Optional[ContentItem]:
        """Find an item by slug."""
        for item in self.store.items.values():
            if item.slug == slug:
                return item
        return None

    async def find_published(
        self,
        created_after: Optional[datetime] = None,
        content_type: Optional[ContentType] = None,
        category_id: Optional[CategoryId] = None,
    ) -> List[ContentItem]:
        """Find published items matching the filters."""
        items = self._matching(True, created_after)
        if content_type is not None:
            items = [i for i in items if i.content_type == content_type]
        if category_id is not None:
            items = [i for i in items if i.category_id == category_id]
        return items

    async def save(self, item: ContentItem) -> ContentItem:
        """Save or update an item."""
        self.store.items[item.id] = item
        return item

    async def adjust_upvote_count(self, item_id: ItemId, delta: int) -> int:
        """Add ``delta`` to the upvote counter (floor 0)."""
        item = self._get(item_id)
        upvote_count = max(item.upvote_count + delta, 0)
        self.store.items[item_id] = item.evolve(
            upvote_count=upvote_count, updated_at=utcnow()
        )
        return upvote_count

    async def set_upvote_count(self, item_id: ItemId, count: int) -> None:
        """Overwrite the upvote counter."""
        item = self._get(item_id)
        self.store.items[item_id] = item.evolve(upvote_count=count, updated_at=utcnow())

    async def increment_view_count(self, item_id: ItemId) -> int:
        """Increment the view counter by 1."""
        item = self._get(item_id)
        item = item.evolve(view_count=item.view_count + 1)
        self.store.items[item_id] = item
        return item.view_count

    async def increment_copy_count(self, item_id: ItemId) -> int:
        """Increment the copy counter by 1."""
        item = self._get(item_id)
        item = item.evolve(copy_count=item.copy_count + 1)
        self.store.items[item_id] = item
        return item.copy_count

    async def totals(self) -> ItemTotals:
        """Sum item count, upvotes, views and copies over published items."""
        items = self._matching(True, None)
        return ItemTotals(
            item_count=len(items),
            upvotes=sum(i.upvote_count for i in items),
            views=sum(i.view_count for i in items),
            copies=sum(i.copy_count for i in items),
        )

    async def count(
        self,
        published: Optional[bool] = True,
        created_after: Optional[datetime] = None,
    ) -> int:
        """Count items."""
        return len(self._matching(published, created_after))

    async def count_by_type(
        self,
        published: Optional[bool] = True,
        created_after: Optional[datetime] = None,
    ) -> List[TypeCount]:
        """Count items grouped by content type, largest group first."""
        counts = Counter(
            i.content_type.value for i in self._matching(published, created_after)
        )
        ordered = sorted(counts.items(), key=lambda pair: (-pair[1], pair[0]))
        return [TypeCount(name=name, count=count) for name, count in ordered]

    async def find_most_upvoted(self) -> Optional[ContentItem]:
        """Find the published item with the highest upvote count."""
        items = self._matching(True, None)
        if not items:
            return None
        return max(items, key=lambda i: (i.upvote_count, i.created_at))

    async def list_ids(self) -> List[ItemId]:
        """List the IDs of every item."""
        return list(self.store.items)
