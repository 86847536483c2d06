"""Content item repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from promptu.domain.model.item import ContentItem
from promptu.domain.model.stats import ItemTotals, TypeCount
from promptu.domain.value import CategoryId, ContentType, ItemId, Slug


class ItemRepository(ABC):
    """Repository for content items.

    Counter updates are relative adjustments executed by the storage engine
    (``col = col + n``), never a read-modify-write in application code.
    """

    @abstractmethod
    async def find_by_id(self, item_id: ItemId) -> Optional[ContentItem]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, item_id: ItemId) -> Optional[ContentItem]:
        """Find an item by ID and lock it until the transaction ends.

        Counter updates on the same item wait for the lock, so reads made
        after this call see every vote committed before it.
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[ContentItem]:
        """Find an item by slug.

        Args:
            slug: The item's slug

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_published(
        self,
        created_after: Optional[datetime] = None,
        content_type: Optional[ContentType] = None,
        category_id: Optional[CategoryId] = None,
    ) -> List[ContentItem]:
        """Find published items matching the filters.

        Args:
            created_after: Only items created at or after this instant
            content_type: Only items of this type
            category_id: Only items in this category

        Returns:
            Matching published items, unordered
        """
        pass

    @abstractmethod
    async def save(self, item: ContentItem) -> ContentItem:
        """Save an item (create or update).

        Used by seed tooling and tests; counters are adjusted through the
        dedicated methods below.
        """
        pass

    @abstractmethod
    async def adjust_upvote_count(self, item_id: ItemId, delta: int) -> int:
        """Atomically add ``delta`` to the upvote counter (floor 0).

        Args:
            item_id: The item ID
            delta: +1 or -1

        Returns:
            The counter value after the update
        """
        pass

    @abstractmethod
    async def set_upvote_count(self, item_id: ItemId, count: int) -> None:
        """Overwrite the upvote counter.

        Only used to reconcile the counter with the ledger.
        """
        pass

    @abstractmethod
    async def increment_view_count(self, item_id: ItemId) -> int:
        """Atomically increment the view counter by 1.

        Returns:
            The counter value after the update
        """
        pass

    @abstractmethod
    async def increment_copy_count(self, item_id: ItemId) -> int:
        """Atomically increment the copy counter by 1.

        Returns:
            The counter value after the update
        """
        pass

    @abstractmethod
    async def totals(self) -> ItemTotals:
        """Sum item count, upvotes, views and copies over published items."""
        pass

    @abstractmethod
    async def count(
        self,
        published: Optional[bool] = True,
        created_after: Optional[datetime] = None,
    ) -> int:
        """Count items.

        Args:
            published: True/False to filter on the flag, None for all items
            created_after: Only items created at or after this instant

        Returns:
            Number of matching items
        """
        pass

    @abstractmethod
    async def count_by_type(
        self,
        published: Optional[bool] = True,
        created_after: Optional[datetime] = None,
    ) -> List[TypeCount]:
        """Count items grouped by content type, largest group first."""
        pass

    @abstractmethod
    async def find_most_upvoted(self) -> Optional[ContentItem]:
        """Find the published item with the highest upvote count."""
        pass

    @abstractmethod
    async def list_ids(self) -> List[ItemId]:
        """List the IDs of every item (used by counter reconciliation)."""
        pass
