"""Content item domain service."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import ValidationError

from promptu.domain.error import ItemNotFoundError
from promptu.domain.model.item import ContentItem
from promptu.domain.repository import ItemRepository
from promptu.domain.value import ItemId, Slug

from .base import Service


class ItemService(Service):
    """Domain service for item lookup and the view/copy counters."""

    def __init__(self, item_repository: ItemRepository) -> None:
        """Initialize item service.

        Args:
            item_repository: Item repository
        """
        self.item_repository = item_repository

    async def find_item(self, item_ref: str) -> Optional[ContentItem]:
        """Find an item by UUID or slug.

        Args:
            item_ref: Item UUID string or slug

        Returns:
            Item if found, None otherwise
        """
        try:
            item_id = ItemId(UUID(item_ref))
        except ValueError:
            pass
        else:
            return await self.item_repository.find_by_id(item_id)

        try:
            slug = Slug(item_ref)
        except ValidationError:
            # Not a well-formed slug, so no item can carry it
            return None
        return await self.item_repository.find_by_slug(slug)

    async def get_published_item(self, item_ref: str) -> ContentItem:
        """Get a published item by UUID or slug.

        Args:
            item_ref: Item UUID string or slug

        Returns:
            The item

        Raises:
            ItemNotFoundError: If the item is absent or unpublished
        """
        item = await self.find_item(item_ref)
        if item is None or not item.published:
            logfire.warn("Item not found", item=item_ref)
            raise ItemNotFoundError(item_ref)
        return item

    async def record_view(self, item_ref: str) -> int:
        """Count one view of an item.

        Returns:
            View count after the increment
        """
        with logfire.span("item_service.record_view", item=item_ref):
            item = await self.get_published_item(item_ref)
            view_count = await self.item_repository.increment_view_count(item.id)
            logfire.info("View recorded", item_id=str(item.id), view_count=view_count)
            return view_count

    async def record_copy(self, item_ref: str) -> int:
        """Count one copy of an item's content.

        Returns:
            Copy count after the increment
        """
        with logfire.span("item_service.record_copy", item=item_ref):
            item = await self.get_published_item(item_ref)
            copy_count = await self.item_repository.increment_copy_count(item.id)
            logfire.info("Copy recorded", item_id=str(item.id), copy_count=copy_count)
            return copy_count
