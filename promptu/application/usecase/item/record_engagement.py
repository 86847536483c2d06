"""Record engagement use case."""

from enum import Enum

from pydantic import BaseModel

from promptu.domain.repository import UnitOfWork
from promptu.domain.service import ItemService

from ..base import BaseUseCase


class EngagementKind(str, Enum):
    """Engagement signal recorded against an item."""

    VIEW = "view"
    COPY = "copy"


class RecordEngagementRequest(BaseModel):
    """Record engagement request."""

    item: str  # Item slug or UUID string
    kind: EngagementKind


class RecordEngagementResponse(BaseModel):
    """Record engagement response."""

    kind: EngagementKind
    count: int  # Counter value after the increment


class RecordEngagementUseCase(
    BaseUseCase[RecordEngagementRequest, RecordEngagementResponse]
):
    """Use case for counting a view or a copy of an item."""

    def __init__(self, item_service: ItemService, unit_of_work: UnitOfWork) -> None:
        """Initialize record engagement use case.

        Args:
            item_service: Item domain service
            unit_of_work: Commits the increment before it is reported
        """
        self.item_service = item_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: RecordEngagementRequest
    ) -> RecordEngagementResponse:
        """Execute record engagement flow.

        Raises:
            ItemNotFoundError: If the item is absent or unpublished
        """
        if request.kind == EngagementKind.VIEW:
            count = await self.item_service.record_view(request.item)
        else:  # EngagementKind.COPY
            count = await self.item_service.record_copy(request.item)
        await self.unit_of_work.commit()

        return RecordEngagementResponse(kind=request.kind, count=count)
