"""Item engagement routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from promptu.application.usecase.item import (
    EngagementKind,
    RecordEngagementRequest,
    RecordEngagementResponse,
    RecordEngagementUseCase,
)
from promptu.domain.error import DomainError
from promptu.interface.api.error import http_error, internal_error

router = APIRouter(prefix="/items", tags=["items"], route_class=DishkaRoute)


async def _record(
    use_case: RecordEngagementUseCase, slug: str, kind: EngagementKind
) -> RecordEngagementResponse:
    try:
        return await use_case.execute(RecordEngagementRequest(item=slug, kind=kind))
    except DomainError as e:
        raise http_error(e)
    except Exception:
        logfire.exception("Unexpected error recording engagement", item=slug, kind=kind)
        raise internal_error(f"Failed to record {kind.value}")


@router.post("/{slug}/view", response_model=RecordEngagementResponse)
async def record_view(
    slug: str, record_engagement_use_case: FromDishka[RecordEngagementUseCase]
) -> RecordEngagementResponse:
    """Count a view of an item. Anonymous callers are counted too."""
    return await _record(record_engagement_use_case, slug, EngagementKind.VIEW)


@router.post("/{slug}/copy", response_model=RecordEngagementResponse)
async def record_copy(
    slug: str, record_engagement_use_case: FromDishka[RecordEngagementUseCase]
) -> RecordEngagementResponse:
    """Count a copy of an item's content."""
    return await _record(record_engagement_use_case, slug, EngagementKind.COPY)
