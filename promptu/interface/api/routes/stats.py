"""Community statistics routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from promptu.application.usecase.stats import (
    GetActivityRequest,
    GetActivityResponse,
    GetActivityUseCase,
    GetCommunityStatsRequest,
    GetCommunityStatsUseCase,
)
from promptu.domain.error import DomainError
from promptu.domain.model import CommunityStats, EngagementStats
from promptu.domain.value import Timeframe
from promptu.interface.api.error import http_error, internal_error

router = APIRouter(prefix="/stats", tags=["stats"], route_class=DishkaRoute)


class CommunityStatsData(CommunityStats):
    """Community totals, with engagement ratios when requested."""

    engagement: EngagementStats | None = None


class CommunityStatsAPIResponse(BaseModel):
    """API response for community stats."""

    success: bool = True
    data: CommunityStatsData


class ActivityAPIResponse(BaseModel):
    """API response for activity stats."""

    success: bool = True
    data: GetActivityResponse


@router.get("/community", response_model=CommunityStatsAPIResponse)
async def get_community_stats(
    get_community_stats_use_case: FromDishka[GetCommunityStatsUseCase],
    detailed: bool = Query(default=False),
) -> CommunityStatsAPIResponse:
    """Platform-wide totals.

    Args:
        get_community_stats_use_case: Get community stats use case from DI
        detailed: Include engagement ratios

    Returns:
        Community stats
    """
    try:
        result = await get_community_stats_use_case.execute(
            GetCommunityStatsRequest(detailed=detailed)
        )
    except Exception:
        logfire.exception("Unexpected error computing community stats")
        raise internal_error("Failed to fetch community stats")

    return CommunityStatsAPIResponse(
        data=CommunityStatsData(
            **result.stats.model_dump(), engagement=result.engagement
        )
    )


@router.get("/activity", response_model=ActivityAPIResponse)
async def get_activity(
    get_activity_use_case: FromDishka[GetActivityUseCase],
    timeframe: str = Query(default=Timeframe.WEEKLY.value),
) -> ActivityAPIResponse:
    """Member and item activity within a timeframe.

    Raises:
        HTTPException: If the timeframe is unknown
    """
    try:
        result = await get_activity_use_case.execute(
            GetActivityRequest(timeframe=timeframe)
        )
        return ActivityAPIResponse(data=result)
    except DomainError as e:
        raise http_error(e)
    except Exception:
        logfire.exception("Unexpected error computing activity", timeframe=timeframe)
        raise internal_error("Failed to fetch activity")
