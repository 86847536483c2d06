"""Trending routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel

from promptu.application.usecase.trending import (
    GetHotItemsRequest,
    GetHotItemsUseCase,
    GetTrendingRequest,
    GetTrendingUseCase,
    TrendingItem,
    TrendingMeta,
)
from promptu.domain.error import DomainError
from promptu.domain.service import JWTService
from promptu.domain.value import Timeframe
from promptu.interface.api.error import http_error, internal_error

router = APIRouter(prefix="/trending", tags=["trending"], route_class=DishkaRoute)


class TrendingAPIResponse(BaseModel):
    """API response for trending listings."""

    success: bool = True
    data: list[TrendingItem]
    meta: TrendingMeta


class HotItemsAPIResponse(BaseModel):
    """API response for hot items."""

    success: bool = True
    data: list[TrendingItem]


@router.get("", response_model=TrendingAPIResponse)
async def get_trending(
    get_trending_use_case: FromDishka[GetTrendingUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None),
    timeframe: str = Query(default=Timeframe.WEEKLY.value),
    type: str | None = Query(default=None),
    category: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> TrendingAPIResponse:
    """List trending items.

    Args:
        get_trending_use_case: Get trending use case from DI
        jwt_service: JWT service (marks the viewer's own votes)
        limit: Maximum number of items (default from settings)
        timeframe: daily, weekly, monthly or all-time
        type: Optional content type filter
        category: Optional category ID filter
        auth_token: JWT token from cookie

    Returns:
        Ranked items and the effective query

    Raises:
        HTTPException: If limit or timeframe is invalid
    """
    try:
        result = await get_trending_use_case.execute(
            GetTrendingRequest(
                limit=limit,
                timeframe=timeframe,
                type=type,
                category=category,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
        return TrendingAPIResponse(data=result.items, meta=result.meta)
    except DomainError as e:
        raise http_error(e)
    except Exception:
        logfire.exception("Unexpected error ranking trending items")
        raise internal_error("Failed to fetch trending items")


@router.get("/hot", response_model=HotItemsAPIResponse)
async def get_hot_items(
    get_hot_items_use_case: FromDishka[GetHotItemsUseCase],
    limit: int | None = Query(default=None),
) -> HotItemsAPIResponse:
    """List recent items gaining upvotes fastest."""
    try:
        result = await get_hot_items_use_case.execute(GetHotItemsRequest(limit=limit))
        return HotItemsAPIResponse(data=result.items)
    except DomainError as e:
        raise http_error(e)
    except Exception:
        logfire.exception("Unexpected error ranking hot items")
        raise internal_error("Failed to fetch hot items")
