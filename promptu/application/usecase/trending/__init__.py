"""Trending use cases."""

from .get_hot_items import GetHotItemsRequest, GetHotItemsResponse, GetHotItemsUseCase
from .get_trending import (
    GetTrendingRequest,
    GetTrendingResponse,
    GetTrendingUseCase,
    TrendingItem,
    TrendingMeta,
)

__all__ = [
    "GetHotItemsRequest",
    "GetHotItemsResponse",
    "GetHotItemsUseCase",
    "GetTrendingRequest",
    "GetTrendingResponse",
    "GetTrendingUseCase",
    "TrendingItem",
    "TrendingMeta",
]
