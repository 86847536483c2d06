"""Stats use cases."""

from .get_activity import GetActivityRequest, GetActivityResponse, GetActivityUseCase
from .get_community_stats import (
    GetCommunityStatsRequest,
    GetCommunityStatsResponse,
    GetCommunityStatsUseCase,
)

__all__ = [
    "GetActivityRequest",
    "GetActivityResponse",
    "GetActivityUseCase",
    "GetCommunityStatsRequest",
    "GetCommunityStatsResponse",
    "GetCommunityStatsUseCase",
]
