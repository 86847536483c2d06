"""Get community stats use case."""

import logfire
from pydantic import BaseModel

from promptu.domain.model import CommunityStats, EngagementStats
from promptu.domain.service import CommunityStatsService

from ..base import BaseUseCase


class GetCommunityStatsRequest(BaseModel):
    """Get community stats request."""

    detailed: bool = False  # Include engagement ratios


class GetCommunityStatsResponse(BaseModel):
    """Get community stats response."""

    stats: CommunityStats
    engagement: EngagementStats | None = None


class GetCommunityStatsUseCase(
    BaseUseCase[GetCommunityStatsRequest, GetCommunityStatsResponse]
):
    """Use case for platform-wide statistics."""

    def __init__(self, community_stats_service: CommunityStatsService) -> None:
        """Initialize get community stats use case.

        Args:
            community_stats_service: Community stats domain service
        """
        self.community_stats_service = community_stats_service

    async def execute(
        self, request: GetCommunityStatsRequest
    ) -> GetCommunityStatsResponse:
        """Execute get community stats flow."""
        with logfire.span("get_community_stats.execute", detailed=request.detailed):
            stats = await self.community_stats_service.get_community_stats()

            engagement = None
            if request.detailed:
                engagement = await self.community_stats_service.get_engagement_stats()

            return GetCommunityStatsResponse(stats=stats, engagement=engagement)
