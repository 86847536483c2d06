"""Get activity use case."""

from pydantic import BaseModel

from promptu.domain.error import InvalidArgumentError
from promptu.domain.model import ItemActivity, UserActivity
from promptu.domain.service import CommunityStatsService
from promptu.domain.value import Timeframe

from ..base import BaseUseCase


class GetActivityRequest(BaseModel):
    """Get activity request."""

    timeframe: str = Timeframe.WEEKLY.value


class GetActivityResponse(BaseModel):
    """Get activity response."""

    users: UserActivity
    items: ItemActivity


class GetActivityUseCase(BaseUseCase[GetActivityRequest, GetActivityResponse]):
    """Use case for member and item activity within a timeframe."""

    def __init__(self, community_stats_service: CommunityStatsService) -> None:
        self.community_stats_service = community_stats_service

    async def execute(self, request: GetActivityRequest) -> GetActivityResponse:
        """Execute get activity flow.

        Raises:
            InvalidArgumentError: If the timeframe is unknown
        """
        timeframe = Timeframe.parse(request.timeframe)
        if timeframe is None:
            raise InvalidArgumentError(f"Unknown timeframe: {request.timeframe}")

        return GetActivityResponse(
            users=await self.community_stats_service.get_user_activity(timeframe),
            items=await self.community_stats_service.get_item_activity(timeframe),
        )
