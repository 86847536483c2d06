"""Get vote status use case."""

from uuid import UUID

from pydantic import BaseModel

from promptu.domain.service import VotingService
from promptu.domain.value import UserId

from ..base import BaseUseCase


class GetVoteStatusRequest(BaseModel):
    """Get vote status request."""

    item: str  # Item slug or UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetVoteStatusResponse(BaseModel):
    """Get vote status response."""

    voted: bool
    upvote_count: int
    net_score: int


class GetVoteStatusUseCase(
    BaseUseCase[GetVoteStatusRequest, GetVoteStatusResponse]
):
    """Use case for reading an item's vote state for the current caller."""

    def __init__(self, voting_service: VotingService) -> None:
        self.voting_service = voting_service

    async def execute(self, request: GetVoteStatusRequest) -> GetVoteStatusResponse:
        """Execute get vote status flow.

        Anonymous callers always see ``voted=False``.
        """
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        state = await self.voting_service.get_voting_status(request.item, user_id)
        counts = await self.voting_service.get_vote_counts(request.item)

        return GetVoteStatusResponse(
            voted=state.voted,
            upvote_count=counts.upvote_count,
            net_score=counts.net_score,
        )
