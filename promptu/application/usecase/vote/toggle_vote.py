"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from promptu.domain.error import InvalidArgumentError
from promptu.domain.repository import UnitOfWork
from promptu.domain.service import VotingService
from promptu.domain.value import UserId, VoteType

from ..base import BaseUseCase


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    item: str  # Item slug or UUID string
    user_id: str  # User ID from authenticated user
    vote_type: str = VoteType.UPVOTE.value


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    voted: bool
    upvote_count: int
    net_score: int
    message: str


class ToggleVoteUseCase(BaseUseCase[ToggleVoteRequest, ToggleVoteResponse]):
    """Use case for toggling a user's upvote on an item."""

    def __init__(
        self, voting_service: VotingService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize toggle vote use case.

        Args:
            voting_service: Voting domain service
            unit_of_work: Commits the toggle before it is reported
        """
        self.voting_service = voting_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            InvalidArgumentError: If the vote type is not supported
            ItemNotFoundError: If the item is absent or unpublished
            SelfVoteForbiddenError: If the user authored the item
        """
        if request.vote_type != VoteType.UPVOTE.value:
            raise InvalidArgumentError(f"Unsupported vote type: {request.vote_type}")

        state = await self.voting_service.toggle_upvote(
            request.item, UserId(UUID(request.user_id))
        )
        await self.unit_of_work.commit()

        return ToggleVoteResponse(
            voted=state.voted,
            upvote_count=state.upvote_count,
            net_score=state.upvote_count,
            message=state.message,
        )
