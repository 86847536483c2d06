"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from promptu.application.usecase.vote import (
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from promptu.domain.error import DomainError
from promptu.domain.service import JWTService
from promptu.domain.value import VoteType
from promptu.interface.api.error import http_error, internal_error, unauthorized

router = APIRouter(prefix="/items", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    type: str = Field(default=VoteType.UPVOTE.value)


@router.get("/{slug}/vote", response_model=GetVoteStatusResponse)
async def get_vote_status(
    slug: str,
    get_vote_status_use_case: FromDishka[GetVoteStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteStatusResponse:
    """Get the item's vote count and whether the caller has voted.

    Anonymous callers get ``voted=false``.

    Args:
        slug: Item slug (or UUID)
        get_vote_status_use_case: Get vote status use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote state and counts

    Raises:
        HTTPException: If the item is not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_vote_status_use_case.execute(
            GetVoteStatusRequest(item=slug, user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e)
    except Exception:
        logfire.exception("Unexpected error reading vote status", item=slug)
        raise internal_error("Failed to read vote status")


@router.post("/{slug}/vote", response_model=ToggleVoteResponse)
async def toggle_vote(
    slug: str,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    request: VoteAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ToggleVoteResponse:
    """Toggle the caller's upvote on an item.

    Requires authentication.

    Args:
        slug: Item slug (or UUID)
        toggle_vote_use_case: Toggle vote use case from DI
        jwt_service: JWT service for token verification (injected)
        request: Optional vote body (only ``upvote`` is accepted)
        auth_token: JWT token from cookie

    Returns:
        Vote state after the toggle

    Raises:
        HTTPException: If not authenticated, the item is not found, the
            caller is the author or the vote type is unsupported
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise unauthorized("Authentication required to vote")

    body = request or VoteAPIRequest()
    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(item=slug, user_id=user_id, vote_type=body.type)
        )
    except DomainError as e:
        logfire.warn("Vote rejected", item=slug, user_id=user_id, code=e.code)
        raise http_error(e)
    except Exception:
        logfire.exception("Unexpected error toggling vote", item=slug)
        raise internal_error("Failed to toggle vote")
