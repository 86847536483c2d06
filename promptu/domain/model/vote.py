"""Vote entity.

A vote is one user's endorsement of one content item. At most one vote
exists per (item, user) pair; toggling off deletes the row.
"""

from datetime import datetime

from pydantic import Field

from promptu.domain.model.common import DomainModel
from promptu.domain.model.item import utcnow
from promptu.domain.value import ItemId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Never updated in place, only created or deleted
    - Authors cannot vote on their own items
    """

    id: VoteId
    item_id: ItemId
    user_id: UserId
    vote_type: VoteType = VoteType.UPVOTE
    created_at: datetime = Field(default_factory=utcnow)


class VoteState(DomainModel):
    """A user's vote state on an item together with the item's count."""

    voted: bool
    upvote_count: int = Field(ge=0)
    message: str = ""


class VoteCounts(DomainModel):
    """Public vote counts for an item.

    There is no downvote, so the net score equals the upvote count.
    """

    upvote_count: int = Field(ge=0)

    @property
    def net_score(self) -> int:
        return self.upvote_count
