"""User entity (read model).

Accounts are issued by the identity provider; the core only needs enough to
count members.
"""

from datetime import datetime

from pydantic import Field

from promptu.domain.model.common import DomainModel
from promptu.domain.model.item import utcnow
from promptu.domain.value import UserId


class User(DomainModel):
    """Registered community member."""

    id: UserId
    username: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)
