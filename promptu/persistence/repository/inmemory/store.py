"""Shared in-memory storage for the in-memory repositories."""

import asyncio
from dataclasses import dataclass, field

from promptu.domain.model import ContentItem, User, Vote
from promptu.domain.value import ItemId, UserId


@dataclass
class InMemoryStore:
    """Tables shared by the in-memory repositories of one container.

    ``votes`` is keyed by (item_id, user_id), which makes the pair unique.
    """

    items: dict[ItemId, ContentItem] = field(default_factory=dict)
    votes: dict[tuple[ItemId, UserId], Vote] = field(default_factory=dict)
    users: dict[UserId, User] = field(default_factory=dict)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def snapshot(self) -> tuple[dict, dict, dict]:
        return dict(self.items), dict(self.votes), dict(self.users)

    def restore(self, snapshot: tuple[dict, dict, dict]) -> None:
        items, votes, users = snapshot
        self.items = items
        self.votes = votes
        self.users = users
