"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from promptu.domain.model.user import User
from promptu.domain.repository.user import UserRepository
from promptu.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self.store.users[user.id] = user
        return user

    async def count(self, created_after: Optional[datetime] = None) -> int:
        """Count users, optionally only those created after an instant."""
        return sum(
            1
            for user in self.store.users.values()
            if created_after is None or user.created_at >= created_after
        )
