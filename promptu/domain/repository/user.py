"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from promptu.domain.model.user import User
from promptu.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def count(self, created_after: Optional[datetime] = None) -> int:
        """Count users, optionally only those created after an instant."""
        pass
