"""PostgreSQL repository implementations."""

from promptu.persistence.repository.item import PostgresItemRepository
from promptu.persistence.repository.user import PostgresUserRepository
from promptu.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresItemRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
