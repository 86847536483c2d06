"""Repository interfaces for Promptu domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from promptu.domain.repository.item import ItemRepository
from promptu.domain.repository.unit_of_work import UnitOfWork
from promptu.domain.repository.user import UserRepository
from promptu.domain.repository.vote import VoteRepository

__all__ = [
    "ItemRepository",
    "UnitOfWork",
    "UserRepository",
    "VoteRepository",
]
