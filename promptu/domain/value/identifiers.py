"""Strongly typed identifiers for Promptu domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ItemId = NewType("ItemId", UUID)
VoteId = NewType("VoteId", UUID)
CategoryId = NewType("CategoryId", UUID)
