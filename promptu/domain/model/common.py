"""Base model for domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable, validated domain object."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def evolve(self, **changes: Any) -> Self:
        """Copy with ``changes`` applied, re-running field validation."""
        return self.model_validate({**dict(self), **changes})
