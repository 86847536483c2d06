"""Item use cases."""

from .record_engagement import (
    EngagementKind,
    RecordEngagementRequest,
    RecordEngagementResponse,
    RecordEngagementUseCase,
)

__all__ = [
    "EngagementKind",
    "RecordEngagementRequest",
    "RecordEngagementResponse",
    "RecordEngagementUseCase",
]
