"""Mock providers for testing."""

from .persistence import FailingCommitProvider, MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FailingCommitProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
