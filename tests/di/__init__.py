"""Mock providers for testing."""

from .persistence import MockPersistenceProvider, SeededPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "SeededPersistenceProvider",
    "build_test_container",
]
