"""In-memory repository implementations for testing."""

from .invite_code import InMemoryInviteCodeRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInviteCodeRepository",
    "InMemoryUserRepository",
]
