"""In-memory user repository for testing."""

from collections.abc import Collection
from typing import Optional

from idm.domain.model import User, UserActiveStatus
from idm.domain.repository.user import UserRepository
from idm.domain.value import UserId, normalize_handle, parse_user_id


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Like the PostgreSQL implementation, it stores handles as given and
    canonicalizes them at query time.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_many_by_ids(self, user_ids: Collection[UserId]) -> list[User]:
        """Find all users whose ID is in ``user_ids``."""
        return [
            self._users[user_id] for user_id in set(user_ids) if user_id in self._users
        ]

    async def find_many_by_normalized_handle(
        self, canonical_handles: Collection[str]
    ) -> list[User]:
        """Find all users whose canonical handle is in ``canonical_handles``."""
        wanted = set(canonical_handles)
        return [
            user for user in self._users.values() if user.handle.canonical in wanted
        ]

    async def find_by_id_or_normalized_handle(self, identifier: str) -> Optional[User]:
        """Find a user by ID, falling back to the canonical handle."""
        user_id = parse_user_id(identifier)
        if user_id is not None and user_id in self._users:
            return self._users[user_id]

        canonical = normalize_handle(identifier)
        for user in self._users.values():
            if user.handle.canonical == canonical:
                return user
        return None

    async def list_all(self) -> list[User]:
        """Return every user."""
        return list(self._users.values())

    async def find_active_statuses(
        self, user_ids: Collection[UserId]
    ) -> list[UserActiveStatus]:
        """Return the ``{id, active}`` projection of the matching users."""
        return [
            UserActiveStatus(id=user.id, active=user.active)
            for user in await self.find_many_by_ids(user_ids)
        ]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
