"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Optional

from idm.domain.model import User, UserActiveStatus
from idm.domain.value import UserId


class UserRepository(ABC):
    """Read access to the user directory.

    Handle lookups take canonical handles and must canonicalize the
    stored side at query time: records written directly to the store
    may hold non-canonical handles.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many_by_ids(self, user_ids: Collection[UserId]) -> list[User]:
        """Find all users whose ID is in ``user_ids``.

        Unknown IDs are simply absent from the result.

        Args:
            user_ids: IDs to look up

        Returns:
            Matched users, in no particular order, each at most once
        """
        pass

    @abstractmethod
    async def find_many_by_normalized_handle(
        self, canonical_handles: Collection[str]
    ) -> list[User]:
        """Find all users whose canonical handle is in ``canonical_handles``.

        Args:
            canonical_handles: Handles already passed through normalize_handle

        Returns:
            Matched users, in no particular order, each at most once
        """
        pass

    @abstractmethod
    async def find_by_id_or_normalized_handle(self, identifier: str) -> Optional[User]:
        """Find the user whose ID or canonical handle matches ``identifier``.

        An ID match wins over a handle match. Non-UUID identifiers only
        go through the handle comparison.

        Args:
            identifier: Raw identifier (ID or handle, any casing)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user in the directory."""
        pass

    @abstractmethod
    async def find_active_statuses(
        self, user_ids: Collection[UserId]
    ) -> list[UserActiveStatus]:
        """Return the ``{id, active}`` projection of the matching users.

        Args:
            user_ids: IDs to look up

        Returns:
            One status per matched user
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        The handle is written exactly as given.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
