"""Invite code repository interface."""

from abc import ABC, abstractmethod

from idm.domain.model import InviteCode


class InviteCodeRepository(ABC):
    """Repository for InviteCode entity."""

    @abstractmethod
    async def find_by_code(self, code: str) -> InviteCode | None:
        """Find an invite code by its code string.

        Args:
            code: The invite code

        Returns:
            The invite code if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invite_code: InviteCode) -> InviteCode:
        """Save an invite code (create or update).

        Args:
            invite_code: The invite code to save

        Returns:
            The saved invite code
        """
        pass
