"""In-memory invite code repository for testing."""

from idm.domain.model import InviteCode
from idm.domain.repository.invite_code import InviteCodeRepository
from idm.domain.value import InviteCodeId


class InMemoryInviteCodeRepository(InviteCodeRepository):
    """In-memory implementation of InviteCodeRepository for testing."""

    def __init__(self) -> None:
        self._invite_codes: dict[InviteCodeId, InviteCode] = {}

    async def find_by_code(self, code: str) -> InviteCode | None:
        """Find an invite code by its code string."""
        for invite_code in self._invite_codes.values():
            if invite_code.code == code:
                return invite_code
        return None

    async def save(self, invite_code: InviteCode) -> InviteCode:
        """Save or update an invite code."""
        self._invite_codes[invite_code.id] = invite_code
        return invite_code
