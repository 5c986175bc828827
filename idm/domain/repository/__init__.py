"""Repository interfaces for the user directory.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from idm.domain.repository.invite_code import InviteCodeRepository
from idm.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "InviteCodeRepository",
]
