"""Directory records."""

from idm.domain.model.invite_code import InviteCode
from idm.domain.model.user import User, UserActiveStatus

__all__ = [
    "User",
    "UserActiveStatus",
    "InviteCode",
]
