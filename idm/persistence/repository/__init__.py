"""PostgreSQL repository implementations."""

from idm.persistence.repository.invite_code import PostgresInviteCodeRepository
from idm.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresInviteCodeRepository",
]
