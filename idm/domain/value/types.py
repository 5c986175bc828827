"""Directory value objects.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import field_validator

from idm.domain.value.common import RootValueObject, ValueObject
from idm.domain.value.handle import normalize_handle
from idm.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Role tags assigned to users, usually through their invite code."""

    LEARNER = "learner"
    MODERATOR = "moderator"
    ADMIN = "admin"
    BACKOFFICE = "backoffice"


class Handle(RootValueObject[str]):
    """User handle as it was stored.

    The raw value may carry upper-case letters, padding or more than
    ``HANDLE_MAX_LENGTH`` characters; use ``canonical`` for comparisons.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v

    @property
    def canonical(self) -> str:
        """Canonical (normalized) form of this handle."""
        return normalize_handle(self.root)


class ProviderLink(ValueObject):
    """Link between a user and an account on an external identity provider."""

    provider_user_id: str
    username: str | None = None
    linked_at: datetime | None = None


class AuthProviders(ValueObject):
    """External identity providers linked to a user."""

    github: ProviderLink | None = None
    slack: ProviderLink | None = None


class Principal(ValueObject):
    """Authenticated user on whose behalf a request runs."""

    user_id: UserId
    handle: str
    roles: list[str] = []


class CallerContext(ValueObject):
    """Per-request context handed to every directory query.

    ``current_user`` is None for anonymous callers.
    """

    current_user: Principal | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @classmethod
    def anonymous(cls) -> "CallerContext":
        return cls()
