"""User account record.

Users sign up with an invite code, which determines their initial roles,
and may link accounts on external identity providers.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from idm.domain.model.common import DomainModel
from idm.domain.value import AuthProviders, Handle, UserId


class User(DomainModel):
    """User account as stored in the directory."""

    id: UserId
    active: bool = True
    email: str
    emails: list[str] = Field(default_factory=list)
    handle: Handle
    profile_url: Optional[str] = None
    avatar_url: Optional[str] = None
    name: str
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    timezone: Optional[str] = None
    roles: list[str] = Field(default_factory=list)
    invite_code: Optional[str] = None  # InviteCode.code, not joined
    auth_providers: Optional[AuthProviders] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("emails")
    @classmethod
    def dedupe_emails(cls, v: list[str]) -> list[str]:
        """Keep the first occurrence of each address, in order."""
        return list(dict.fromkeys(v))


class UserActiveStatus(DomainModel):
    """Public ``{id, active}`` projection of a user."""

    id: UserId
    active: bool
