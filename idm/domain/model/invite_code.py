"""Invite code entity.

Sign-ups require an invite code; the code's roles are granted to every
user who signs up with it. Users reference codes by their ``code``
string only.
"""

from datetime import datetime

from pydantic import Field

from idm.domain.model.common import DomainModel
from idm.domain.value import InviteCodeId


class InviteCode(DomainModel):
    """Invitation code allowing users to sign up."""

    id: InviteCodeId
    code: str = Field(min_length=1, max_length=255)
    description: str
    roles: list[str] = Field(default_factory=list)
    active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
