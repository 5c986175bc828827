"""Strongly typed identifiers for directory records."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InviteCodeId = NewType("InviteCodeId", UUID)
