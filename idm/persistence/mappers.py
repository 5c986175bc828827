"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from idm.domain.model import InviteCode, User, UserActiveStatus
from idm.domain.value import AuthProviders, Handle, InviteCodeId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    auth_providers = row.get("auth_providers")
    return User(
        id=UserId(_uuid(row["id"])),
        active=row["active"],
        email=row["email"],
        emails=list(row.get("emails") or []),
        handle=Handle(row["handle"]),
        profile_url=row.get("profile_url"),
        avatar_url=row.get("avatar_url"),
        name=row["name"],
        phone=row.get("phone"),
        date_of_birth=row.get("date_of_birth"),
        timezone=row.get("timezone"),
        roles=list(row.get("roles") or []),
        invite_code=row.get("invite_code"),
        auth_providers=AuthProviders.model_validate(auth_providers)
        if auth_providers
        else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    # JSONB needs JSON-safe values (linked_at datetimes become ISO strings)
    data["auth_providers"] = (
        user.auth_providers.model_dump(mode="json") if user.auth_providers else None
    )
    return data


def row_to_active_status(row: Dict[str, Any]) -> UserActiveStatus:
    """Convert an ``(id, active)`` row to the status projection."""
    return UserActiveStatus(id=UserId(_uuid(row["id"])), active=row["active"])


def row_to_invite_code(row: Dict[str, Any]) -> InviteCode:
    """Convert database row to InviteCode domain model.

    Args:
        row: Database row as dict

    Returns:
        InviteCode domain model
    """
    return InviteCode(
        id=InviteCodeId(_uuid(row["id"])),
        code=row["code"],
        description=row["description"],
        roles=list(row.get("roles") or []),
        active=row["active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def invite_code_to_dict(invite_code: InviteCode) -> Dict[str, Any]:
    """Convert InviteCode domain model to database dict."""
    return invite_code.model_dump()
