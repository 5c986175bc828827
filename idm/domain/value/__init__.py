"""Directory value objects."""

from idm.domain.value.handle import (
    HANDLE_MAX_LENGTH,
    HANDLE_WHITESPACE,
    IdentifierKind,
    classify_identifier,
    normalize_handle,
    parse_user_id,
)
from idm.domain.value.identifiers import InviteCodeId, UserId
from idm.domain.value.types import (
    AuthProviders,
    CallerContext,
    Handle,
    Principal,
    ProviderLink,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "InviteCodeId",
    # Handles and identifier routing
    "HANDLE_MAX_LENGTH",
    "HANDLE_WHITESPACE",
    "IdentifierKind",
    "classify_identifier",
    "normalize_handle",
    "parse_user_id",
    # Types
    "AuthProviders",
    "CallerContext",
    "Handle",
    "Principal",
    "ProviderLink",
    "UserRole",
]
