"""Handle canonicalization and identifier classification.

Handles are only ever compared in their canonical form: lower-cased,
trimmed and capped at ``HANDLE_MAX_LENGTH`` characters (the longest
handle Slack accepts). Stored handles are not guaranteed to be
canonical, so both sides of a comparison go through ``normalize_handle``.

A free-form identifier may be either a user id or a handle. The
classification below is only a routing hint; lookups always fall back
to the other path.
"""

import re
from enum import Enum
from uuid import UUID

from idm.domain.value.identifiers import UserId

HANDLE_MAX_LENGTH = 21

# Trimmed from both ends of a handle. The SQL canonical form trims the same set.
HANDLE_WHITESPACE = " \t\n\r\f\v"

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class IdentifierKind(str, Enum):
    """Preferred lookup path for a free-form identifier."""

    ID = "id"
    HANDLE = "handle"


def normalize_handle(raw: str) -> str:
    """Return the canonical form of a handle.

    Lower-cases, then trims ``HANDLE_WHITESPACE`` (ASCII whitespace only)
    from both ends, then keeps the first ``HANDLE_MAX_LENGTH`` characters.
    Total for any string, including "".

    Examples:
        >>> normalize_handle("  HasUppercase ")
        'hasuppercase'
        >>> normalize_handle("isLongerThanTwentyOneCharacters")
        'islongerthantwentyone'
    """
    return raw.lower().strip(HANDLE_WHITESPACE)[:HANDLE_MAX_LENGTH]


def classify_identifier(identifier: str) -> IdentifierKind:
    """Classify an identifier as id-shaped (UUID) or handle-shaped."""
    if _UUID_PATTERN.match(identifier.strip()):
        return IdentifierKind.ID
    return IdentifierKind.HANDLE


def parse_user_id(raw: str) -> UserId | None:
    """Parse an id-shaped string into a ``UserId``.

    Returns None for anything that is not a UUID; such a value can never
    match a stored record, so callers treat it as a miss.
    """
    if classify_identifier(raw) is not IdentifierKind.ID:
        return None
    return UserId(UUID(raw.strip()))
