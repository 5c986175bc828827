"""SQLAlchemy table definitions for the user directory.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ColumnElement,
    Index,
    MetaData,
    String,
    Table,
    Text,
    func,
    literal_column,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

from idm.domain.value import HANDLE_MAX_LENGTH, HANDLE_WHITESPACE

metadata = MetaData()

# Inline literals, so queries repeat the idx_users_canonical_handle expression
_TRIM_CHARACTERS = literal_column(
    "E'" + "".join(f"\\x{ord(char):02x}" for char in HANDLE_WHITESPACE) + "'"
)
_SUBSTR_START = literal_column("1")
_SUBSTR_LENGTH = literal_column(str(HANDLE_MAX_LENGTH))


def canonical_handle(column: ColumnElement[str]) -> ColumnElement[str]:
    """SQL counterpart of ``normalize_handle``: lower, trim, cap the length.

    Renders as ``substr(btrim(lower(handle), E'\\x20...'), 1, 21)``.
    """
    trimmed = func.btrim(func.lower(column), _TRIM_CHARACTERS)
    return func.substr(trimmed, _SUBSTR_START, _SUBSTR_LENGTH)


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("email", String(255), nullable=False),
    Column("emails", ARRAY(String(255)), nullable=False, server_default="{}"),
    Column("handle", String(255), nullable=False),  # Raw, possibly non-canonical
    Column("profile_url", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("name", String(255), nullable=False),
    Column("phone", String(50), nullable=True),
    Column("date_of_birth", TIMESTAMP(timezone=True), nullable=True),
    Column("timezone", String(64), nullable=True),
    Column("roles", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("invite_code", String(255), nullable=True),  # invite_codes.code, no FK
    Column("auth_providers", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Expression index so canonical handle lookups do not scan the table
Index("idx_users_canonical_handle", canonical_handle(users_table.c.handle))
Index("idx_users_email", users_table.c.email)

# ============================================================================
# INVITE CODES TABLE
# ============================================================================
invite_codes_table = Table(
    "invite_codes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("code", String(255), nullable=False, unique=True),
    Column("description", Text, nullable=False),
    Column("roles", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
