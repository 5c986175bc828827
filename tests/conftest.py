"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from idm.config import AuthSettings
from idm.domain.model import User
from idm.domain.value import CallerContext, Handle, Principal, UserId, UserRole


def make_user(handle: str, **overrides) -> User:
    """Helper function to build a test user.

    The handle is stored exactly as given, so tests can use handles that
    are not canonical (upper-case letters, padding, too long).

    Args:
        handle: Raw handle to store
        **overrides: Any other User field

    Returns:
        User with a fresh ID and a learner role
    """
    fields = {
        "id": UserId(uuid4()),
        "email": f"{handle.strip().lower()}@example.com",
        "handle": Handle(handle),
        "name": f"Test {handle.strip()}",
        "roles": [UserRole.LEARNER.value],
        "invite_code": "TEST-CODE",
    }
    fields.update(overrides)
    return User(**fields)


def make_context(user: User) -> CallerContext:
    """Caller context signed in as ``user``."""
    return CallerContext(
        current_user=Principal(
            user_id=user.id, handle=user.handle.root, roles=list(user.roles)
        )
    )


def make_token(
    user_id: str,
    handle: str,
    roles: list[str],
    settings: AuthSettings,
    expires_in: timedelta = timedelta(days=1),
) -> str:
    """Sign a token the way the login flow does."""
    payload = {
        "user_id": user_id,
        "handle": handle,
        "roles": roles,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


@pytest.fixture
def anonymous() -> CallerContext:
    """Caller context without a signed-in user."""
    return CallerContext.anonymous()


TEST_USER_INVITE_CODE = "test-invite-code"
TEST_USER_ROLES = [UserRole.ADMIN.value]


async def create_test_users(user_repository, count: int = 5) -> list[User]:
    """Save ``count`` users sharing the test invite code and roles."""
    users = [
        make_user(
            f"user{uuid4().hex[:8]}",
            roles=TEST_USER_ROLES,
            invite_code=TEST_USER_INVITE_CODE,
        )
        for _ in range(count)
    ]
    return [await user_repository.save(user) for user in users]
