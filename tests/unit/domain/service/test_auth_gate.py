"""Unit tests for AuthGate."""

from uuid import uuid4

import pytest

from idm.domain.error import NotAuthorizedError
from idm.domain.service import AuthGate, AuthPolicy
from idm.domain.value import CallerContext, Principal, UserId


class TestAuthGate:
    """Tests for AuthGate.authorize()."""

    def test_authenticated_policy_allows_principal(self):
        """Should let a signed-in caller through."""
        gate = AuthGate()
        context = CallerContext(
            current_user=Principal(user_id=UserId(uuid4()), handle="jane")
        )

        gate.authorize(context, AuthPolicy.AUTHENTICATED, "get_user")

    def test_authenticated_policy_rejects_anonymous(self, anonymous):
        """Should reject a caller without a principal."""
        gate = AuthGate()

        with pytest.raises(NotAuthorizedError) as exc_info:
            gate.authorize(anonymous, AuthPolicy.AUTHENTICATED, "get_user")

        assert "not authorized" in str(exc_info.value)
        assert exc_info.value.operation == "get_user"

    def test_public_policy_allows_anonymous(self, anonymous):
        """Public operations need no principal."""
        AuthGate().authorize(anonymous, AuthPolicy.PUBLIC, "get_active_statuses")
