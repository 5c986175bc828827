"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from idm.config import AuthSettings
from idm.domain.service import JWTService
from idm.util.jwt import JWTError
from tests.conftest import make_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(SETTINGS)


class TestCallerContext:
    """Tests for JWTService.caller_context()."""

    def test_valid_token_yields_principal(self, jwt_service):
        """Should carry the token's user into the context."""
        user_id = str(uuid4())
        token = make_token(user_id, "jane", ["learner"], SETTINGS)

        context = jwt_service.caller_context(token)

        assert context.is_authenticated
        assert str(context.current_user.user_id) == user_id
        assert context.current_user.handle == "jane"
        assert context.current_user.roles == ["learner"]

    def test_missing_token_is_anonymous(self, jwt_service):
        assert not jwt_service.caller_context(None).is_authenticated
        assert not jwt_service.caller_context("").is_authenticated

    def test_invalid_token_is_anonymous(self, jwt_service):
        assert not jwt_service.caller_context("not-a-jwt").is_authenticated

    def test_token_signed_with_other_secret_is_anonymous(self, jwt_service):
        other = AuthSettings(jwt_secret="other-secret")
        token = make_token(str(uuid4()), "jane", [], other)

        assert not jwt_service.caller_context(token).is_authenticated

    def test_token_with_non_uuid_user_is_anonymous(self, jwt_service):
        token = make_token("fake.id", "jane", [], SETTINGS)

        assert not jwt_service.caller_context(token).is_authenticated

    def test_expired_token_is_anonymous(self, jwt_service):
        token = make_token(
            str(uuid4()), "jane", [], SETTINGS, expires_in=timedelta(days=-1)
        )

        assert not jwt_service.caller_context(token).is_authenticated


class TestVerifyToken:
    """Tests for JWTService.verify_token()."""

    def test_expired_token_raises(self, jwt_service):
        token = make_token(
            str(uuid4()), "jane", [], SETTINGS, expires_in=timedelta(days=-1)
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_payload_without_handle_raises(self, jwt_service):
        token = make_token(str(uuid4()), "jane", [], SETTINGS)
        # Re-sign without the handle claim
        payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
        del payload["handle"]
        broken = jwt.encode(payload, "test-secret", algorithm="HS256")

        with pytest.raises(JWTError, match="payload"):
            jwt_service.verify_token(broken)
