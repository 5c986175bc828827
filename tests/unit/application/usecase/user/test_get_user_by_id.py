"""Unit tests for GetUserByIdUseCase."""

import pytest

from idm.application.usecase.user import GetUserByIdRequest, GetUserByIdUseCase
from idm.domain.error import MissingParameterError, NotAuthorizedError, NotFoundError
from idm.domain.repository import UserRepository
from tests.conftest import (
    TEST_USER_INVITE_CODE,
    TEST_USER_ROLES,
    create_test_users,
    make_context,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserByIdUseCase:
    """Tests for GetUserByIdUseCase."""

    @pytest.mark.asyncio
    async def test_returns_user_for_valid_id(self, unit_env):
        """Should return the full record of the matching user."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetUserByIdUseCase)
        user, *_ = await create_test_users(user_repo)

        # Act
        response = await use_case.execute(
            GetUserByIdRequest(id=str(user.id)), make_context(user)
        )

        # Assert
        assert response.id == str(user.id)
        assert response.invite_code == TEST_USER_INVITE_CODE
        assert response.roles == TEST_USER_ROLES

    @pytest.mark.asyncio
    async def test_missing_id_raises(self, unit_env, anonymous):
        """A missing id is reported before authorization."""
        use_case = await unit_env.get(GetUserByIdUseCase)

        with pytest.raises(MissingParameterError, match="not provided"):
            await use_case.execute(GetUserByIdRequest(), anonymous)

    @pytest.mark.asyncio
    async def test_unmatched_id_raises_not_found(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetUserByIdUseCase)
        user, *_ = await create_test_users(user_repo, count=1)

        with pytest.raises(NotFoundError, match="not found"):
            await use_case.execute(GetUserByIdRequest(id="fake.id"), make_context(user))

    @pytest.mark.asyncio
    async def test_anonymous_caller_raises_not_authorized(self, unit_env, anonymous):
        use_case = await unit_env.get(GetUserByIdUseCase)

        with pytest.raises(NotAuthorizedError, match="not authorized"):
            await use_case.execute(GetUserByIdRequest(id="fake.id"), anonymous)

    @pytest.mark.asyncio
    async def test_blank_id_raises_missing_parameter(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetUserByIdUseCase)
        user, *_ = await create_test_users(user_repo, count=1)

        with pytest.raises(MissingParameterError):
            await use_case.execute(GetUserByIdRequest(id=""), make_context(user))
