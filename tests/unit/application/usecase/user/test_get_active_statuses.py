"""Unit tests for GetActiveStatusesUseCase."""

import pytest

from idm.application.usecase.user import (
    GetActiveStatusesRequest,
    GetActiveStatusesUseCase,
)
from idm.domain.error import MissingParameterError
from idm.domain.repository import UserRepository
from tests.conftest import create_test_users, make_context, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetActiveStatusesUseCase:
    """Tests for GetActiveStatusesUseCase."""

    @pytest.mark.asyncio
    async def test_empty_ids_returns_empty_list(self, unit_env, anonymous):
        use_case = await unit_env.get(GetActiveStatusesUseCase)

        response = await use_case.execute(GetActiveStatusesRequest(ids=[]), anonymous)

        assert response == []

    @pytest.mark.asyncio
    async def test_returns_status_for_all_ids(self, unit_env):
        """Should return one ``{id, active}`` entry per user."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetActiveStatusesUseCase)
        users = await create_test_users(user_repo)
        request = GetActiveStatusesRequest(ids=[str(user.id) for user in users])

        # Act
        response = await use_case.execute(request, make_context(users[0]))

        # Assert
        assert len(response) == len(users)
        assert list(response[0].model_dump()) == ["id", "active"]

    @pytest.mark.asyncio
    async def test_does_not_require_authenticated_user(self, unit_env, anonymous):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetActiveStatusesUseCase)
        users = await create_test_users(user_repo)
        inactive = await user_repo.save(make_user("gone", active=False))
        ids = [str(user.id) for user in users] + [str(inactive.id)]

        response = await use_case.execute(GetActiveStatusesRequest(ids=ids), anonymous)

        assert len(response) == len(users) + 1
        statuses = {status.id: status.active for status in response}
        assert statuses[str(inactive.id)] is False

    @pytest.mark.asyncio
    async def test_missing_ids_raises(self, unit_env, anonymous):
        use_case = await unit_env.get(GetActiveStatusesUseCase)

        with pytest.raises(MissingParameterError, match="not provided"):
            await use_case.execute(GetActiveStatusesRequest(), anonymous)
