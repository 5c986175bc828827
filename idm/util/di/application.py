"""Application layer DI providers."""

from dishka import Scope, provide

from idm.application.usecase.user import (
    FindUsersUseCase,
    GetActiveStatusesUseCase,
    GetUserByIdUseCase,
    GetUserUseCase,
    GetUsersByHandlesUseCase,
    GetUsersByIdsUseCase,
)
from idm.domain.service import AuthGate, UserService
from idm.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_user_by_id_use_case(
        self, user_service: UserService, auth_gate: AuthGate
    ) -> GetUserByIdUseCase:
        """Provide get user by ID use case."""
        return GetUserByIdUseCase(user_service=user_service, auth_gate=auth_gate)

    @provide(scope=Scope.REQUEST)
    def get_users_by_ids_use_case(
        self, user_service: UserService, auth_gate: AuthGate
    ) -> GetUsersByIdsUseCase:
        """Provide get users by IDs use case."""
        return GetUsersByIdsUseCase(user_service=user_service, auth_gate=auth_gate)

    @provide(scope=Scope.REQUEST)
    def get_users_by_handles_use_case(
        self, user_service: UserService, auth_gate: AuthGate
    ) -> GetUsersByHandlesUseCase:
        """Provide get users by handles use case."""
        return GetUsersByHandlesUseCase(user_service=user_service, auth_gate=auth_gate)

    @provide(scope=Scope.REQUEST)
    def get_user_use_case(
        self, user_service: UserService, auth_gate: AuthGate
    ) -> GetUserUseCase:
        """Provide get user by ID or handle use case."""
        return GetUserUseCase(user_service=user_service, auth_gate=auth_gate)

    @provide(scope=Scope.REQUEST)
    def find_users_use_case(
        self, user_service: UserService, auth_gate: AuthGate
    ) -> FindUsersUseCase:
        """Provide find users use case."""
        return FindUsersUseCase(user_service=user_service, auth_gate=auth_gate)

    @provide(scope=Scope.REQUEST)
    def get_active_statuses_use_case(
        self, user_service: UserService, auth_gate: AuthGate
    ) -> GetActiveStatusesUseCase:
        """Provide get active statuses use case."""
        return GetActiveStatusesUseCase(user_service=user_service, auth_gate=auth_gate)
