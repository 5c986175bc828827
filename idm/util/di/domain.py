"""Domain layer DI providers."""

from dishka import Scope, provide

from idm.config import AuthSettings
from idm.domain.repository import UserRepository
from idm.domain.service import AuthGate, JWTService, UserService
from idm.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped to share the request's repositories
    (and so its database session).
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_auth_gate(self) -> AuthGate:
        """Provide the stateless authorization gate."""
        return AuthGate()

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
