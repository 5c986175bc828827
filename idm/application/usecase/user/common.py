"""Shared pieces of the user query use cases."""

from abc import abstractmethod
from datetime import datetime
from typing import Any, ClassVar

import logfire
from pydantic import BaseModel

from idm.application.usecase.base import BaseUseCase
from idm.domain.error import MissingParameterError
from idm.domain.model import User, UserActiveStatus
from idm.domain.service import AuthGate, AuthPolicy, UserService
from idm.domain.value import AuthProviders, CallerContext


class UserResponse(BaseModel):
    """User record as returned to callers."""

    id: str
    active: bool
    email: str
    emails: list[str]
    handle: str
    profile_url: str | None
    avatar_url: str | None
    name: str
    phone: str | None
    date_of_birth: datetime | None
    timezone: str | None
    roles: list[str]
    invite_code: str | None
    auth_providers: AuthProviders | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            active=user.active,
            email=user.email,
            emails=list(user.emails),
            handle=user.handle.root,
            profile_url=user.profile_url,
            avatar_url=user.avatar_url,
            name=user.name,
            phone=user.phone,
            date_of_birth=user.date_of_birth,
            timezone=user.timezone,
            roles=list(user.roles),
            invite_code=user.invite_code,
            auth_providers=user.auth_providers,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserActiveStatusResponse(BaseModel):
    """Public status projection: ``id`` and ``active`` only."""

    id: str
    active: bool

    @classmethod
    def from_domain(cls, status: UserActiveStatus) -> "UserActiveStatusResponse":
        return cls(id=str(status.id), active=status.active)


class UserQueryUseCase(BaseUseCase):
    """Base for the directory queries.

    Every query runs the same sequence:
    1. Required parameters must be present (not None)
    2. The caller must satisfy the operation's ``auth_policy``
    3. Required scalar parameters must not be blank
    4. ``run`` performs the lookup

    Subclasses declare ``operation``, ``required_params`` and, when the
    query is public, ``auth_policy``.
    """

    operation: ClassVar[str]
    required_params: ClassVar[tuple[str, ...]] = ()
    auth_policy: ClassVar[AuthPolicy] = AuthPolicy.AUTHENTICATED

    def __init__(self, user_service: UserService, auth_gate: AuthGate) -> None:
        """Initialize user query use case.

        Args:
            user_service: User domain service
            auth_gate: Authorization gate
        """
        self.user_service = user_service
        self.auth_gate = auth_gate

    async def execute(self, request: Any, context: CallerContext) -> Any:
        """Validate, authorize and run the query.

        Raises:
            MissingParameterError: If a required parameter is absent or blank
            NotAuthorizedError: If the caller does not satisfy the policy
            NotFoundError: If a single-result query has no match
        """
        with logfire.span(f"usecase.{self.operation}", operation=self.operation):
            for name in self.required_params:
                if getattr(request, name) is None:
                    raise MissingParameterError(name)

            self.auth_gate.authorize(context, self.auth_policy, self.operation)

            for name in self.required_params:
                value = getattr(request, name)
                if isinstance(value, str) and not value:
                    raise MissingParameterError(name)

            return await self.run(request)

    @abstractmethod
    async def run(self, request: Any) -> Any:
        pass
