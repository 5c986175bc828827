"""Authorization gate for directory queries."""

from enum import Enum

import logfire

from idm.domain.error import NotAuthorizedError
from idm.domain.value import CallerContext

from .base import Service


class AuthPolicy(str, Enum):
    """Authorization requirement of a single operation."""

    AUTHENTICATED = "authenticated"
    PUBLIC = "public"


class AuthGate(Service):
    """Single place where operation policies are enforced.

    Stateless: the decision depends only on the policy and on whether the
    caller context carries a principal.
    """

    def authorize(
        self, context: CallerContext, policy: AuthPolicy, operation: str
    ) -> None:
        """Check ``context`` against ``policy``.

        Args:
            context: Caller context of the current request
            policy: Policy declared by the operation
            operation: Operation name, used in the error message

        Raises:
            NotAuthorizedError: If the policy requires a principal and
                the context has none
        """
        if policy is AuthPolicy.PUBLIC:
            return
        if not context.is_authenticated:
            logfire.warn("Unauthenticated caller denied", operation=operation)
            raise NotAuthorizedError(operation)
