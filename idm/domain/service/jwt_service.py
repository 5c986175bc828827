"""JWT token domain service."""

from uuid import UUID

import logfire

from idm.config import AuthSettings
from idm.domain.value import CallerContext, Principal, UserId
from idm.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service that turns request tokens into caller contexts."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified", user_id=payload.user_id, handle=payload.handle
                )
                return payload
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def caller_context(self, token: str | None) -> CallerContext:
        """Build the caller context for a request from its token.

        A missing, invalid or expired token yields an anonymous context;
        operations that need a principal reject it later.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller context, authenticated when the token is valid
        """
        if not token:
            return CallerContext.anonymous()

        try:
            payload = self.verify_token(token)
            principal = Principal(
                user_id=UserId(UUID(payload.user_id)),
                handle=payload.handle,
                roles=payload.roles,
            )
        except (JWTError, ValueError) as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return CallerContext.anonymous()

        return CallerContext(current_user=principal)
