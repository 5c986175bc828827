"""Get user by ID or handle use case."""

from pydantic import BaseModel

from .common import UserQueryUseCase, UserResponse


class GetUserRequest(BaseModel):
    """Get user request."""

    identifier: str | None = None  # User ID or handle


class GetUserUseCase(UserQueryUseCase):
    """Use case for fetching a single user by ID or handle."""

    operation = "get_user"
    required_params = ("identifier",)

    async def run(self, request: GetUserRequest) -> UserResponse:
        """Resolve the identifier to a user.

        Raises:
            NotFoundError: If the identifier matches neither an ID nor a handle
        """
        user = await self.user_service.get_by_identifier(request.identifier)
        return UserResponse.from_domain(user)
