"""Get user by ID use case."""

from pydantic import BaseModel

from .common import UserQueryUseCase, UserResponse


class GetUserByIdRequest(BaseModel):
    """Get user by ID request."""

    id: str | None = None


class GetUserByIdUseCase(UserQueryUseCase):
    """Use case for fetching a single user by exact ID."""

    operation = "get_user_by_id"
    required_params = ("id",)

    async def run(self, request: GetUserByIdRequest) -> UserResponse:
        """Fetch the user.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_service.get_by_id(request.id)
        return UserResponse.from_domain(user)
