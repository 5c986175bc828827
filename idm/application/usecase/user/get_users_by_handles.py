"""Get users by handles use case."""

from pydantic import BaseModel

from .common import UserQueryUseCase, UserResponse


class GetUsersByHandlesRequest(BaseModel):
    """Get users by handles request."""

    handles: list[str] | None = None


class GetUsersByHandlesUseCase(UserQueryUseCase):
    """Use case for fetching a batch of users by handle.

    Handles are matched in canonical form, so ``"HasUppercase"`` and
    ``"hasuppercase"`` find the same user. Result order is not tied to
    the order of the requested handles.
    """

    operation = "get_users_by_handles"
    required_params = ("handles",)

    async def run(self, request: GetUsersByHandlesRequest) -> list[UserResponse]:
        users = await self.user_service.get_many_by_handles(request.handles)
        return [UserResponse.from_domain(user) for user in users]
