"""Get users by IDs use case."""

from pydantic import BaseModel

from .common import UserQueryUseCase, UserResponse


class GetUsersByIdsRequest(BaseModel):
    """Get users by IDs request."""

    ids: list[str] | None = None


class GetUsersByIdsUseCase(UserQueryUseCase):
    """Use case for fetching a batch of users by exact ID.

    IDs without a matching user are left out of the result; an empty
    list of IDs returns an empty list.
    """

    operation = "get_users_by_ids"
    required_params = ("ids",)

    async def run(self, request: GetUsersByIdsRequest) -> list[UserResponse]:
        users = await self.user_service.get_many_by_ids(request.ids)
        return [UserResponse.from_domain(user) for user in users]
