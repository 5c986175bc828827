"""Find users by a mix of IDs and handles use case."""

from pydantic import BaseModel

from .common import UserQueryUseCase, UserResponse


class FindUsersRequest(BaseModel):
    """Find users request.

    Leaving ``identifiers`` out requests every user in the directory.
    """

    identifiers: list[str] | None = None


class FindUsersUseCase(UserQueryUseCase):
    """Use case for resolving several IDs and/or handles at once.

    A user matched through more than one identifier (for instance once
    by ID and once by handle) appears exactly once in the result.
    """

    operation = "find_users"

    async def run(self, request: FindUsersRequest) -> list[UserResponse]:
        users = await self.user_service.find_by_identifiers(request.identifiers)
        return [UserResponse.from_domain(user) for user in users]
