"""Get active statuses use case."""

from pydantic import BaseModel

from idm.domain.service import AuthPolicy

from .common import UserActiveStatusResponse, UserQueryUseCase


class GetActiveStatusesRequest(BaseModel):
    """Get active statuses request."""

    ids: list[str] | None = None


class GetActiveStatusesUseCase(UserQueryUseCase):
    """Use case for checking which users are active.

    Public: callable without a signed-in user, e.g. by status checks.
    Only ``id`` and ``active`` are returned.
    """

    operation = "get_active_statuses"
    required_params = ("ids",)
    auth_policy = AuthPolicy.PUBLIC

    async def run(
        self, request: GetActiveStatusesRequest
    ) -> list[UserActiveStatusResponse]:
        statuses = await self.user_service.get_active_statuses(request.ids)
        return [UserActiveStatusResponse.from_domain(status) for status in statuses]
