"""User query use cases."""

from .common import UserActiveStatusResponse, UserQueryUseCase, UserResponse
from .find_users import FindUsersRequest, FindUsersUseCase
from .get_active_statuses import GetActiveStatusesRequest, GetActiveStatusesUseCase
from .get_user import GetUserRequest, GetUserUseCase
from .get_user_by_id import GetUserByIdRequest, GetUserByIdUseCase
from .get_users_by_handles import GetUsersByHandlesRequest, GetUsersByHandlesUseCase
from .get_users_by_ids import GetUsersByIdsRequest, GetUsersByIdsUseCase

__all__ = [
    "FindUsersRequest",
    "FindUsersUseCase",
    "GetActiveStatusesRequest",
    "GetActiveStatusesUseCase",
    "GetUserByIdRequest",
    "GetUserByIdUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "GetUsersByHandlesRequest",
    "GetUsersByHandlesUseCase",
    "GetUsersByIdsRequest",
    "GetUsersByIdsUseCase",
    "UserActiveStatusResponse",
    "UserQueryUseCase",
    "UserResponse",
]
