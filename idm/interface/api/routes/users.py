"""User directory query routes.

One POST endpoint per query. Request bodies mirror the query parameters
and may be omitted entirely; leaving out a required field, or the whole
body, yields a 400 "not provided" error.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from idm.application.usecase.user import (
    FindUsersRequest,
    FindUsersUseCase,
    GetActiveStatusesRequest,
    GetActiveStatusesUseCase,
    GetUserByIdRequest,
    GetUserByIdUseCase,
    GetUserRequest,
    GetUserUseCase,
    GetUsersByHandlesRequest,
    GetUsersByHandlesUseCase,
    GetUsersByIdsRequest,
    GetUsersByIdsUseCase,
    UserActiveStatusResponse,
    UserResponse,
)
from idm.domain.service import JWTService
from idm.domain.value import CallerContext

router = APIRouter(prefix="/users/queries", tags=["users"], route_class=DishkaRoute)


def _caller_context(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> CallerContext:
    """Build the caller context from a Bearer header or the auth cookie."""
    token = auth_token
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer ") :].strip()
    return jwt_service.caller_context(token)


@router.post("/get-user-by-id", response_model=UserResponse)
async def get_user_by_id(
    use_case: FromDishka[GetUserByIdUseCase],
    jwt_service: FromDishka[JWTService],
    request: GetUserByIdRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Get a user by ID.

    Example:
        POST /users/queries/get-user-by-id
        Cookie: auth_token=...

        Request:
        {"id": "123e4567-e89b-12d3-a456-426614174000"}
    """
    context = _caller_context(jwt_service, auth_token, authorization)
    return await use_case.execute(request or GetUserByIdRequest(), context)


@router.post("/get-users-by-ids", response_model=list[UserResponse])
async def get_users_by_ids(
    use_case: FromDishka[GetUsersByIdsUseCase],
    jwt_service: FromDishka[JWTService],
    request: GetUsersByIdsRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> list[UserResponse]:
    """Get the users with the given IDs; unknown IDs are skipped."""
    context = _caller_context(jwt_service, auth_token, authorization)
    return await use_case.execute(request or GetUsersByIdsRequest(), context)


@router.post("/get-users-by-handles", response_model=list[UserResponse])
async def get_users_by_handles(
    use_case: FromDishka[GetUsersByHandlesUseCase],
    jwt_service: FromDishka[JWTService],
    request: GetUsersByHandlesRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> list[UserResponse]:
    """Get the users with the given handles (compared case-insensitively)."""
    context = _caller_context(jwt_service, auth_token, authorization)
    return await use_case.execute(request or GetUsersByHandlesRequest(), context)


@router.post("/get-user", response_model=UserResponse)
async def get_user(
    use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    request: GetUserRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UserResponse:
    """Get a user by ID or handle.

    Example:
        POST /users/queries/get-user

        Request:
        {"identifier": "JaneDoe"}
    """
    context = _caller_context(jwt_service, auth_token, authorization)
    return await use_case.execute(request or GetUserRequest(), context)


@router.post("/find-users", response_model=list[UserResponse])
async def find_users(
    use_case: FromDishka[FindUsersUseCase],
    jwt_service: FromDishka[JWTService],
    request: FindUsersRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> list[UserResponse]:
    """Find users by a mix of IDs and handles.

    An empty body (``{}``) returns every user. Each user appears once,
    however many of the identifiers matched it.
    """
    context = _caller_context(jwt_service, auth_token, authorization)
    return await use_case.execute(request or FindUsersRequest(), context)


@router.post("/get-active-statuses", response_model=list[UserActiveStatusResponse])
async def get_active_statuses(
    use_case: FromDishka[GetActiveStatusesUseCase],
    jwt_service: FromDishka[JWTService],
    request: GetActiveStatusesRequest | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> list[UserActiveStatusResponse]:
    """Get ``{id, active}`` for the given user IDs. No authentication needed."""
    context = _caller_context(jwt_service, auth_token, authorization)
    return await use_case.execute(request or GetActiveStatusesRequest(), context)
