"""User lookup domain service."""

from collections.abc import Sequence

import logfire

from idm.domain.error import NotFoundError
from idm.domain.model import User, UserActiveStatus
from idm.domain.repository import UserRepository
from idm.domain.value import (
    IdentifierKind,
    UserId,
    classify_identifier,
    normalize_handle,
    parse_user_id,
)

from .base import Service


def _parse_user_ids(raw_ids: Sequence[str]) -> set[UserId]:
    """Parse raw IDs, dropping the ones that cannot match any record."""
    parsed = (parse_user_id(raw_id) for raw_id in raw_ids)
    return {user_id for user_id in parsed if user_id is not None}


class UserService(Service):
    """Domain service for directory lookups.

    Owns the matching strategy of each query: ID parsing, canonical
    handle comparison, identifier routing with fallback, and
    de-duplication by user ID.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, raw_id: str) -> User:
        """Get user by ID.

        Args:
            raw_id: User ID as given by the caller

        Returns:
            User entity

        Raises:
            NotFoundError: If no user has this ID (including non-UUID IDs)
        """
        with logfire.span("user_service.get_by_id", user_id=raw_id):
            user_id = parse_user_id(raw_id)
            user = await self.user_repository.find_by_id(user_id) if user_id else None
            if not user:
                logfire.warn("User not found", user_id=raw_id)
                raise NotFoundError("User", raw_id)
            logfire.info("User found", user_id=raw_id, handle=user.handle.root)
            return user

    async def get_many_by_ids(self, raw_ids: Sequence[str]) -> list[User]:
        """Get every user whose ID is listed; unknown IDs are skipped.

        Args:
            raw_ids: User IDs as given by the caller

        Returns:
            Matched users, each at most once, in no particular order
        """
        if not raw_ids:
            return []

        with logfire.span("user_service.get_many_by_ids", requested=len(raw_ids)):
            user_ids = _parse_user_ids(raw_ids)
            if not user_ids:
                return []
            users = await self.user_repository.find_many_by_ids(user_ids)
            logfire.info("Users found by id", requested=len(raw_ids), found=len(users))
            return users

    async def get_many_by_handles(self, handles: Sequence[str]) -> list[User]:
        """Get every user whose canonical handle matches a listed handle.

        Args:
            handles: Handles in any casing or length

        Returns:
            Matched users, each at most once, in no particular order
        """
        if not handles:
            return []

        with logfire.span("user_service.get_many_by_handles", requested=len(handles)):
            canonical_handles = {normalize_handle(handle) for handle in handles}
            users = await self.user_repository.find_many_by_normalized_handle(
                canonical_handles
            )
            logfire.info(
                "Users found by handle", requested=len(handles), found=len(users)
            )
            return users

    async def resolve_identifier(self, identifier: str) -> User | None:
        """Resolve an ID-or-handle identifier to a user.

        ID-shaped identifiers try the primary key first. Every identifier
        then falls back to the combined ID-or-canonical-handle lookup, so
        a wrong guess from the classifier never hides a match.

        Args:
            identifier: User ID or handle

        Returns:
            User if found, None otherwise
        """
        kind = classify_identifier(identifier)
        with logfire.span(
            "user_service.resolve_identifier", identifier=identifier, kind=kind.value
        ):
            if kind is IdentifierKind.ID:
                user_id = parse_user_id(identifier)
                user = await self.user_repository.find_by_id(user_id)
                if user:
                    return user

            user = await self.user_repository.find_by_id_or_normalized_handle(
                identifier
            )
            if not user:
                logfire.info("Identifier did not resolve", identifier=identifier)
            return user

    async def get_by_identifier(self, identifier: str) -> User:
        """Get user by ID or handle.

        Raises:
            NotFoundError: If the identifier matches neither an ID nor a handle
        """
        user = await self.resolve_identifier(identifier)
        if not user:
            logfire.warn("User not found", identifier=identifier)
            raise NotFoundError("User", identifier)
        return user

    async def find_by_identifiers(
        self, identifiers: Sequence[str] | None
    ) -> list[User]:
        """Find users matching any of a mix of IDs and handles.

        Steps:
        1. No identifiers at all (None): return the whole directory
        2. Resolve each identifier independently; misses are dropped
        3. Merge the matches by user ID, keeping the first match per ID

        Args:
            identifiers: IDs and/or handles, or None for every user

        Returns:
            Matched users, each exactly once
        """
        if identifiers is None:
            with logfire.span("user_service.list_all"):
                users = await self.user_repository.list_all()
                logfire.info("Listed all users", count=len(users))
                return users

        if not identifiers:
            return []

        with logfire.span(
            "user_service.find_by_identifiers", requested=len(identifiers)
        ):
            # One session cannot run statements concurrently, so resolve in turn
            matches = [
                await self.resolve_identifier(identifier) for identifier in identifiers
            ]

            users_by_id: dict[UserId, User] = {}
            for user in matches:
                if user is not None and user.id not in users_by_id:
                    users_by_id[user.id] = user

            logfire.info(
                "Identifiers resolved",
                requested=len(identifiers),
                matched=sum(1 for user in matches if user is not None),
                unique=len(users_by_id),
            )
            return list(users_by_id.values())

    async def get_active_statuses(
        self, raw_ids: Sequence[str]
    ) -> list[UserActiveStatus]:
        """Get the ``{id, active}`` status of every listed user.

        Args:
            raw_ids: User IDs as given by the caller

        Returns:
            One status per matched user
        """
        if not raw_ids:
            return []

        with logfire.span("user_service.get_active_statuses", requested=len(raw_ids)):
            user_ids = _parse_user_ids(raw_ids)
            if not user_ids:
                return []
            statuses = await self.user_repository.find_active_statuses(user_ids)
            logfire.info(
                "Active statuses found", requested=len(raw_ids), found=len(statuses)
            )
            return statuses

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), handle=user.handle.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id), handle=saved.handle.root)
            return saved
