"""PostgreSQL implementation of User repository."""

from collections.abc import Collection
from typing import Optional

from sqlalchemy import case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from idm.domain.model import User, UserActiveStatus
from idm.domain.repository import UserRepository
from idm.domain.value import UserId, normalize_handle, parse_user_id
from idm.persistence.mappers import row_to_active_status, row_to_user, user_to_dict
from idm.persistence.tables import canonical_handle, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Stored handles are canonicalized in SQL (see ``canonical_handle``),
    which keeps lookups correct for rows written with raw handles.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_users(self, stmt) -> list[User]:
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_many_by_ids(self, user_ids: Collection[UserId]) -> list[User]:
        """Find all users whose ID is in ``user_ids``."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        return await self._fetch_users(stmt)

    async def find_many_by_normalized_handle(
        self, canonical_handles: Collection[str]
    ) -> list[User]:
        """Find all users whose canonical handle is in ``canonical_handles``."""
        if not canonical_handles:
            return []
        stmt = select(users_table).where(
            canonical_handle(users_table.c.handle).in_(list(canonical_handles))
        )
        return await self._fetch_users(stmt)

    async def find_by_id_or_normalized_handle(self, identifier: str) -> Optional[User]:
        """Find the user whose ID or canonical handle matches ``identifier``.

        Both conditions go into one statement; an ID match sorts first.
        """
        handle_matches = canonical_handle(users_table.c.handle) == normalize_handle(
            identifier
        )
        stmt = select(users_table)

        user_id = parse_user_id(identifier)
        if user_id is None:
            stmt = stmt.where(handle_matches)
        else:
            id_matches = users_table.c.id == user_id
            stmt = stmt.where(or_(id_matches, handle_matches)).order_by(
                case((id_matches, 0), else_=1)
            )

        result = await self.session.execute(stmt.limit(1))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def list_all(self) -> list[User]:
        """Return every user in the directory."""
        return await self._fetch_users(select(users_table))

    async def find_active_statuses(
        self, user_ids: Collection[UserId]
    ) -> list[UserActiveStatus]:
        """Return the ``{id, active}`` projection of the matching users.

        Only the two projected columns are selected.
        """
        if not user_ids:
            return []
        stmt = select(users_table.c.id, users_table.c.active).where(
            users_table.c.id.in_(list(user_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_active_status(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user
