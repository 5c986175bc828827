"""PostgreSQL implementation of InviteCode repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from idm.domain.model import InviteCode
from idm.domain.repository import InviteCodeRepository
from idm.persistence.mappers import invite_code_to_dict, row_to_invite_code
from idm.persistence.tables import invite_codes_table


class PostgresInviteCodeRepository(InviteCodeRepository):
    """PostgreSQL implementation of InviteCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_code(self, code: str) -> InviteCode | None:
        """Find an invite code by its code string."""
        stmt = select(invite_codes_table).where(invite_codes_table.c.code == code)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_code(dict(row)) if row else None

    async def save(self, invite_code: InviteCode) -> InviteCode:
        """Save an invite code (create or update by ID)."""
        stmt = select(invite_codes_table.c.id).where(
            invite_codes_table.c.id == invite_code.id
        )
        exists = (await self.session.execute(stmt)).first() is not None

        values = invite_code_to_dict(invite_code)
        if exists:
            await self.session.execute(
                invite_codes_table.update()
                .where(invite_codes_table.c.id == invite_code.id)
                .values(**values)
            )
        else:
            await self.session.execute(invite_codes_table.insert().values(**values))

        await self.session.flush()
        return invite_code
