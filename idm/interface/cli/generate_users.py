"""Seed the directory with generated users.

Usage:
    idm-generate-users [OPTIONS] INVITE_CODE

    idm-generate-users --role=learner,moderator --count 5 --verbose SPRING-COHORT
"""

import asyncio
import sys
from uuid import uuid4

import click
import logfire
from dishka import AsyncContainer

from idm.config import Settings
from idm.domain.model import InviteCode, User
from idm.domain.repository import InviteCodeRepository
from idm.domain.service import UserService
from idm.domain.value import Handle, InviteCodeId, UserId, UserRole
from idm.util.di.container import create_container
from idm.util.logging import setup_logging
from idm.util.observability import configure_logfire

DEFAULT_COUNT = 15


def parse_roles(value: str | None) -> list[str]:
    """Split a ``ROLE[,ROLE]`` option into lower-cased role names."""
    if not value:
        return [UserRole.LEARNER.value]
    return [role.strip().lower() for role in value.split(",") if role.strip()]


def build_user(invite_code: str, roles: list[str]) -> User:
    """Build a user with a random handle that signed up with ``invite_code``."""
    suffix = uuid4().hex[:12]
    handle = f"user-{suffix}"
    email = f"{handle}@example.com"
    return User(
        id=UserId(uuid4()),
        email=email,
        emails=[email],
        handle=Handle(handle),
        name=f"Generated User {suffix}",
        roles=roles,
        invite_code=invite_code,
    )


async def seed_users(
    request_container: AsyncContainer,
    invite_code: str,
    roles: list[str],
    count: int = DEFAULT_COUNT,
) -> list[User]:
    """Create ``count`` users referencing ``invite_code``.

    The invite code record is created with ``roles`` when it does not
    exist yet.

    Args:
        request_container: Request-scoped DI container
        invite_code: Code the users signed up with
        roles: Roles granted to every created user
        count: Number of users to create

    Returns:
        Created users
    """
    invite_codes = await request_container.get(InviteCodeRepository)
    user_service = await request_container.get(UserService)

    with logfire.span("generate_users", invite_code=invite_code, count=count):
        if await invite_codes.find_by_code(invite_code) is None:
            await invite_codes.save(
                InviteCode(
                    id=InviteCodeId(uuid4()),
                    code=invite_code,
                    description=f"Generated for {count} seeded users",
                    roles=roles,
                )
            )
            logfire.info("Invite code created", invite_code=invite_code)

        users = [
            await user_service.save(build_user(invite_code, roles))
            for _ in range(count)
        ]
        logfire.info("Users generated", invite_code=invite_code, count=len(users))
        return users


async def _generate(invite_code: str, roles: list[str], count: int) -> list[User]:
    container = create_container()
    try:
        async with container() as request_container:
            return await seed_users(request_container, invite_code, roles, count)
    finally:
        await container.close()


@click.command()
@click.argument("invite_code", required=False)
@click.option(
    "--role",
    "role",
    default=None,
    metavar="ROLE[,ROLE]",
    help="Create users with these roles (default: 'learner')",
)
@click.option(
    "--count",
    type=click.IntRange(min=0),
    default=DEFAULT_COUNT,
    show_default=True,
    help="How many users to create",
)
@click.option("--verbose", is_flag=True, help="Print out ids of created users")
def main(invite_code: str | None, role: str | None, count: int, verbose: bool):
    """Create users that signed up with INVITE_CODE."""
    if not invite_code:
        click.echo(
            "\nERROR: INVITE_CODE is required. Try --help for usage.\n", err=True
        )
        sys.exit(1)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    users = asyncio.run(_generate(invite_code, parse_roles(role), count))
    if verbose:
        for user in users:
            click.echo(str(user.id))


if __name__ == "__main__":
    main()
