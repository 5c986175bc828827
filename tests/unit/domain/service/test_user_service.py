"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from idm.domain.error import NotFoundError
from idm.domain.service import UserService
from idm.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(user_repo) -> UserService:
    return UserService(user_repo)


class TestGetById:
    """Tests for UserService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_returns_user(self, service, user_repo):
        user = await user_repo.save(make_user("jane"))

        assert await service.get_by_id(str(user.id)) == user

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, service):
        missing = str(uuid4())

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id(missing)

        assert "not found" in str(exc_info.value)
        assert exc_info.value.identifier == missing

    @pytest.mark.asyncio
    async def test_non_uuid_id_raises_not_found(self, service, user_repo):
        """Malformed IDs are misses, not validation errors."""
        await user_repo.save(make_user("jane"))

        with pytest.raises(NotFoundError):
            await service.get_by_id("fake.id")


class TestGetManyByIds:
    """Tests for UserService.get_many_by_ids()."""

    @pytest.mark.asyncio
    async def test_skips_unknown_ids(self, service, user_repo):
        jane = await user_repo.save(make_user("jane"))
        john = await user_repo.save(make_user("john"))
        await user_repo.save(make_user("other"))

        users = await service.get_many_by_ids(
            [str(jane.id), str(john.id), str(uuid4()), "fake.id"]
        )

        assert {user.id for user in users} == {jane.id, john.id}

    @pytest.mark.asyncio
    async def test_duplicate_ids_return_user_once(self, service, user_repo):
        jane = await user_repo.save(make_user("jane"))

        users = await service.get_many_by_ids([str(jane.id), str(jane.id)])

        assert users == [jane]

    @pytest.mark.asyncio
    async def test_empty_list(self, service, user_repo):
        await user_repo.save(make_user("jane"))

        assert await service.get_many_by_ids([]) == []


class TestGetManyByHandles:
    """Tests for UserService.get_many_by_handles()."""

    @pytest.mark.asyncio
    async def test_matches_canonical_handles(self, service, user_repo):
        """Stored and requested handles are both canonicalized."""
        upper = await user_repo.save(make_user("HasUppercase"))
        long = await user_repo.save(make_user("isLongerThanTwentyOneCharacters"))
        await user_repo.save(make_user("unrelated"))

        users = await service.get_many_by_handles(
            [upper.handle.root, long.handle.root]
        )

        assert {user.id for user in users} == {upper.id, long.id}

    @pytest.mark.asyncio
    async def test_request_casing_does_not_matter(self, service, user_repo):
        jane = await user_repo.save(make_user("jane"))

        assert await service.get_many_by_handles(["  JANE "]) == [jane]

    @pytest.mark.asyncio
    async def test_unknown_handles_are_skipped(self, service, user_repo):
        await user_repo.save(make_user("jane"))

        assert await service.get_many_by_handles(["nobody"]) == []


class TestGetByIdentifier:
    """Tests for UserService.get_by_identifier()."""

    @pytest.mark.asyncio
    async def test_resolves_id(self, service, user_repo):
        jane = await user_repo.save(make_user("jane"))

        assert await service.get_by_identifier(str(jane.id)) == jane

    @pytest.mark.asyncio
    async def test_resolves_handle(self, service, user_repo):
        upper = await user_repo.save(make_user("HasUppercase"))

        assert await service.get_by_identifier("HasUppercase") == upper
        assert await service.get_by_identifier("hasuppercase") == upper

    @pytest.mark.asyncio
    async def test_resolves_over_long_handle(self, service, user_repo):
        long = await user_repo.save(make_user("isLongerThanTwentyOneCharacters"))

        assert await service.get_by_identifier(long.handle.root) == long

    @pytest.mark.asyncio
    async def test_id_shaped_handle_falls_back_to_handle(self, service, user_repo):
        """A handle that looks like a UUID still resolves by handle."""
        handle = str(uuid4())
        user = await user_repo.save(make_user(handle))

        assert await service.get_by_identifier(handle) == user

    @pytest.mark.asyncio
    async def test_unknown_identifier_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.get_by_identifier("nobody")


class TestFindByIdentifiers:
    """Tests for UserService.find_by_identifiers()."""

    @pytest.mark.asyncio
    async def test_none_returns_every_user(self, service, user_repo):
        users = [await user_repo.save(make_user(f"user{i}")) for i in range(3)]

        result = await service.find_by_identifiers(None)

        assert {user.id for user in result} == {user.id for user in users}

    @pytest.mark.asyncio
    async def test_empty_list_returns_nothing(self, service, user_repo):
        await user_repo.save(make_user("jane"))

        assert await service.find_by_identifiers([]) == []

    @pytest.mark.asyncio
    async def test_mixed_identifiers_are_deduplicated(self, service, user_repo):
        """A user matched by ID and by handle appears once."""
        jane = await user_repo.save(make_user("jane"))
        john = await user_repo.save(make_user("John"))

        result = await service.find_by_identifiers(
            [str(jane.id), "JANE", "john", "nobody"]
        )

        assert [user.id for user in result] == [jane.id, john.id]

    @pytest.mark.asyncio
    async def test_misses_only(self, service, user_repo):
        await user_repo.save(make_user("jane"))

        assert await service.find_by_identifiers(["nobody", str(uuid4())]) == []


class TestGetActiveStatuses:
    """Tests for UserService.get_active_statuses()."""

    @pytest.mark.asyncio
    async def test_returns_status_per_known_user(self, service, user_repo):
        active = await user_repo.save(make_user("active"))
        inactive = await user_repo.save(make_user("inactive", active=False))

        statuses = await service.get_active_statuses(
            [str(active.id), str(inactive.id), str(uuid4()), "fake.id"]
        )

        assert {(status.id, status.active) for status in statuses} == {
            (active.id, True),
            (inactive.id, False),
        }
