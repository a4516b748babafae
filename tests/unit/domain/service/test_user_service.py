"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from kitshare.config import Settings
from kitshare.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from kitshare.domain.service import UserService
from kitshare.domain.value import UserId
from kitshare.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class _StaleLookupUserRepository(InMemoryUserRepository):
    """Never finds a username, like a read racing another signup."""

    async def find_by_username(self, username):
        return None


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_normalizes_username_and_hashes_password(self, unit_env):
        user_service = await unit_env.get(UserService)

        user = await user_service.register("  Sheila_E ", "congas")

        assert user.username.root == "sheila_e"
        assert user.password_hash != "congas"
        assert user.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_usernames_are_unique_ignoring_case(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("karen", "carpenter")

        with pytest.raises(ConflictError, match="Username already exists"):
            await user_service.register("KAREN", "other")

    @pytest.mark.asyncio
    async def test_conflict_from_repository_propagates(self):
        """Two signups can both pass the lookup before either is saved."""
        repo = _StaleLookupUserRepository()
        user_service = UserService(repo, Settings().auth)
        await user_service.register("ringo", "starr")

        with pytest.raises(ConflictError, match="Username already exists"):
            await user_service.register("ringo", "other")

        assert len(repo._users) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username,password", [("", "pw"), ("bob", ""), (None, None)])
    async def test_register_requires_username_and_password(
        self, unit_env, username, password
    ):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="Username and password are required"):
            await user_service.register(username, password)


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        registered = await user_service.register("tony", "allen")

        user = await user_service.authenticate("Tony", "allen")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_user_fail_alike(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("tony", "allen")

        with pytest.raises(AuthenticationError) as wrong_password:
            await user_service.authenticate("tony", "williams")
        with pytest.raises(AuthenticationError) as unknown_user:
            await user_service.authenticate("elvin", "jones")

        assert str(wrong_password.value) == str(unknown_user.value)


class TestLookup:
    """Tests for get_by_id and get_usernames."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_usernames_skips_unknown_ids(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register("clyde", "stubblefield")
        ghost = UserId(uuid4())

        usernames = await user_service.get_usernames([user.id, ghost])

        assert usernames == {user.id: "clyde"}
