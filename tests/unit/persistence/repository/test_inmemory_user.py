"""Unit tests for the in-memory user repository."""

from uuid import uuid4

import pytest

from kitshare.domain.error import ConflictError
from kitshare.domain.model import User
from kitshare.domain.value import UserId, Username
from kitshare.persistence.repository.inmemory import InMemoryUserRepository


def _user(username: str) -> User:
    return User(
        id=UserId(uuid4()), username=Username(username), password_hash="hash"
    )


class TestSave:
    """Tests for save."""

    @pytest.mark.asyncio
    async def test_duplicate_username_raises_conflict(self):
        repo = InMemoryUserRepository()
        first = await repo.save(_user("tony"))

        with pytest.raises(ConflictError, match="Username already exists"):
            await repo.save(_user("Tony"))

        assert await repo.find_by_username(Username("tony")) == first

    @pytest.mark.asyncio
    async def test_resaving_same_user_is_allowed(self):
        repo = InMemoryUserRepository()
        user = await repo.save(_user("tony"))

        await repo.save(user.model_copy(update={"password_hash": "rehashed"}))

        loaded = await repo.find_by_id(user.id)
        assert loaded.password_hash == "rehashed"
