"""User domain service."""

from typing import Dict, Iterable
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from kitshare.config import AuthSettings
from kitshare.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from kitshare.domain.model import User
from kitshare.domain.model.common import utcnow
from kitshare.domain.repository import UserRepository
from kitshare.domain.value import UserId, Username
from kitshare.util.password import hash_password, verify_password

from .base import Service


def _parse_username(raw: str | None) -> Username:
    if not raw or not raw.strip():
        raise ValidationError("Username and password are required")
    try:
        return Username(raw)
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"])


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, username: str | None, password: str | None) -> User:
        """Create a new account.

        Args:
            username: Requested username; trimmed and lowercased
            password: Plain-text password, hashed before storage

        Returns:
            The new user

        Raises:
            ValidationError: If username or password is missing
            ConflictError: If the username is taken
        """
        name = _parse_username(username)
        if not password:
            raise ValidationError("Username and password are required")

        with logfire.span("user_service.register", username=name.root):
            if await self.user_repository.find_by_username(name) is not None:
                logfire.warn("Username already exists", username=name.root)
                raise ConflictError("Username already exists")

            user = User(
                id=UserId(uuid4()),
                username=name,
                password_hash=hash_password(
                    password, rounds=self.auth_settings.bcrypt_rounds
                ),
                created_at=utcnow(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=name.root)
            return saved

    async def authenticate(self, username: str | None, password: str | None) -> User:
        """Check credentials and return the matching user.

        Unknown usernames and wrong passwords fail the same way.

        Raises:
            ValidationError: If username or password is missing
            AuthenticationError: If the credentials do not match a user
        """
        name = _parse_username(username)
        if not password:
            raise ValidationError("Username and password are required")

        with logfire.span("user_service.authenticate", username=name.root):
            user = await self.user_repository.find_by_username(name)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Login failed", username=name.root)
                raise AuthenticationError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_usernames(self, user_ids: Iterable[UserId]) -> Dict[UserId, str]:
        """Resolve user IDs to usernames.

        IDs of users that no longer exist are left out.
        """
        users = await self.user_repository.find_by_ids(set(user_ids))
        return {user_id: user.username.root for user_id, user in users.items()}
