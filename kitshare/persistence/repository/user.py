"""PostgreSQL implementation of User repository."""

from typing import Dict, Iterable, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from kitshare.domain.error import ConflictError
from kitshare.domain.model import User
from kitshare.domain.repository.user import UserRepository
from kitshare.domain.value import UserId, Username
from kitshare.persistence.mappers import row_to_user, user_to_dict
from kitshare.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by normalized username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> Dict[UserId, User]:
        """Find several users in one query."""
        ids = list(user_ids)
        if not ids:
            return {}

        with logfire.span("user_repository.find_by_ids", count=len(ids)):
            stmt = select(users_table).where(users_table.c.id.in_(ids))
            result = await self.session.execute(stmt)
            users = [row_to_user(row._asdict()) for row in result.fetchall()]
            return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If another user already has this username
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            existing = await self.find_by_id(user.id)
            user_dict = user_to_dict(user)

            if existing:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(
                        username=user_dict["username"],
                        password_hash=user_dict["password_hash"],
                    )
                )
            else:
                stmt = users_table.insert().values(**user_dict)

            try:
                await self.session.execute(stmt)
                await self.session.flush()
            except IntegrityError:
                # users_username_key is the only constraint a save can violate
                logfire.warn("Username already exists", username=user_dict["username"])
                raise ConflictError("Username already exists")
            return user
