"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from kitshare.domain.model.user import User
from kitshare.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username.

        Args:
            username: The normalized username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> Dict[UserId, User]:
        """Find several users at once.

        Args:
            user_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Mapping of user ID to user for every ID that exists
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If another user already has this username
        """
        pass
