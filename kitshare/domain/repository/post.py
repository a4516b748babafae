"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from kitshare.domain.model.post import Post
from kitshare.domain.value import PostId, UserId


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    POPULAR = "popular"  # like count DESC, created_at DESC, id
    RECENT = "recent"  # created_at DESC, id


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            for_update: Lock the row until the current transaction ends, so a
                read-modify-write of the vote sets cannot lose updates

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, sort: PostSortOrder = PostSortOrder.POPULAR) -> List[Post]:
        """Find all posts.

        Args:
            sort: Sort order (popular or recent)

        Returns:
            List of posts in the requested order
        """
        pass

    @abstractmethod
    async def find_by_creator(self, creator_id: UserId) -> List[Post]:
        """Find posts created by a user, newest first.

        Args:
            creator_id: The creator's user ID

        Returns:
            List of the user's posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post permanently.

        Args:
            post_id: The post ID to delete
        """
        pass
