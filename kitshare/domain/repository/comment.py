"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from kitshare.domain.model.comment import Comment
from kitshare.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entities."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, newest first.

        Args:
            post_id: The post's unique identifier

        Returns:
            List of comments on the post
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment permanently.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post whose comments should be removed

        Returns:
            Number of comments deleted
        """
        pass
