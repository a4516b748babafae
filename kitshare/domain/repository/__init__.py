"""Repository interfaces for the KitShare domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from kitshare.domain.repository.comment import CommentRepository
from kitshare.domain.repository.post import PostRepository, PostSortOrder
from kitshare.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "PostSortOrder",
    "CommentRepository",
]
