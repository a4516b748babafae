"""PostgreSQL repository implementations."""

from kitshare.persistence.repository.comment import PostgresCommentRepository
from kitshare.persistence.repository.post import PostgresPostRepository
from kitshare.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
