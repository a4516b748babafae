"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .ownership import authorize, ensure_owner, normalize_id
from .post_service import PostService
from .user_service import UserService
from .vote_engine import VoteResult, apply_vote, describe_vote

__all__ = [
    "CommentService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
    "VoteResult",
    "apply_vote",
    "authorize",
    "describe_vote",
    "ensure_owner",
    "normalize_id",
]
