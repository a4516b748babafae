"""Domain value objects for KitShare."""

from kitshare.domain.value.identifiers import CommentId, PostId, UserId
from kitshare.domain.value.types import (
    Authorization,
    Username,
    VoteAction,
    VoteOutcome,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Username",
    "VoteAction",
    "VoteOutcome",
    "Authorization",
]
