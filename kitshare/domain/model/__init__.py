"""Domain model entities for KitShare."""

from kitshare.domain.model.comment import Comment
from kitshare.domain.model.post import AddOns, DrumKit, Post
from kitshare.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "DrumKit",
    "AddOns",
    "Comment",
]
