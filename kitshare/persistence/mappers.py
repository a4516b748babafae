"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from kitshare.domain.model import AddOns, Comment, DrumKit, Post, User
from kitshare.domain.value import CommentId, PostId, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        drummer_name=row["drummer_name"],
        album=row["album"],
        drum_kit=DrumKit(**(row.get("drum_kit") or {})),
        add_ons=AddOns(**(row.get("add_ons") or {})),
        creator_id=UserId(_uuid(row["creator_id"])),
        likes=tuple(UserId(_uuid(uid)) for uid in row.get("likes") or ()),
        dislikes=tuple(UserId(_uuid(uid)) for uid in row.get("dislikes") or ()),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Descriptors are stored as JSON objects keyed by slot name.
    """
    return {
        "id": post.id,
        "drummer_name": post.drummer_name,
        "album": post.album,
        "drum_kit": post.drum_kit.model_dump(),
        "add_ons": post.add_ons.model_dump(),
        "creator_id": post.creator_id,
        "likes": list(post.likes),
        "dislikes": list(post.dislikes),
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        creator_id=UserId(_uuid(row["creator_id"])),
        title=row["title"],
        text=row["text"],
        edited=row["edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
