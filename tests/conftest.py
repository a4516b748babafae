"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

# Cheap hashing and a fixed secret for every container built in tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")

logfire.configure(send_to_logfire=False, console=False)

from kitshare.domain.model import AddOns, Comment, DrumKit, Post  # noqa: E402
from kitshare.domain.value import CommentId, PostId, UserId  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_post(
    creator_id: UserId,
    drummer_name: str = "Stewart Copeland",
    album: str = "Synchronicity",
    minutes_ago: int = 0,
    **fields,
) -> Post:
    """Build a post for seeding repositories directly.

    Args:
        creator_id: Owner of the post
        drummer_name: Drummer the kit belongs to
        album: Album the kit was used on
        minutes_ago: Age relative to BASE_TIME, for ordering tests
        **fields: Any other Post field to override
    """
    created_at = BASE_TIME - timedelta(minutes=minutes_ago)
    values = {
        "id": PostId(uuid4()),
        "drummer_name": drummer_name,
        "album": album,
        "drum_kit": DrumKit(),
        "add_ons": AddOns(),
        "creator_id": creator_id,
        "created_at": created_at,
        "updated_at": created_at,
    }
    values.update(fields)
    return Post(**values)


def make_comment(
    post_id: PostId,
    creator_id: UserId,
    title: str = "Great snare",
    text: str = "That Tama snare sound is unmistakable.",
    **fields,
) -> Comment:
    """Build a comment for seeding repositories directly."""
    values = {
        "id": CommentId(uuid4()),
        "post_id": post_id,
        "creator_id": creator_id,
        "title": title,
        "text": text,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    values.update(fields)
    return Comment(**values)
