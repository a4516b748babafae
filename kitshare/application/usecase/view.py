"""Response views for users, posts and comments."""

from collections.abc import Mapping
from datetime import datetime

from pydantic import ConfigDict

from kitshare.domain.model import Comment, Post, User
from kitshare.domain.value import UserId

from .common import ApiModel


class UserView(ApiModel):
    """Public view of a user. Never includes the password hash."""

    id: str
    username: str
    created_at: datetime


class DrumKitSlots(ApiModel):
    """Drum kit slots, used in both requests and responses.

    Unknown keys are kept in ``model_extra`` so the post service can reject
    them instead of dropping them silently.
    """

    model_config = ConfigDict(extra="allow")

    kick_drum: str | None = None
    snare: str | None = None
    rack_tom_1: str | None = None
    rack_tom_2: str | None = None
    floor_tom: str | None = None


class AddOnsSlots(ApiModel):
    """Add-on slots, used in both requests and responses."""

    model_config = ConfigDict(extra="allow")

    hi_hats: str | None = None
    ride_cymbal: str | None = None
    crash_cymbal: str | None = None
    hardware: str | None = None
    effects: str | None = None


class PostView(ApiModel):
    """A post with its creator's username resolved."""

    id: str
    drummer_name: str
    album: str
    drum_kit: DrumKitSlots
    add_ons: AddOnsSlots
    creator_id: str
    creator_username: str | None = None
    likes: list[str]
    dislikes: list[str]
    created_at: datetime
    updated_at: datetime


class CommentView(ApiModel):
    """A comment with its creator's username resolved."""

    id: str
    post_id: str
    creator_id: str
    creator_username: str | None = None
    title: str
    text: str
    edited: bool
    created_at: datetime
    updated_at: datetime


def user_view(user: User) -> UserView:
    return UserView(
        id=str(user.id), username=user.username.root, created_at=user.created_at
    )


def post_view(post: Post, usernames: Mapping[UserId, str]) -> PostView:
    """Build a post view.

    Args:
        post: Post to render
        usernames: Known usernames by user id; a missing creator renders as
            ``None``
    """
    return PostView(
        id=str(post.id),
        drummer_name=post.drummer_name,
        album=post.album,
        drum_kit=DrumKitSlots(**post.drum_kit.model_dump()),
        add_ons=AddOnsSlots(**post.add_ons.model_dump()),
        creator_id=str(post.creator_id),
        creator_username=usernames.get(post.creator_id),
        likes=[str(uid) for uid in post.likes],
        dislikes=[str(uid) for uid in post.dislikes],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def comment_view(comment: Comment, usernames: Mapping[UserId, str]) -> CommentView:
    """Build a comment view."""
    return CommentView(
        id=str(comment.id),
        post_id=str(comment.post_id),
        creator_id=str(comment.creator_id),
        creator_username=usernames.get(comment.creator_id),
        title=comment.title,
        text=comment.text,
        edited=comment.edited,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
