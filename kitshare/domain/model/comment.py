"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from kitshare.domain.model.common import DomainModel, utcnow
from kitshare.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post.

    ``edited`` starts false and becomes true on the first successful edit.
    It is never reset.
    """

    id: CommentId
    post_id: PostId
    creator_id: UserId
    title: str = Field(min_length=1)
    text: str = Field(min_length=1)
    edited: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def edit(
        self, title: Optional[str] = None, text: Optional[str] = None
    ) -> "Comment":
        """Return an edited copy.

        Fields left as ``None`` keep their current value. The result is
        always marked as edited, even when nothing changed.
        """
        update: dict = {"edited": True, "updated_at": utcnow()}
        if title is not None:
            update["title"] = title
        if text is not None:
            update["text"] = text
        return self.model_copy(update=update)
