"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from kitshare.domain.model.common import DomainModel, utcnow
from kitshare.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    The password hash never leaves the domain and persistence layers.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=utcnow)
