"""Domain value objects for KitShare."""

from enum import Enum

from pydantic import field_validator

from kitshare.domain.value.common import RootValueObject


class VoteAction(str, Enum):
    """Vote a user can cast on a post."""

    LIKE = "like"
    DISLIKE = "dislike"


class VoteOutcome(str, Enum):
    """Whether a vote added a membership or toggled an existing one off."""

    ADDED = "added"
    REMOVED = "removed"


class Authorization(str, Enum):
    """Result of an ownership check."""

    ALLOWED = "allowed"
    DENIED = "denied"


class Username(RootValueObject[str]):
    """Case-insensitive username.

    Stored trimmed and lowercased so lookups ignore case.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v
