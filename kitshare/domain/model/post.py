"""Post aggregate root.

A post describes the equipment a drummer used on an album: a drum kit and a
set of add-ons, each made of optional named slots. Any authenticated user may
like or dislike a post; only its creator may edit or delete it.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from kitshare.domain.model.common import DomainModel, utcnow
from kitshare.domain.value import PostId, UserId
from kitshare.domain.value.common import ValueObject


def _unique(ids: Iterable[UserId]) -> tuple[UserId, ...]:
    """Drop repeated ids while keeping first-seen order."""
    return tuple(dict.fromkeys(ids))


class _Descriptor(ValueObject):
    """Set of optional equipment slots.

    Blank slot values are stored as ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def merge(self, slots: Mapping[str, Optional[str]]):
        """Return a copy with the given slots replaced.

        Slots missing from ``slots`` keep their current value.

        Raises:
            pydantic.ValidationError: If ``slots`` names an unknown slot
        """
        return type(self).model_validate({**self.model_dump(), **slots})

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class DrumKit(_Descriptor):
    """Shells of the kit."""

    kick_drum: Optional[str] = None
    snare: Optional[str] = None
    rack_tom_1: Optional[str] = None
    rack_tom_2: Optional[str] = None
    floor_tom: Optional[str] = None


class AddOns(_Descriptor):
    """Cymbals, hardware and effects."""

    hi_hats: Optional[str] = None
    ride_cymbal: Optional[str] = None
    crash_cymbal: Optional[str] = None
    hardware: Optional[str] = None
    effects: Optional[str] = None


class Post(DomainModel):
    """Post aggregate root.

    ``likes`` and ``dislikes`` are ordered sets: an id appears at most once in
    each. Keeping them disjoint is the job of the vote engine.
    """

    id: PostId
    drummer_name: str = Field(min_length=1)
    album: str = Field(min_length=1)
    drum_kit: DrumKit = Field(default_factory=DrumKit)
    add_ons: AddOns = Field(default_factory=AddOns)
    creator_id: UserId
    likes: tuple[UserId, ...] = ()
    dislikes: tuple[UserId, ...] = ()
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("likes", "dislikes")
    @classmethod
    def deduplicate(cls, v: tuple[UserId, ...]) -> tuple[UserId, ...]:
        return _unique(v)

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def dislike_count(self) -> int:
        return len(self.dislikes)
