"""Ownership checks for mutating posts and comments."""

from uuid import UUID

from kitshare.domain.error import NotAuthorizedError
from kitshare.domain.value import Authorization


def normalize_id(value: UUID | str) -> UUID:
    """Convert an id to its canonical UUID form.

    Token claims carry ids as strings while persisted records hold UUIDs;
    strings may be hyphenated or bare hex in either case.

    Raises:
        ValueError: If ``value`` is not a UUID
    """
    if isinstance(value, UUID):
        return value
    return UUID(str(value).strip())


def authorize(resource_owner_id: UUID | str, requester_id: UUID | str) -> Authorization:
    """Decide whether ``requester_id`` may modify a resource.

    Only the owner is allowed. An id that cannot be parsed never matches.
    """
    try:
        owner = normalize_id(resource_owner_id)
        requester = normalize_id(requester_id)
    except ValueError:
        return Authorization.DENIED

    return Authorization.ALLOWED if owner == requester else Authorization.DENIED


def ensure_owner(
    resource: str,
    resource_id: UUID | str,
    resource_owner_id: UUID | str,
    requester_id: UUID | str,
) -> None:
    """Raise unless ``requester_id`` owns the resource.

    Raises:
        NotAuthorizedError: If the requester is not the owner
    """
    if authorize(resource_owner_id, requester_id) is Authorization.DENIED:
        raise NotAuthorizedError(resource, str(resource_id), str(requester_id))
