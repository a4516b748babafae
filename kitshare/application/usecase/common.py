"""Shared pieces for use case requests and responses."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from kitshare.domain.error import NotFoundError


class ApiModel(BaseModel):
    """Model exchanged with API clients.

    Fields are snake_case in Python and camelCase on the wire; both spellings
    are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_id(value: str, resource: str) -> UUID:
    """Parse an id taken from a URL.

    An id that is not a UUID cannot name an existing resource.

    Raises:
        NotFoundError: If ``value`` is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(resource, str(value))
