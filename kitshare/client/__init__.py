"""Python client for the KitShare API."""

from .api import ApiError, KitShareClient
from .store import NotAuthenticatedError, PostStore

__all__ = ["ApiError", "KitShareClient", "NotAuthenticatedError", "PostStore"]
