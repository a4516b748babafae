"""Async HTTP client for the KitShare API."""

from typing import Any

import httpx
import logfire

from kitshare.application.usecase.auth import AuthResponse
from kitshare.application.usecase.post import VotePostResponse
from kitshare.application.usecase.view import (
    AddOnsSlots,
    CommentView,
    DrumKitSlots,
    PostView,
    UserView,
)
from kitshare.domain.value import VoteAction


class ApiError(Exception):
    """Request rejected by the server or not delivered at all.

    Attributes:
        status_code: HTTP status, or None if no response was received
        detail: Error message from the server, or the transport error
    """

    def __init__(self, status_code: int | None, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}" if status_code else detail)


def _slots(slots: dict[str, str | None] | None, model: type) -> dict | None:
    # Only send the slots the caller named, so the server merges the rest
    if slots is None:
        return None
    return model(**slots).model_dump(by_alias=True, exclude_unset=True)


class KitShareClient:
    """Thin async wrapper over the REST API.

    Responses are parsed into the same view models the server renders.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``http://localhost:8000``
            token: Bearer token from a previous login
            transport: Custom transport (tests use ``httpx.MockTransport``)
            timeout: Request timeout in seconds
        """
        self.token = token
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout
        )

    async def __aenter__(self) -> "KitShareClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = await self._http.request(
                method, path, json=json, headers=headers
            )
        except httpx.HTTPError as e:
            logfire.error(
                "KitShare request failed", method=method, path=path, error=str(e)
            )
            raise ApiError(None, str(e)) from e

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            logfire.warn(
                "KitShare request rejected",
                method=method,
                path=path,
                status_code=response.status_code,
                detail=str(detail),
            )
            raise ApiError(response.status_code, str(detail))

        return response.json()

    # Auth

    async def signup(self, username: str, password: str) -> AuthResponse:
        """Create an account and keep its token for later requests."""
        data = await self._request(
            "POST", "/auth/signup", {"username": username, "password": password}
        )
        auth = AuthResponse.model_validate(data)
        self.token = auth.token
        return auth

    async def login(self, username: str, password: str) -> AuthResponse:
        """Log in and keep the token for later requests."""
        data = await self._request(
            "POST", "/auth/login", {"username": username, "password": password}
        )
        auth = AuthResponse.model_validate(data)
        self.token = auth.token
        return auth

    async def me(self) -> UserView:
        data = await self._request("GET", "/auth/me")
        return UserView.model_validate(data["user"])

    # Posts

    async def list_posts(self) -> list[PostView]:
        data = await self._request("GET", "/posts")
        return [PostView.model_validate(p) for p in data["posts"]]

    async def list_my_posts(self) -> list[PostView]:
        data = await self._request("GET", "/posts/user")
        return [PostView.model_validate(p) for p in data["posts"]]

    async def get_post(self, post_id: str) -> PostView:
        data = await self._request("GET", f"/posts/{post_id}")
        return PostView.model_validate(data["post"])

    async def create_post(
        self,
        drummer_name: str,
        album: str,
        drum_kit: dict[str, str | None] | None = None,
        add_ons: dict[str, str | None] | None = None,
    ) -> PostView:
        body: dict[str, Any] = {"drummerName": drummer_name, "album": album}
        if drum_kit is not None:
            body["drumKit"] = _slots(drum_kit, DrumKitSlots)
        if add_ons is not None:
            body["addOns"] = _slots(add_ons, AddOnsSlots)
        data = await self._request("POST", "/posts", body)
        return PostView.model_validate(data["post"])

    async def update_post(
        self,
        post_id: str,
        drummer_name: str | None = None,
        album: str | None = None,
        drum_kit: dict[str, str | None] | None = None,
        add_ons: dict[str, str | None] | None = None,
    ) -> PostView:
        """Send a partial update; ``None`` arguments are left out of the body."""
        body: dict[str, Any] = {}
        if drummer_name is not None:
            body["drummerName"] = drummer_name
        if album is not None:
            body["album"] = album
        if drum_kit is not None:
            body["drumKit"] = _slots(drum_kit, DrumKitSlots)
        if add_ons is not None:
            body["addOns"] = _slots(add_ons, AddOnsSlots)
        data = await self._request("PUT", f"/posts/{post_id}", body)
        return PostView.model_validate(data["post"])

    async def delete_post(self, post_id: str) -> None:
        await self._request("DELETE", f"/posts/{post_id}")

    async def vote(self, post_id: str, action: VoteAction) -> VotePostResponse:
        data = await self._request("PUT", f"/posts/{post_id}/{action.value}")
        return VotePostResponse.model_validate(data)

    # Comments

    async def list_comments(self, post_id: str) -> list[CommentView]:
        data = await self._request("GET", f"/comments/post/{post_id}")
        return [CommentView.model_validate(c) for c in data["comments"]]

    async def create_comment(self, post_id: str, title: str, text: str) -> CommentView:
        data = await self._request(
            "POST", f"/comments/post/{post_id}", {"title": title, "text": text}
        )
        return CommentView.model_validate(data["comment"])

    async def update_comment(
        self, comment_id: str, title: str | None = None, text: str | None = None
    ) -> CommentView:
        body = {k: v for k, v in (("title", title), ("text", text)) if v is not None}
        data = await self._request("PUT", f"/comments/{comment_id}", body)
        return CommentView.model_validate(data["comment"])

    async def delete_comment(self, comment_id: str) -> None:
        await self._request("DELETE", f"/comments/{comment_id}")
