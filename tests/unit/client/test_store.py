"""Unit tests for the client-side post store."""

from uuid import uuid4

import httpx
import pytest

from kitshare.client import ApiError, KitShareClient, NotAuthenticatedError, PostStore
from tests.conftest import BASE_TIME
from tests.harness import create_test_app

ME = str(uuid4())
OTHER = str(uuid4())


def _post_json(post_id: str, creator_id: str = OTHER, **fields) -> dict:
    data = {
        "id": post_id,
        "drummerName": "Tony Williams",
        "album": "Emergency!",
        "drumKit": {},
        "addOns": {},
        "creatorId": creator_id,
        "creatorUsername": None,
        "likes": [],
        "dislikes": [],
        "createdAt": BASE_TIME.isoformat(),
        "updatedAt": BASE_TIME.isoformat(),
    }
    data.update(fields)
    return data


def _mock_store(handler, user_id: str | None = ME) -> PostStore:
    client = KitShareClient(
        "http://kitshare.test", token="token", transport=httpx.MockTransport(handler)
    )
    return PostStore(client, current_user_id=user_id)


class TestOptimisticVote:
    """Votes are applied locally before the server answers."""

    @pytest.mark.asyncio
    async def test_failed_vote_restores_the_post(self):
        """Scenario: the server rejects a like and the cache rolls back."""
        post_id = str(uuid4())
        seen_during_request = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(
                    200, json={"posts": [_post_json(post_id, dislikes=[ME])]}
                )
            seen_during_request.append(store.get(post_id))
            return httpx.Response(500, json={"detail": "Failed to like post"})

        store = _mock_store(handler)
        await store.load_all()
        before = store.get(post_id)

        with pytest.raises(ApiError) as exc_info:
            await store.toggle_like(post_id)

        assert exc_info.value.status_code == 500
        assert seen_during_request[0].likes == [ME]
        assert seen_during_request[0].dislikes == []
        assert store.get(post_id) == before

    @pytest.mark.asyncio
    async def test_network_failure_also_rolls_back(self):
        post_id = str(uuid4())

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, json={"posts": [_post_json(post_id)]})
            raise httpx.ConnectError("connection refused", request=request)

        store = _mock_store(handler)
        await store.load_all()

        with pytest.raises(ApiError) as exc_info:
            await store.toggle_dislike(post_id)

        assert exc_info.value.status_code is None
        assert store.get(post_id).dislikes == []

    @pytest.mark.asyncio
    async def test_server_answer_replaces_optimistic_post(self):
        """The server's vote sets win over the local guess."""
        post_id = str(uuid4())
        someone = str(uuid4())

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, json={"posts": [_post_json(post_id)]})
            assert request.url.path == f"/posts/{post_id}/like"
            return httpx.Response(
                200,
                json={
                    "post": _post_json(post_id, likes=[someone, ME]),
                    "message": "Post liked",
                },
            )

        store = _mock_store(handler)
        await store.load_all()

        response = await store.toggle_like(post_id)

        assert response.message == "Post liked"
        assert store.get(post_id).likes == [someone, ME]

    @pytest.mark.asyncio
    async def test_vote_without_user_is_refused_locally(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        store = _mock_store(handler, user_id=None)

        with pytest.raises(NotAuthenticatedError):
            await store.toggle_like(str(uuid4()))


class TestNonOptimisticMutations:
    """Create, update and delete wait for the server."""

    @pytest.mark.asyncio
    async def test_failed_delete_keeps_post(self):
        post_id = str(uuid4())

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(
                    200, json={"posts": [_post_json(post_id, creator_id=ME)]}
                )
            return httpx.Response(403, json={"detail": "Nope"})

        store = _mock_store(handler)
        await store.load_all()

        with pytest.raises(ApiError) as exc_info:
            await store.delete_post(post_id)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Nope"
        assert store.get(post_id) is not None

    @pytest.mark.asyncio
    async def test_failed_create_caches_nothing(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400, json={"detail": "Drummer name and album are required"}
            )

        store = _mock_store(handler)

        with pytest.raises(ApiError):
            await store.create_post("", "")

        assert store.posts == {}


class TestAgainstApi:
    """Store driven against the real API over an in-process transport."""

    @pytest.mark.asyncio
    async def test_post_lifecycle_is_reflected_in_both_views(self):
        transport = httpx.ASGITransport(app=create_test_app())
        async with KitShareClient("http://kitshare.test", transport=transport) as api:
            auth = await api.signup("Alice", "hihat")
            store = PostStore(api, current_user_id=auth.user.id)

            created = await store.create_post(
                "Bill Bruford",
                "Close to the Edge",
                drum_kit={"snare": "Ludwig Super Sensitive"},
            )
            assert store.my_posts == [created]
            assert store.all_posts == [created]

            await store.toggle_like(created.id)
            assert store.get(created.id).likes == [auth.user.id]
            assert store.my_posts[0].likes == [auth.user.id]

            updated = await store.update_post(created.id, drum_kit={"kick_drum": "22in"})
            assert updated.drum_kit.snare == "Ludwig Super Sensitive"
            assert updated.drum_kit.kick_drum == "22in"

            comment = await store.add_comment(created.id, "Tone", "Crisp")
            edited = await store.edit_comment(comment.id, text="Very crisp")
            assert store.comments_for(created.id) == [edited]
            assert edited.edited is True

            await store.delete_post(created.id)
            assert store.get(created.id) is None
            assert store.comments_for(created.id) == []
            assert await api.list_posts() == []

    @pytest.mark.asyncio
    async def test_current_user_id_is_normalized(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        user_id = uuid4()
        store = _mock_store(handler, user_id=user_id.hex.upper())

        assert store.current_user_id == str(user_id)
