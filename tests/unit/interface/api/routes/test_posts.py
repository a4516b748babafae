"""Unit tests for post routes."""

from uuid import uuid4

import pytest

from kitshare.config import Settings
from kitshare.util.jwt import create_token
from tests.harness import create_post, signup


class TestAuthentication:
    """Every post route needs a valid bearer token."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/posts"),
            ("GET", "/posts/user"),
            ("POST", "/posts"),
            ("PUT", f"/posts/{uuid4()}/like"),
            ("DELETE", f"/posts/{uuid4()}"),
        ],
    )
    def test_missing_token_is_unauthorized(self, client, method, path):
        response = client.request(method, path, json={})

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    @pytest.mark.parametrize(
        "method,path",
        [("GET", "/posts"), ("PUT", f"/posts/{uuid4()}/like")],
    )
    def test_token_with_non_uuid_user_id_is_unauthorized(self, client, method, path):
        token = create_token("not-a-uuid", "ghost", Settings().auth)

        response = client.request(
            method, path, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token payload"
        assert response.headers["WWW-Authenticate"] == "Bearer"


class TestCreateAndRead:
    """Tests for creating, listing and fetching posts."""

    def test_create_post_with_partial_kit(self, client):
        """Scenario: a post with only some slots filled."""
        user = signup(client, "alice")

        post = create_post(
            client,
            user,
            drumKit={"kickDrum": "22in Tama", "rackTom1": "12in Tama"},
            addOns={"hiHats": "14in Zildjian"},
        )

        assert post["creatorId"] == user["id"]
        assert post["creatorUsername"] == "alice"
        assert post["drumKit"]["kickDrum"] == "22in Tama"
        assert post["drumKit"]["rackTom1"] == "12in Tama"
        assert post["drumKit"]["snare"] is None
        assert post["addOns"]["hiHats"] == "14in Zildjian"
        assert post["likes"] == [] and post["dislikes"] == []

    def test_post_without_descriptors_has_empty_slots(self, client):
        user = signup(client, "alice")
        post = create_post(
            client, user, drummerName="Neil Peart", album="Moving Pictures"
        )

        response = client.get(f"/posts/{post['id']}", headers=user["headers"])

        assert response.status_code == 200
        fetched = response.json()["post"]
        assert fetched["drummerName"] == "Neil Peart"
        assert all(value is None for value in fetched["drumKit"].values())
        assert all(value is None for value in fetched["addOns"].values())

    def test_create_post_without_album_is_bad_request(self, client):
        user = signup(client, "alice")

        response = client.post(
            "/posts", json={"drummerName": "Bonham"}, headers=user["headers"]
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Drummer name and album are required"

    def test_feed_orders_by_likes(self, client):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        first = create_post(client, alice, drummerName="Bonham")
        second = create_post(client, alice, drummerName="Moon")

        client.put(f"/posts/{first['id']}/like", headers=bob["headers"])
        response = client.get("/posts", headers=bob["headers"])

        ids = [p["id"] for p in response.json()["posts"]]
        assert ids == [first["id"], second["id"]]

    def test_user_posts_only_lists_callers_posts(self, client):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        mine = create_post(client, alice)
        create_post(client, bob)

        response = client.get("/posts/user", headers=alice["headers"])

        assert [p["id"] for p in response.json()["posts"]] == [mine["id"]]

    def test_unknown_drum_kit_slot_is_bad_request(self, client):
        user = signup(client, "alice")

        response = client.post(
            "/posts",
            json={
                "drummerName": "Bonham",
                "album": "IV",
                "drumKit": {"bassDrum": "26in Ludwig"},
            },
            headers=user["headers"],
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid DrumKit slots")
        feed = client.get("/posts", headers=user["headers"]).json()
        assert feed["posts"] == []

    @pytest.mark.parametrize("post_id", [str(uuid4()), "not-a-uuid"])
    def test_unknown_post_is_not_found(self, client, post_id):
        user = signup(client, "alice")

        response = client.get(f"/posts/{post_id}", headers=user["headers"])

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"


class TestUpdateAndDelete:
    """Tests for PUT and DELETE /posts/{id}."""

    def test_owner_updates_one_slot(self, client):
        user = signup(client, "alice")
        post = create_post(client, user, drumKit={"snare": "Ludwig", "kickDrum": "DW"})

        response = client.put(
            f"/posts/{post['id']}",
            json={"drumKit": {"snare": "Pearl"}},
            headers=user["headers"],
        )

        assert response.status_code == 200
        kit = response.json()["post"]["drumKit"]
        assert kit["snare"] == "Pearl"
        assert kit["kickDrum"] == "DW"

    def test_unknown_add_on_slot_is_bad_request_and_post_unchanged(self, client):
        """A misspelt slot must not look like a successful merge."""
        user = signup(client, "alice")
        post = create_post(client, user, addOns={"hiHats": "14in Zildjian"})

        response = client.put(
            f"/posts/{post['id']}",
            json={"addOns": {"cowbell": "LP"}},
            headers=user["headers"],
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid AddOns slots")
        stored = client.get(f"/posts/{post['id']}", headers=user["headers"]).json()
        assert stored["post"]["addOns"] == post["addOns"]

    def test_non_owner_update_is_forbidden_and_post_unchanged(self, client):
        """Scenario: Bob tries to edit Alice's post."""
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        post = create_post(client, alice)

        response = client.put(
            f"/posts/{post['id']}", json={"album": "Hijacked"}, headers=bob["headers"]
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "You are not authorized to update this post"
        stored = client.get(f"/posts/{post['id']}", headers=alice["headers"]).json()
        assert stored["post"]["album"] == post["album"]

    def test_non_owner_delete_is_forbidden(self, client):
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        post = create_post(client, alice)

        response = client.delete(f"/posts/{post['id']}", headers=bob["headers"])

        assert response.status_code == 403
        assert response.json()["detail"] == "You are not authorized to delete this post"

    def test_delete_removes_post_and_comments(self, client):
        """Scenario: deleting a post takes its comments with it."""
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        post = create_post(client, alice)
        client.post(
            f"/comments/post/{post['id']}",
            json={"title": "Nice", "text": "Great kit"},
            headers=bob["headers"],
        )

        response = client.delete(f"/posts/{post['id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (
            client.get(f"/posts/{post['id']}", headers=alice["headers"]).status_code
            == 404
        )
        comments = client.get(
            f"/comments/post/{post['id']}", headers=alice["headers"]
        ).json()
        assert comments["comments"] == []


class TestVoting:
    """Tests for PUT /posts/{id}/like and /dislike."""

    def test_like_switch_and_remove(self, client):
        """Scenario: like, then dislike, then dislike again."""
        alice = signup(client, "alice")
        bob = signup(client, "bob")
        post = create_post(client, alice)
        url = f"/posts/{post['id']}"

        liked = client.put(f"{url}/like", headers=bob["headers"]).json()
        assert liked["post"]["likes"] == [bob["id"]]
        assert liked["message"] == "Post liked"

        disliked = client.put(f"{url}/dislike", headers=bob["headers"]).json()
        assert disliked["post"]["likes"] == []
        assert disliked["post"]["dislikes"] == [bob["id"]]
        assert disliked["message"] == "Post disliked"

        cleared = client.put(f"{url}/dislike", headers=bob["headers"]).json()
        assert cleared["post"]["dislikes"] == []
        assert cleared["message"] == "Dislike removed"

    def test_vote_on_missing_post_is_not_found(self, client):
        user = signup(client, "alice")

        response = client.put(f"/posts/{uuid4()}/like", headers=user["headers"])

        assert response.status_code == 404
