"""Test harness for unit and integration tests.

Integration tests assume PostgreSQL is running and migrated
(``python scripts/run_migrations.py``). Settings are loaded from environment
variables (configure via .env or export).
"""

import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient

from kitshare.interface.api.app import create_app
from kitshare.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create_post(...)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_test_app(unmock: set[Component] | None = None) -> FastAPI:
    """Create the API wired to a fresh test container."""
    return create_app(build_test_container(unmock=unmock or set()))


def signup(client: TestClient, username: str, password: str = "groove") -> dict:
    """Create an account through the API and return its id and auth headers."""
    response = client.post(
        "/auth/signup", json={"username": username, "password": password}
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return {
        "id": data["user"]["id"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
    }


def create_post(client: TestClient, user: dict, **body) -> dict:
    """Create a post through the API as ``user`` and return it."""
    payload = {"drummerName": "Stewart Copeland", "album": "Synchronicity", **body}
    response = client.post("/posts", json=payload, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["post"]
