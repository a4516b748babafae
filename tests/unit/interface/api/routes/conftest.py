"""Fixtures for API route tests."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_test_app


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    with TestClient(create_test_app()) as test_client:
        yield test_client
