"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    # Entering the client runs the lifespan, so every test gets its own router
    with TestClient(app) as test_client:
        yield test_client
