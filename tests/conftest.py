"""
Shared pytest fixtures for the Users API test suite.

Every test gets its own seeded ``UserStore``; the ``client`` fixture
serves that same store so HTTP tests can inspect it directly.
"""

import pytest
from fastapi.testclient import TestClient

from users_api.app.main import create_app
from users_api.app.services.user_service import UserStore


@pytest.fixture
def store() -> UserStore:
    """A freshly seeded store with users "1", "2" and "3"."""
    return UserStore()


@pytest.fixture
def client(store: UserStore):
    """HTTP client for an application serving ``store``."""
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
