"""Test configuration and fixtures."""

import pytest

from forum.config import Settings
from forum.domain.service import JWTService
from forum.persistence.repository.inmemory import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(Settings().auth)


@pytest.fixture
def auth_header(jwt_service):
    """Build an Authorization header for a user ID."""

    def _auth_header(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {jwt_service.create_token(user_id)}"}

    return _auth_header
