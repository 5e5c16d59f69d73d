"""Unit tests for AddThreadUseCase."""

import pytest

from forum.application.usecase.thread import AddThreadRequest, AddThreadUseCase
from forum.domain.error import DataTypeMismatchError, MissingPropertyError
from forum.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryThreadRepository,
)
from tests.seed import fixed_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddThreadUseCase:
    """Tests for AddThreadUseCase."""

    @pytest.mark.asyncio
    async def test_add_thread_returns_added_thread(self, store):
        # Arrange
        use_case = AddThreadUseCase(
            thread_repository=InMemoryThreadRepository(store, fixed_id)
        )
        request = AddThreadRequest(
            payload={"title": "sebuah thread", "body": "sebuah body thread"},
            owner="user-123",
        )

        # Act
        added_thread = await use_case.execute(request)

        # Assert
        assert added_thread.id == "thread-123"
        assert added_thread.title == "sebuah thread"
        assert added_thread.owner == "user-123"
        assert store.threads["thread-123"].body == "sebuah body thread"

    @pytest.mark.asyncio
    async def test_add_thread_via_container(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddThreadUseCase)
        store = await unit_env.get(InMemoryStore)

        # Act
        added_thread = await use_case.execute(
            AddThreadRequest(payload={"title": "t", "body": "b"}, owner="user-1")
        )

        # Assert
        assert added_thread.id.startswith("thread-")
        assert added_thread.id in store.threads

    @pytest.mark.asyncio
    async def test_invalid_payload_stores_nothing(self, store):
        # Arrange
        use_case = AddThreadUseCase(
            thread_repository=InMemoryThreadRepository(store, fixed_id)
        )

        # Act & Assert
        with pytest.raises(MissingPropertyError):
            await use_case.execute(
                AddThreadRequest(payload={"title": "t"}, owner="user-123")
            )
        with pytest.raises(DataTypeMismatchError):
            await use_case.execute(
                AddThreadRequest(payload={"title": 1, "body": "b"}, owner="user-123")
            )

        assert store.threads == {}
