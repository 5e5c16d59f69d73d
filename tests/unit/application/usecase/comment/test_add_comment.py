"""Unit tests for AddCommentUseCase."""

import pytest

from forum.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from forum.domain.error import MissingPropertyError, NotFoundError
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
)
from tests.seed import fixed_id, seed_thread


def make_use_case(store):
    return AddCommentUseCase(
        thread_repository=InMemoryThreadRepository(store, fixed_id),
        comment_repository=InMemoryCommentRepository(store, fixed_id),
    )


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_returns_added_comment(self, store):
        # Arrange
        seed_thread(store)
        use_case = make_use_case(store)

        # Act
        added_comment = await use_case.execute(
            AddCommentRequest(
                thread_id="thread-123",
                payload={"content": "sebuah comment"},
                owner="user-456",
            )
        )

        # Assert
        assert added_comment.id == "comment-123"
        assert added_comment.content == "sebuah comment"
        assert added_comment.owner == "user-456"
        stored = store.comments["comment-123"]
        assert stored.thread_id == "thread-123"
        assert stored.is_delete is False

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, store):
        # Arrange
        use_case = make_use_case(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                AddCommentRequest(
                    thread_id="thread-404", payload={"content": "c"}, owner="user-1"
                )
            )

        assert exc_info.value.message == "thread tidak ditemukan"
        assert store.comments == {}

    @pytest.mark.asyncio
    async def test_payload_is_validated_before_thread_lookup(self, store):
        # Arrange
        use_case = make_use_case(store)

        # Act & Assert
        with pytest.raises(MissingPropertyError):
            await use_case.execute(
                AddCommentRequest(thread_id="thread-404", payload={}, owner="user-1")
            )
