"""Unit tests for AddReplyUseCase."""

import pytest

from forum.application.usecase.reply import AddReplyRequest, AddReplyUseCase
from forum.domain.error import DataTypeMismatchError, NotFoundError
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
)
from tests.seed import fixed_id, seed_comment, seed_thread


def make_use_case(store):
    return AddReplyUseCase(
        thread_repository=InMemoryThreadRepository(store, fixed_id),
        comment_repository=InMemoryCommentRepository(store, fixed_id),
        reply_repository=InMemoryReplyRepository(store, fixed_id),
    )


class TestAddReplyUseCase:
    """Tests for AddReplyUseCase."""

    @pytest.mark.asyncio
    async def test_add_reply_returns_added_reply(self, store):
        # Arrange
        seed_thread(store)
        seed_comment(store)
        use_case = make_use_case(store)

        # Act
        added_reply = await use_case.execute(
            AddReplyRequest(
                thread_id="thread-123",
                comment_id="comment-123",
                payload={"content": "sebuah balasan"},
                owner="user-456",
            )
        )

        # Assert
        assert added_reply.id == "reply-123"
        assert added_reply.content == "sebuah balasan"
        assert added_reply.owner == "user-456"
        stored = store.replies["reply-123"]
        assert stored.thread_id == "thread-123"
        assert stored.comment_id == "comment-123"

    @pytest.mark.asyncio
    async def test_reply_to_deleted_comment_is_allowed(self, store):
        # Arrange
        seed_thread(store)
        seed_comment(store, is_delete=True)
        use_case = make_use_case(store)

        # Act
        added_reply = await use_case.execute(
            AddReplyRequest(
                thread_id="thread-123",
                comment_id="comment-123",
                payload={"content": "tetap membalas"},
                owner="user-456",
            )
        )

        # Assert
        assert added_reply.id in store.replies

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, store):
        # Arrange
        seed_thread(store)
        use_case = make_use_case(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                AddReplyRequest(
                    thread_id="thread-123",
                    comment_id="comment-404",
                    payload={"content": "c"},
                    owner="user-1",
                )
            )

        assert exc_info.value.message == "komentar tidak ditemukan"

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, store):
        # Arrange
        use_case = make_use_case(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                AddReplyRequest(
                    thread_id="thread-404",
                    comment_id="comment-123",
                    payload={"content": "c"},
                    owner="user-1",
                )
            )

        assert exc_info.value.resource == "thread"

    @pytest.mark.asyncio
    async def test_non_string_content_raises(self, store):
        # Arrange
        seed_thread(store)
        seed_comment(store)
        use_case = make_use_case(store)

        # Act & Assert
        with pytest.raises(DataTypeMismatchError):
            await use_case.execute(
                AddReplyRequest(
                    thread_id="thread-123",
                    comment_id="comment-123",
                    payload={"content": 42},
                    owner="user-1",
                )
            )
