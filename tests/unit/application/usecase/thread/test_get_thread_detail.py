"""Unit tests for GetThreadDetailUseCase."""

import pytest

from forum.application.usecase.thread import (
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.error import NotFoundError
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryReplyRepository,
    InMemoryStore,
    InMemoryThreadRepository,
)
from tests.seed import at, fixed_id, seed_comment, seed_reply, seed_thread
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class CountingReplyRepository(InMemoryReplyRepository):
    """Reply repository that records how often replies are fetched."""

    def __init__(self, store):
        super().__init__(store, fixed_id)
        self.thread_fetches = 0
        self.comment_fetches = 0

    async def get_replies_by_thread_id(self, thread_id):
        self.thread_fetches += 1
        return await super().get_replies_by_thread_id(thread_id)

    async def get_replies_by_comment_id(self, comment_id):
        self.comment_fetches += 1
        return await super().get_replies_by_comment_id(comment_id)


def make_use_case(store: InMemoryStore, reply_repository=None):
    return GetThreadDetailUseCase(
        thread_repository=InMemoryThreadRepository(store, fixed_id),
        comment_repository=InMemoryCommentRepository(store, fixed_id),
        reply_repository=reply_repository or InMemoryReplyRepository(store, fixed_id),
        like_repository=InMemoryLikeRepository(store),
    )


class TestGetThreadDetailUseCase:
    """Tests for GetThreadDetailUseCase."""

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, store):
        # Arrange
        use_case = make_use_case(store)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetThreadDetailRequest(thread_id="thread-404"))

        assert exc_info.value.message == "thread tidak ditemukan"

    @pytest.mark.asyncio
    async def test_thread_without_comments(self, store):
        # Arrange
        seed_thread(store)
        use_case = make_use_case(store)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        assert detail.id == "thread-123"
        assert detail.title == "sebuah thread"
        assert detail.body == "sebuah body thread"
        assert detail.date == at(0)
        assert detail.owner == "user-123"
        assert detail.comments == []

    @pytest.mark.asyncio
    async def test_assembles_comments_replies_and_likes(self, store):
        # Arrange
        seed_thread(store)
        seed_comment(store, "comment-1", owner="user-a", minutes=1, content="satu")
        seed_comment(
            store,
            "comment-2",
            owner="user-b",
            minutes=2,
            content="dua",
            is_delete=True,
        )
        seed_reply(store, "reply-1", "comment-1", owner="user-b", minutes=3)
        seed_reply(
            store,
            "reply-2",
            "comment-2",
            owner="user-a",
            minutes=4,
            content="rahasia",
            is_delete=True,
        )
        seed_reply(store, "reply-3", "comment-1", owner="user-c", minutes=5)
        like_repo = InMemoryLikeRepository(store)
        await like_repo.add_like("comment-1", "user-a")
        await like_repo.add_like("comment-1", "user-b")
        use_case = make_use_case(store)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        first, second = detail.comments
        assert first.id == "comment-1"
        assert first.content == "satu"
        assert first.like_count == 2
        assert [r.id for r in first.replies] == ["reply-1", "reply-3"]

        assert second.id == "comment-2"
        assert second.content == "**komentar telah dihapus**"
        assert second.like_count == 0
        assert [r.id for r in second.replies] == ["reply-2"]
        assert second.replies[0].content == "**balasan telah dihapus**"
        assert second.replies[0].owner == "user-a"

    @pytest.mark.asyncio
    async def test_comments_follow_creation_order(self, store):
        # Arrange: inserted newest first
        seed_thread(store)
        seed_comment(store, "comment-late", minutes=10)
        seed_comment(store, "comment-early", minutes=1)
        use_case = make_use_case(store)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        assert [c.id for c in detail.comments] == ["comment-early", "comment-late"]

    @pytest.mark.asyncio
    async def test_replies_fetched_once_per_thread(self, store):
        # Arrange
        seed_thread(store)
        for i in range(3):
            seed_comment(store, f"comment-{i}", minutes=i + 1)
            seed_reply(store, f"reply-{i}", f"comment-{i}", minutes=i + 10)
        reply_repo = CountingReplyRepository(store)
        use_case = make_use_case(store, reply_repository=reply_repo)

        # Act
        await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        assert reply_repo.thread_fetches == 1
        assert reply_repo.comment_fetches == 0

    @pytest.mark.asyncio
    async def test_orphan_replies_are_dropped(self, store):
        # Arrange: a reply whose comment belongs to another thread
        seed_thread(store)
        seed_thread(store, "thread-other", minutes=0)
        seed_comment(store, "comment-1")
        seed_comment(store, "comment-x", thread_id="thread-other")
        seed_reply(store, "reply-1", "comment-1")
        seed_reply(store, "reply-stray", "comment-x", thread_id="thread-123")
        use_case = make_use_case(store)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        assert len(detail.comments) == 1
        assert [r.id for r in detail.comments[0].replies] == ["reply-1"]

    @pytest.mark.asyncio
    async def test_detail_via_container(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        seed_thread(store)
        seed_comment(store)
        use_case = await unit_env.get(GetThreadDetailUseCase)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        assert [c.id for c in detail.comments] == ["comment-123"]
