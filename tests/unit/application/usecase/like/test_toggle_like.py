"""Unit tests for ToggleLikeUseCase."""

import pytest

from forum.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import LikeRepository
from forum.persistence.repository.inmemory import InMemoryStore
from tests.seed import seed_comment, seed_thread
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_count(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        seed_thread(store)
        seed_comment(store)
        use_case = await unit_env.get(ToggleLikeUseCase)
        like_repo = await unit_env.get(LikeRepository)
        request = ToggleLikeRequest(
            thread_id="thread-123", comment_id="comment-123", user_id="user-456"
        )

        # Act & Assert
        first = await use_case.execute(request)
        assert first.liked is True
        assert await like_repo.count_likes_by_comment_id("comment-123") == 1

        second = await use_case.execute(request)
        assert second.liked is False
        assert await like_repo.count_likes_by_comment_id("comment-123") == 0

    @pytest.mark.asyncio
    async def test_missing_thread_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                ToggleLikeRequest(
                    thread_id="thread-404",
                    comment_id="comment-123",
                    user_id="user-456",
                )
            )

        assert exc_info.value.resource == "thread"

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        # Arrange
        store = await unit_env.get(InMemoryStore)
        seed_thread(store)
        use_case = await unit_env.get(ToggleLikeUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                ToggleLikeRequest(
                    thread_id="thread-123",
                    comment_id="comment-404",
                    user_id="user-456",
                )
            )

        assert exc_info.value.resource == "comment"
        assert store.likes == {}
