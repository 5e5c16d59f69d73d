"""Unit tests for LikeService."""

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.error import BusinessRuleViolationError
from forum.domain.repository import LikeRepository
from forum.domain.service import LikeService
from forum.persistence.repository.inmemory import InMemoryLikeRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RacingLikeRepository(InMemoryLikeRepository):
    """Like repository where another request always stores the like first."""

    async def check_like_exist(self, comment_id, user_id):
        return False

    async def add_like(self, comment_id, user_id):
        raise IntegrityError("Duplicate like", None, Exception())


class TestLikeService:
    """Tests for LikeService."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)

        # Act
        liked = await like_service.toggle_like("comment-123", "user-123")

        # Assert
        assert liked is True
        assert await like_repo.check_like_exist("comment-123", "user-123")
        assert await like_repo.count_likes_by_comment_id("comment-123") == 1

    @pytest.mark.asyncio
    async def test_second_toggle_unlikes(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        await like_service.toggle_like("comment-123", "user-123")

        # Act
        liked = await like_service.toggle_like("comment-123", "user-123")

        # Assert
        assert liked is False
        assert await like_repo.count_likes_by_comment_id("comment-123") == 0

    @pytest.mark.asyncio
    async def test_likes_are_counted_per_user(self, unit_env):
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)

        # Act
        await like_service.toggle_like("comment-123", "user-1")
        await like_service.toggle_like("comment-123", "user-2")
        await like_service.toggle_like("comment-456", "user-1")

        # Assert
        assert await like_repo.count_likes_by_comment_id("comment-123") == 2
        assert await like_repo.count_likes_by_comment_id("comment-456") == 1

    @pytest.mark.asyncio
    async def test_lost_race_raises_business_rule_violation(self, store):
        # Arrange
        like_service = LikeService(like_repository=RacingLikeRepository(store))

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await like_service.toggle_like("comment-123", "user-123")

        assert store.likes == {}
