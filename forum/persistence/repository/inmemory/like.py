"""In-memory like repository for testing."""

from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from forum.domain.model import Like
from forum.domain.repository.like import LikeRepository
from forum.domain.value import CommentId, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def check_like_exist(self, comment_id: CommentId, user_id: UserId) -> bool:
        return (comment_id, user_id) in self.store.likes

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Record a like.

        Raises:
            IntegrityError: If the pair is already liked (duplicate)
        """
        key = (comment_id, user_id)
        if key in self.store.likes:
            raise IntegrityError("Duplicate like", None, Exception())

        self.store.likes[key] = Like(
            comment_id=comment_id,
            owner=user_id,
            date=datetime.now(timezone.utc),
        )

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        self.store.likes.pop((comment_id, user_id), None)

    async def count_likes_by_comment_id(self, comment_id: CommentId) -> int:
        return sum(1 for cid, _ in self.store.likes if cid == comment_id)
