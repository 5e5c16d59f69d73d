"""PostgreSQL implementation of Like repository."""

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import LikeRepository
from forum.domain.value import CommentId, UserId
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def check_like_exist(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user currently likes a comment."""
        stmt = select(likes_table.c.comment_id).where(
            and_(
                likes_table.c.comment_id == comment_id,
                likes_table.c.owner == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Insert a like (raises IntegrityError on a duplicate pair)."""
        stmt = insert(likes_table).values(comment_id=comment_id, owner=user_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a like if present."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.comment_id == comment_id,
                likes_table.c.owner == user_id,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_likes_by_comment_id(self, comment_id: CommentId) -> int:
        """Count the likes on a comment."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
