"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedComment, Comment, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import COMMENT_ID_PREFIX, CommentId, IdFactory, ThreadId, UserId
from forum.persistence.mappers import row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession, id_generator: IdFactory) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new ids
        """
        self.session = session
        self.id_generator = id_generator

    async def add_comment(
        self,
        thread_id: ThreadId,
        new_comment: NewComment,
        owner: UserId,
    ) -> AddedComment:
        """Insert a comment; the database assigns its date."""
        stmt = (
            insert(comments_table)
            .values(
                id=f"{COMMENT_ID_PREFIX}{self.id_generator()}",
                thread_id=thread_id,
                owner=owner,
                content=new_comment.content,
            )
            .returning(
                comments_table.c.id, comments_table.c.content, comments_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return AddedComment.model_validate(row._asdict())

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[Comment]:
        """Fetch a thread's comments, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.thread_id == thread_id)
            .order_by(comments_table.c.date.asc(), comments_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def verify_comment_exist(
        self, thread_id: ThreadId, comment_id: CommentId
    ) -> None:
        """Ensure a comment exists under the given thread."""
        stmt = select(comments_table.c.id).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.thread_id == thread_id,
            )
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("comment", comment_id)

    async def verify_comment_owner(
        self, thread_id: ThreadId, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Ensure the user owns the comment."""
        stmt = select(comments_table.c.owner).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.thread_id == thread_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("comment", comment_id)
        if row.owner != user_id:
            raise AuthorizationError("comment", comment_id, user_id)

    async def delete_comment(self, thread_id: ThreadId, comment_id: CommentId) -> None:
        """Flag a comment as deleted."""
        stmt = (
            update(comments_table)
            .where(
                and_(
                    comments_table.c.id == comment_id,
                    comments_table.c.thread_id == thread_id,
                )
            )
            .values(is_delete=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()
