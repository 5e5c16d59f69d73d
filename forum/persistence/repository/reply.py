"""PostgreSQL implementation of Reply repository."""

from typing import List

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedReply, NewReply, Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    REPLY_ID_PREFIX,
    CommentId,
    IdFactory,
    ReplyId,
    ThreadId,
    UserId,
)
from forum.persistence.mappers import row_to_reply
from forum.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession, id_generator: IdFactory) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new ids
        """
        self.session = session
        self.id_generator = id_generator

    async def add_reply(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        new_reply: NewReply,
        owner: UserId,
    ) -> AddedReply:
        """Insert a reply; the database assigns its date."""
        stmt = (
            insert(replies_table)
            .values(
                id=f"{REPLY_ID_PREFIX}{self.id_generator()}",
                thread_id=thread_id,
                comment_id=comment_id,
                owner=owner,
                content=new_reply.content,
            )
            .returning(
                replies_table.c.id, replies_table.c.content, replies_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return AddedReply.model_validate(row._asdict())

    async def get_replies_by_thread_id(self, thread_id: ThreadId) -> List[Reply]:
        """Fetch every reply of a thread, oldest first."""
        stmt = (
            select(replies_table)
            .where(replies_table.c.thread_id == thread_id)
            .order_by(replies_table.c.date.asc(), replies_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def get_replies_by_comment_id(self, comment_id: CommentId) -> List[Reply]:
        """Fetch a comment's replies, oldest first."""
        stmt = (
            select(replies_table)
            .where(replies_table.c.comment_id == comment_id)
            .order_by(replies_table.c.date.asc(), replies_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def verify_reply_exist(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> None:
        """Ensure a reply exists under the given thread and comment."""
        stmt = select(replies_table.c.id).where(
            and_(
                replies_table.c.id == reply_id,
                replies_table.c.thread_id == thread_id,
                replies_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, user_id: UserId) -> None:
        """Ensure the user owns the reply."""
        stmt = select(replies_table.c.owner).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("reply", reply_id)
        if row.owner != user_id:
            raise AuthorizationError("reply", reply_id, user_id)

    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Flag a reply as deleted."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(is_delete=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()
