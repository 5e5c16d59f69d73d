"""PostgreSQL implementation of Thread repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread, Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import THREAD_ID_PREFIX, IdFactory, ThreadId, UserId
from forum.persistence.mappers import row_to_thread
from forum.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession, id_generator: IdFactory) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new ids
        """
        self.session = session
        self.id_generator = id_generator

    async def add_thread(self, new_thread: NewThread, owner: UserId) -> AddedThread:
        """Insert a thread; the database assigns its date."""
        stmt = (
            insert(threads_table)
            .values(
                id=f"{THREAD_ID_PREFIX}{self.id_generator()}",
                title=new_thread.title,
                body=new_thread.body,
                owner=owner,
            )
            .returning(threads_table.c.id, threads_table.c.title, threads_table.c.owner)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return AddedThread.model_validate(row._asdict())

    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread:
        """Fetch a thread row."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            raise NotFoundError("thread", thread_id)
        return row_to_thread(row._asdict())

    async def verify_thread_exist(self, thread_id: ThreadId) -> None:
        """Ensure a thread exists."""
        stmt = select(threads_table.c.id).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("thread", thread_id)
