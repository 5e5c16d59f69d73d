"""Persistence infrastructure providers."""

from collections.abc import AsyncIterable, AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import IdGenerator
from forum.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
)
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresReplyRepository,
    PostgresThreadRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterable[AsyncEngine]:
        """Provide database engine, disposing its pool when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        try:
            async with get_session(session_factory) as session:
                yield session
            logfire.info("Session committed")
        except Exception as e:
            logfire.warn("Session rollback", error=str(e))
            raise

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(
        self, session: AsyncSession, id_generator: IdGenerator
    ) -> ThreadRepository:
        """Provide Thread repository."""
        return PostgresThreadRepository(session, id_generator)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, session: AsyncSession, id_generator: IdGenerator
    ) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session, id_generator)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(
        self, session: AsyncSession, id_generator: IdGenerator
    ) -> ReplyRepository:
        """Provide Reply repository."""
        return PostgresReplyRepository(session, id_generator)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        """Provide Like repository."""
        return PostgresLikeRepository(session)
