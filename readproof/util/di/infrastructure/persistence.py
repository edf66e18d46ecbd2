"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from readproof.config import Settings
from readproof.domain.repository import (
    CommentRepository,
    ReadReceiptRepository,
    VoteRepository,
)
from readproof.persistence.database import create_engine, create_session_factory
from readproof.persistence.repository import (
    PostgresCommentRepository,
    PostgresReadReceiptRepository,
    PostgresVoteRepository,
)
from readproof.util.di.base import ProviderBase
from readproof.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

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
        """One transaction per request.

        Commits when the request scope closes cleanly, which also releases
        the comment row locks taken by vote and delete operations.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Request transaction committed")
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_read_receipt_repository(
        self, session: AsyncSession
    ) -> ReadReceiptRepository:
        """Provide ReadReceipt repository."""
        return PostgresReadReceiptRepository(session)
