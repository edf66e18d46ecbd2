"""Mock persistence providers for testing."""

from dishka import Scope, provide

from readproof.domain.repository import (
    CommentRepository,
    ReadReceiptRepository,
    VoteRepository,
)
from readproof.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryReadReceiptRepository,
    InMemoryVoteRepository,
)
from readproof.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the requests of one container;
    every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_read_receipt_repository(self) -> ReadReceiptRepository:
        """Provide in-memory read receipt repository."""
        return InMemoryReadReceiptRepository()
