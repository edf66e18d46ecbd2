"""Domain layer DI providers."""

from dishka import Scope, provide

from readproof.config import (
    CommentSettings,
    NamingSettings,
    ProtocolSettings,
    SigningSettings,
)
from readproof.domain.repository import (
    CommentRepository,
    ReadReceiptRepository,
    VoteRepository,
)
from readproof.domain.service import (
    CommentService,
    MessageProtocol,
    NameResolver,
    NamingService,
    ReadReceiptService,
    SignatureService,
    SignedActionService,
    VoteService,
)
from readproof.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services backed by repositories are REQUEST-scoped to align with the
    repository/session lifecycle. Each HTTP request gets fresh service
    instances with their own transaction. Stateless services are created once.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_signature_service(self, signing_settings: SigningSettings) -> SignatureService:
        """Provide signed message verification service."""
        return SignatureService(freshness_window_ms=signing_settings.freshness_window_ms)

    @provide(scope=Scope.APP)
    def get_message_protocol(self, protocol_settings: ProtocolSettings) -> MessageProtocol:
        """Provide action message protocol."""
        return MessageProtocol(strict_payload=protocol_settings.strict_payload)

    @provide(scope=Scope.APP)
    def get_signed_action_service(
        self,
        signature_service: SignatureService,
        message_protocol: MessageProtocol,
    ) -> SignedActionService:
        """Provide signed action authentication service."""
        return SignedActionService(
            signature_service=signature_service,
            message_protocol=message_protocol,
        )

    @provide(scope=Scope.APP)
    def get_naming_service(
        self, resolver: NameResolver, naming_settings: NamingSettings
    ) -> NamingService:
        """Provide best-effort display name service."""
        return NamingService(
            resolver=resolver, timeout_seconds=naming_settings.timeout_seconds
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            max_page_size=comment_settings.max_page_size,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_read_receipt_service(
        self,
        read_receipt_repository: ReadReceiptRepository,
        naming_service: NamingService,
        comment_settings: CommentSettings,
    ) -> ReadReceiptService:
        """Provide read receipt domain service."""
        return ReadReceiptService(
            read_receipt_repository=read_receipt_repository,
            naming_service=naming_service,
            max_page_size=comment_settings.max_page_size,
        )
