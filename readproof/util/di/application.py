"""Application layer DI providers."""

from dishka import Scope, provide

from readproof.application.usecase.comment import (
    DeleteCommentUseCase,
    EditCommentUseCase,
    ListCommentsUseCase,
    PostCommentUseCase,
)
from readproof.application.usecase.signature import (
    GetBadgeRecordUseCase,
    ListReadersUseCase,
    SignReadUseCase,
)
from readproof.application.usecase.vote import CastVoteUseCase, RetractVoteUseCase
from readproof.config import CommentSettings
from readproof.domain.service import (
    CommentService,
    NamingService,
    ReadReceiptService,
    SignedActionService,
    VoteService,
)
from readproof.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self,
        signed_action_service: SignedActionService,
        comment_service: CommentService,
        naming_service: NamingService,
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            signed_action_service=signed_action_service,
            comment_service=comment_service,
            naming_service=naming_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self,
        signed_action_service: SignedActionService,
        comment_service: CommentService,
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            signed_action_service=signed_action_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        signed_action_service: SignedActionService,
        comment_service: CommentService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            signed_action_service=signed_action_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            comment_settings=comment_settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        signed_action_service: SignedActionService,
        vote_service: VoteService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            signed_action_service=signed_action_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_retract_vote_use_case(
        self,
        signed_action_service: SignedActionService,
        vote_service: VoteService,
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(
            signed_action_service=signed_action_service,
            vote_service=vote_service,
        )

    # Sign-as-read use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_read_use_case(
        self,
        signed_action_service: SignedActionService,
        read_receipt_service: ReadReceiptService,
    ) -> SignReadUseCase:
        """Provide sign-as-read use case."""
        return SignReadUseCase(
            signed_action_service=signed_action_service,
            read_receipt_service=read_receipt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_readers_use_case(
        self, read_receipt_service: ReadReceiptService
    ) -> ListReadersUseCase:
        """Provide list readers use case."""
        return ListReadersUseCase(read_receipt_service=read_receipt_service)

    @provide(scope=Scope.REQUEST)
    def get_get_badge_record_use_case(
        self, read_receipt_service: ReadReceiptService
    ) -> GetBadgeRecordUseCase:
        """Provide get badge record use case."""
        return GetBadgeRecordUseCase(read_receipt_service=read_receipt_service)
