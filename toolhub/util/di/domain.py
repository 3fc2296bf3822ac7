"""Domain layer DI providers."""

from dishka import Scope, provide

from toolhub.config import AuthSettings, CommunitySettings, ScoringSettings
from toolhub.domain.repository import (
    AggregatedScoreRepository,
    CommentRepository,
    EditorialScoreRepository,
    StructuredReviewRepository,
    ThreadRepository,
    ToolRepository,
    UserRepository,
    VoteRepository,
)
from toolhub.domain.service import (
    CommentService,
    CommentTreeService,
    CounterService,
    JWTService,
    ModerationService,
    ReviewService,
    ScoringService,
    ThreadService,
    UserService,
    ViewerService,
    VoteService,
)
from toolhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_viewer_service(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> ViewerService:
        """Provide viewer resolution service."""
        return ViewerService(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_counter_service(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> CounterService:
        """Provide counter maintenance service."""
        return CounterService(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, settings: CommunitySettings
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository, settings=settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
        counter_service: CounterService,
        settings: CommunitySettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
            counter_service=counter_service,
            settings=settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            counter_service=counter_service,
        )

    @provide
    def get_comment_tree_service(
        self,
        comment_repository: CommentRepository,
        vote_service: VoteService,
        user_service: UserService,
        settings: CommunitySettings,
    ) -> CommentTreeService:
        """Provide comment tree builder."""
        return CommentTreeService(
            comment_repository=comment_repository,
            vote_service=vote_service,
            user_service=user_service,
            settings=settings,
        )

    @provide
    def get_moderation_service(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        counter_service: CounterService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            counter_service=counter_service,
        )

    @provide
    def get_scoring_service(
        self,
        tool_repository: ToolRepository,
        review_repository: StructuredReviewRepository,
        aggregated_score_repository: AggregatedScoreRepository,
        editorial_score_repository: EditorialScoreRepository,
        settings: ScoringSettings,
    ) -> ScoringService:
        """Provide scoring domain service."""
        return ScoringService(
            tool_repository=tool_repository,
            review_repository=review_repository,
            aggregated_score_repository=aggregated_score_repository,
            editorial_score_repository=editorial_score_repository,
            settings=settings,
        )

    @provide
    def get_review_service(
        self,
        review_repository: StructuredReviewRepository,
        user_repository: UserRepository,
        scoring_service: ScoringService,
    ) -> ReviewService:
        """Provide structured review domain service."""
        return ReviewService(
            review_repository=review_repository,
            user_repository=user_repository,
            scoring_service=scoring_service,
        )
