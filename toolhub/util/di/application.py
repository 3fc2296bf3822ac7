"""Application layer DI providers."""

from dishka import Scope, provide

from toolhub.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    UpdateCommentUseCase,
)
from toolhub.application.usecase.review import (
    ListReviewsUseCase,
    ModerateReviewUseCase,
    SubmitReviewUseCase,
)
from toolhub.application.usecase.score import (
    CreateEditorialScoreUseCase,
    DeactivateEditorialScoreUseCase,
    GetAggregatedScoresUseCase,
    RecalculateScoresUseCase,
)
from toolhub.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    UpdateThreadUseCase,
)
from toolhub.application.usecase.vote import CastVoteUseCase, GetUserVotesUseCase
from toolhub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are built from their constructor signatures; their domain
    service dependencies come from the domain provider.
    """

    scope = Scope.REQUEST

    # Threads
    list_threads = provide(ListThreadsUseCase)
    create_thread = provide(CreateThreadUseCase)
    get_thread = provide(GetThreadUseCase)
    update_thread = provide(UpdateThreadUseCase)
    delete_thread = provide(DeleteThreadUseCase)

    # Comments
    create_comment = provide(CreateCommentUseCase)
    create_reply = provide(CreateReplyUseCase)
    update_comment = provide(UpdateCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)

    # Votes
    cast_vote = provide(CastVoteUseCase)
    get_user_votes = provide(GetUserVotesUseCase)

    # Scores
    get_aggregated_scores = provide(GetAggregatedScoresUseCase)
    recalculate_scores = provide(RecalculateScoresUseCase)
    create_editorial_score = provide(CreateEditorialScoreUseCase)
    deactivate_editorial_score = provide(DeactivateEditorialScoreUseCase)

    # Reviews
    submit_review = provide(SubmitReviewUseCase)
    list_reviews = provide(ListReviewsUseCase)
    moderate_review = provide(ModerateReviewUseCase)
