"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree_service import CommentNode, CommentTreeService
from .counter_service import CounterService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .review_service import ReviewService
from .scoring_service import DisplayScores, ScoreOverview, ScoringService
from .thread_service import ThreadService
from .user_service import AuthorSummary, UserService
from .viewer_service import ViewerService
from .vote_service import VoteResult, VoteService

__all__ = [
    "AuthorSummary",
    "CommentNode",
    "CommentService",
    "CommentTreeService",
    "CounterService",
    "DisplayScores",
    "JWTService",
    "ModerationService",
    "ReviewService",
    "ScoreOverview",
    "ScoringService",
    "Service",
    "ThreadService",
    "UserService",
    "ViewerService",
    "VoteResult",
    "VoteService",
]
