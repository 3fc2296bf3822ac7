"""Domain model entities for Toolhub."""

from toolhub.domain.model.comment import Comment
from toolhub.domain.model.review import StructuredReview
from toolhub.domain.model.score import AggregatedScore, EditorialScore, MetricAggregate
from toolhub.domain.model.thread import Thread
from toolhub.domain.model.tool import Tool
from toolhub.domain.model.user import User
from toolhub.domain.model.vote import Vote

__all__ = [
    "User",
    "Thread",
    "Comment",
    "Vote",
    "Tool",
    "StructuredReview",
    "AggregatedScore",
    "EditorialScore",
    "MetricAggregate",
]
