"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from toolhub.domain.model import (
    AggregatedScore,
    Comment,
    EditorialScore,
    StructuredReview,
    Thread,
    Tool,
    User,
    Vote,
)
from toolhub.domain.value import (
    Category,
    CommentId,
    ContentStatus,
    EditorialScoreId,
    ReviewerType,
    ReviewId,
    ReviewStatus,
    ThreadId,
    ToolId,
    UserId,
    UserRole,
    VotableType,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    # asyncpg returns UUID objects; raw SQL paths may return strings
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def _category(value: Optional[str]) -> Optional[Category]:
    return Category(value) if value else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row.get("name"),
        image=row.get("image"),
        role=UserRole(row["role"]),
        email_verified=row.get("email_verified", False),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_tool(row: Dict[str, Any]) -> Tool:
    """Convert database row to Tool domain model."""
    return Tool(
        id=ToolId(_uuid(row["id"])),
        name=row["name"],
        category=_category(row.get("category")),
        default_scores=row.get("default_scores") or {},
        created_at=row["created_at"],
    )


def tool_to_dict(tool: Tool) -> Dict[str, Any]:
    """Convert Tool domain model to database dict."""
    data = tool.model_dump()
    data["category"] = tool.category.root if tool.category else None
    return data


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        category=_category(row.get("category")),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        comment_count=row["comment_count"],
        is_pinned=row["is_pinned"],
        status=ContentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = thread.model_dump()
    data["category"] = thread.category.root if thread.category else None
    data["status"] = thread.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        parent_comment_id=CommentId(parent_id) if parent_id else None,
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        reply_count=row["reply_count"],
        status=ContentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        votable_type=VotableType(row["votable_type"]),
        votable_id=_uuid(row["votable_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["votable_type"] = vote.votable_type.value
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_review(row: Dict[str, Any]) -> StructuredReview:
    """Convert database row to StructuredReview domain model."""
    return StructuredReview(
        id=ReviewId(_uuid(row["id"])),
        tool_id=ToolId(_uuid(row["tool_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        category=row.get("category"),
        metric_scores=row["metric_scores"],
        metric_comments=row.get("metric_comments") or {},
        overall_rating=row["overall_rating"],
        review_text=row.get("review_text"),
        reviewer_type=ReviewerType(row["reviewer_type"]),
        is_verified=row["is_verified"],
        status=ReviewStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def review_to_dict(review: StructuredReview) -> Dict[str, Any]:
    """Convert StructuredReview domain model to database dict."""
    data = review.model_dump()
    data["reviewer_type"] = review.reviewer_type.value
    data["status"] = review.status.value
    return data


def row_to_aggregated_score(row: Dict[str, Any]) -> AggregatedScore:
    """Convert database row to AggregatedScore domain model.

    ``metric_scores`` is stored as JSONB and validated back into
    per-metric aggregates.
    """
    return AggregatedScore(
        tool_id=ToolId(_uuid(row["tool_id"])),
        category=row.get("category"),
        metric_scores=row["metric_scores"],
        overall_average=row["overall_average"],
        total_reviews=row["total_reviews"],
        verified_reviews=row["verified_reviews"],
        editorial_reviews=row["editorial_reviews"],
        confidence_score=row["confidence_score"],
        last_calculated_at=row["last_calculated_at"],
    )


def aggregated_score_to_dict(score: AggregatedScore) -> Dict[str, Any]:
    """Convert AggregatedScore domain model to database dict."""
    return score.model_dump()


def row_to_editorial_score(row: Dict[str, Any]) -> EditorialScore:
    """Convert database row to EditorialScore domain model."""
    return EditorialScore(
        id=EditorialScoreId(_uuid(row["id"])),
        tool_id=ToolId(_uuid(row["tool_id"])),
        editor_id=UserId(_uuid(row["editor_id"])),
        metric_scores=row["metric_scores"],
        notes=row.get("notes"),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def editorial_score_to_dict(score: EditorialScore) -> Dict[str, Any]:
    """Convert EditorialScore domain model to database dict."""
    return score.model_dump()
