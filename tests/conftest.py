"""Test configuration and shared helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from toolhub.config import Settings
from toolhub.domain.model import Comment, Thread, Tool, User
from toolhub.domain.value import (
    Authenticated,
    Category,
    CommentId,
    ThreadId,
    ToolId,
    UserId,
    UserRole,
)
from toolhub.util.jwt import create_token

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    name: str | None = "Ada",
    role: UserRole = UserRole.USER,
    email_verified: bool = False,
) -> User:
    """Build a user profile with a fresh id."""
    return User(
        id=UserId(uuid4()),
        name=name,
        image=None,
        role=role,
        email_verified=email_verified,
    )


def viewer_for(user: User) -> Authenticated:
    """Authenticated viewer for a stored user."""
    return Authenticated(user_id=user.id, role=user.role)


def token_for(user: User) -> str:
    """Session token signed with the configured secret."""
    return create_token(str(user.id), Settings().auth)


def make_thread(
    author_id: UserId,
    title: str = "Which vector database?",
    content: str = "Looking for recommendations for a small project.",
    category: str | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
    comment_count: int = 0,
    is_pinned: bool = False,
    age: timedelta = timedelta(0),
) -> Thread:
    """Build an active thread, created ``age`` ago."""
    created_at = datetime.now() - age
    return Thread(
        id=ThreadId(uuid4()),
        author_id=author_id,
        title=title,
        content=content,
        category=Category(category) if category else None,
        upvotes=upvotes,
        downvotes=downvotes,
        comment_count=comment_count,
        is_pinned=is_pinned,
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(
    thread_id: ThreadId,
    author_id: UserId,
    parent_comment_id: CommentId | None = None,
    content: str = "Agreed.",
    upvotes: int = 0,
    reply_count: int = 0,
    created_at: datetime | None = None,
) -> Comment:
    """Build an active comment."""
    created_at = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        thread_id=thread_id,
        parent_comment_id=parent_comment_id,
        author_id=author_id,
        content=content,
        upvotes=upvotes,
        reply_count=reply_count,
        created_at=created_at,
        updated_at=created_at,
    )


def make_tool(
    name: str = "Scribe",
    category: str | None = "AI Writing",
    default_scores: dict[str, float] | None = None,
) -> Tool:
    """Build a tool."""
    return Tool(
        id=ToolId(uuid4()),
        name=name,
        category=Category(category) if category else None,
        default_scores=default_scores or {},
    )
