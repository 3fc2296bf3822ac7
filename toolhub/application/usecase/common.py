"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from toolhub.domain.model import Comment, Thread
from toolhub.domain.service import AuthorSummary, CommentNode
from toolhub.domain.value import ContentStatus, UserRole, VoteType


class AuthorItem(BaseModel):
    """Public author projection."""

    name: str
    image: str | None
    role: UserRole

    @classmethod
    def from_summary(cls, summary: AuthorSummary) -> "AuthorItem":
        return cls(name=summary.name, image=summary.image, role=summary.role)


class ThreadItem(BaseModel):
    """Thread in a response."""

    thread_id: str
    author_id: str
    author: AuthorItem
    title: str
    content: str
    category: str | None
    upvotes: int
    downvotes: int
    score: int
    comment_count: int
    is_pinned: bool
    status: ContentStatus
    user_vote: VoteType | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls, thread: Thread, author: AuthorSummary, user_vote: VoteType | None
    ) -> "ThreadItem":
        return cls(
            thread_id=str(thread.id),
            author_id=str(thread.author_id),
            author=AuthorItem.from_summary(author),
            title=thread.title,
            content=thread.content,
            category=thread.category.root if thread.category else None,
            upvotes=thread.upvotes,
            downvotes=thread.downvotes,
            score=thread.score,
            comment_count=thread.comment_count,
            is_pinned=thread.is_pinned,
            status=thread.status,
            user_vote=user_vote,
            created_at=thread.created_at,
            updated_at=thread.updated_at,
        )


class CommentItem(BaseModel):
    """Comment in a response.

    Tree responses fill ``depth``, ``can_reply`` and ``replies``; single
    comment responses leave the defaults.
    """

    comment_id: str
    thread_id: str
    parent_comment_id: str | None
    author_id: str
    author: AuthorItem
    content: str
    upvotes: int
    downvotes: int
    reply_count: int
    status: ContentStatus
    user_vote: VoteType | None = None
    depth: int = 0
    can_reply: bool = True
    replies: list["CommentItem"] = []
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls,
        comment: Comment,
        author: AuthorSummary,
        user_vote: VoteType | None = None,
    ) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            thread_id=str(comment.thread_id),
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            author_id=str(comment.author_id),
            author=AuthorItem.from_summary(author),
            content=comment.content,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            reply_count=comment.reply_count,
            status=comment.status,
            user_vote=user_vote,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

    @classmethod
    def from_tree(cls, roots: list[CommentNode]) -> list["CommentItem"]:
        """Convert a comment tree, replies included, without recursing."""
        items: list[CommentItem] = []
        stack = [(node, items) for node in reversed(roots)]
        while stack:
            node, target = stack.pop()
            item = cls.build(node.comment, node.author, node.user_vote)
            item.depth = node.depth
            item.can_reply = node.can_reply
            item.replies = []
            target.append(item)
            stack.extend((reply, item.replies) for reply in reversed(node.replies))
        return items
