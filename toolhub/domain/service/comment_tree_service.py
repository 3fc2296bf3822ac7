"""Comment tree builder."""

from collections import defaultdict
from dataclasses import dataclass, field

import logfire

from toolhub.config import CommunitySettings
from toolhub.domain.model import Comment
from toolhub.domain.repository import CommentRepository
from toolhub.domain.value import CommentId, ThreadId, Viewer, VotableType, VoteType

from .base import Service
from .user_service import AuthorSummary, UserService
from .vote_service import VoteService


@dataclass
class CommentNode:
    """Node in a thread's comment tree.

    ``depth`` is the node's position in the built tree (0 for top level).
    A reply lifted out from under a deleted parent keeps its original
    ``comment.parent_comment_id``.
    """

    comment: Comment
    author: AuthorSummary
    user_vote: VoteType | None
    depth: int
    can_reply: bool
    replies: list["CommentNode"] = field(default_factory=list)


def _sibling_order(comment: Comment) -> tuple:
    # Most upvoted first, then arrival order, then id for a total order
    return (-comment.upvotes, comment.created_at, str(comment.id))


class CommentTreeService(Service):
    """Builds the ordered comment tree of a thread."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_service: VoteService,
        user_service: UserService,
        settings: CommunitySettings,
    ) -> None:
        """Initialize comment tree service.

        Args:
            comment_repository: Comment repository
            vote_service: Vote service for the viewer's votes
            user_service: User service for author projections
            settings: Community settings (reply depth, orphan handling)
        """
        self.comment_repository = comment_repository
        self.vote_service = vote_service
        self.user_service = user_service
        self.settings = settings

    def _placement_parent(
        self, comment: Comment, by_id: dict[CommentId, Comment]
    ) -> tuple[CommentId | None, bool]:
        """Find where an active comment hangs in the tree.

        Walks up past deleted ancestors to the nearest active one.

        Returns:
            (parent to attach under or None for top level, whether any
            ancestor on the way was deleted or missing)
        """
        parent_id = comment.parent_comment_id
        orphaned = False
        while parent_id is not None:
            parent = by_id.get(parent_id)
            if parent is None:
                return None, True
            if parent.is_active:
                return parent_id, orphaned
            orphaned = True
            parent_id = parent.parent_comment_id
        return None, orphaned

    async def load_thread_comments(
        self, thread_id: ThreadId, viewer: Viewer
    ) -> list[CommentNode]:
        """Load a thread's active comments as an ordered tree.

        Algorithm:
        1. Fetch every comment of the thread in one query
        2. Group active comments by parent, sorting siblings by upvotes
           descending, then creation time, then id
        3. Walk down from the top level; replies under a deleted comment are
           hidden unless ``show_orphaned_replies`` lifts them to the nearest
           active ancestor
        4. Batch-fetch the viewer's votes and the authors, then link nodes

        Deleted comments never become nodes. The walk is iterative, so any
        depth stored can be loaded.

        Args:
            thread_id: Thread ID
            viewer: Requesting viewer; anonymous viewers get no votes

        Returns:
            Top-level nodes with replies populated
        """
        with logfire.span(
            "comment_tree_service.load_thread_comments", thread_id=str(thread_id)
        ):
            comments = await self.comment_repository.find_by_thread(thread_id)
            by_id = {comment.id: comment for comment in comments}

            # Adjacency map: parent_id -> [children]; None holds the top level
            children: dict[CommentId | None, list[Comment]] = defaultdict(list)
            placement: dict[CommentId, CommentId | None] = {}
            lifted = 0
            for comment in comments:
                if not comment.is_active:
                    continue
                parent_id, orphaned = self._placement_parent(comment, by_id)
                if orphaned:
                    if not self.settings.show_orphaned_replies:
                        continue
                    lifted += 1
                placement[comment.id] = parent_id
                children[parent_id].append(comment)

            for siblings in children.values():
                siblings.sort(key=_sibling_order)

            # Pre-order walk from the top level with an explicit stack, so
            # chain length is not limited by the interpreter's recursion limit.
            # Replies of hidden comments are never reached.
            reachable: list[tuple[Comment, int]] = []
            stack = [(comment, 0) for comment in reversed(children[None])]
            while stack:
                comment, depth = stack.pop()
                reachable.append((comment, depth))
                stack.extend(
                    (child, depth + 1) for child in reversed(children[comment.id])
                )

            user_votes = await self.vote_service.get_viewer_votes(
                viewer, VotableType.COMMENT, [c.id for c, _ in reachable]
            )
            authors = await self.user_service.get_author_summaries(
                c.author_id for c, _ in reachable
            )

            # Pre-order puts every parent before its replies, and siblings in order
            roots: list[CommentNode] = []
            nodes: dict[CommentId, CommentNode] = {}
            for comment, depth in reachable:
                node = CommentNode(
                    comment=comment,
                    author=authors[comment.author_id],
                    user_vote=user_votes.get(comment.id),
                    depth=depth,
                    can_reply=depth < self.settings.max_reply_depth,
                )
                nodes[comment.id] = node
                parent_id = placement[comment.id]
                if parent_id is None:
                    roots.append(node)
                else:
                    nodes[parent_id].replies.append(node)

            logfire.info(
                "Built comment tree",
                thread_id=str(thread_id),
                total=len(comments),
                shown=len(reachable),
                lifted=lifted,
            )
            return roots
