"""Get thread use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.application.usecase.common import CommentItem, ThreadItem
from toolhub.domain.service import (
    CommentTreeService,
    ThreadService,
    UserService,
    VoteService,
)
from toolhub.domain.value import ANONYMOUS, ThreadId, VotableType, Viewer


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string
    viewer: Viewer = ANONYMOUS


class GetThreadResponse(BaseModel):
    """Thread detail with its comment tree."""

    thread: ThreadItem
    comments: list[CommentItem]


class GetThreadUseCase:
    """Use case for reading a thread and its comments."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_tree_service: CommentTreeService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            comment_tree_service: Comment tree builder
            user_service: User service for the author projection
            vote_service: Vote service for the viewer's thread vote
        """
        self.thread_service = thread_service
        self.comment_tree_service = comment_tree_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Steps:
        1. Load the active thread
        2. Attach its author and the viewer's vote
        3. Build the comment tree for the viewer

        Raises:
            ValidationError: If the thread ID is malformed
            NotFoundError: If the thread is missing or deleted
        """
        thread_id = ThreadId(parse_id(request.thread_id, "thread_id"))
        thread = await self.thread_service.get_active_thread(thread_id)

        authors = await self.user_service.get_author_summaries([thread.author_id])
        user_votes = await self.vote_service.get_viewer_votes(
            request.viewer, VotableType.THREAD, [thread.id]
        )
        tree = await self.comment_tree_service.load_thread_comments(
            thread_id, request.viewer
        )

        return GetThreadResponse(
            thread=ThreadItem.build(
                thread, authors[thread.author_id], user_votes.get(thread.id)
            ),
            comments=CommentItem.from_tree(tree),
        )
