"""Update thread use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.application.usecase.common import ThreadItem
from toolhub.domain.service import ThreadService, UserService, VoteService
from toolhub.domain.value import ThreadId, VotableType, Viewer


class UpdateThreadRequest(BaseModel):
    """Update thread request. Omitted fields are left unchanged."""

    thread_id: str  # UUID string
    title: str | None = None
    content: str | None = None
    category: str | None = None
    viewer: Viewer


class UpdateThreadUseCase:
    """Use case for editing a thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        self.thread_service = thread_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: UpdateThreadRequest) -> ThreadItem:
        """Execute update thread flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ForbiddenError: If the viewer is neither the author nor an admin
            NotFoundError: If the thread is missing or deleted
            ValidationError: If a field is invalid
        """
        thread_id = ThreadId(parse_id(request.thread_id, "thread_id"))
        thread = await self.thread_service.update_thread(
            thread_id,
            request.viewer,
            title=request.title,
            content=request.content,
            category=request.category,
        )
        authors = await self.user_service.get_author_summaries([thread.author_id])
        user_votes = await self.vote_service.get_viewer_votes(
            request.viewer, VotableType.THREAD, [thread.id]
        )
        return ThreadItem.build(
            thread, authors[thread.author_id], user_votes.get(thread.id)
        )
