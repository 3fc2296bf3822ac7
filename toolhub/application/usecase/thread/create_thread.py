"""Create thread use case."""

from pydantic import BaseModel

from toolhub.application.usecase.common import ThreadItem
from toolhub.domain.service import ThreadService, UserService
from toolhub.domain.value import Viewer


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    title: str
    content: str
    category: str | None = None
    viewer: Viewer


class CreateThreadUseCase:
    """Use case for starting a new discussion thread."""

    def __init__(self, thread_service: ThreadService, user_service: UserService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            user_service: User service for the author projection
        """
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: CreateThreadRequest) -> ThreadItem:
        """Execute create thread flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
            ValidationError: If title, content or category are invalid
        """
        thread = await self.thread_service.create_thread(
            viewer=request.viewer,
            title=request.title,
            content=request.content,
            category=request.category,
        )
        authors = await self.user_service.get_author_summaries([thread.author_id])
        return ThreadItem.build(thread, authors[thread.author_id], None)
