"""Delete thread use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.service import ModerationService
from toolhub.domain.value import ThreadId, Viewer


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str  # UUID string
    viewer: Viewer


class DeleteThreadResponse(BaseModel):
    """Delete thread response."""

    thread_id: str
    deleted: bool = True


class DeleteThreadUseCase:
    """Use case for soft-deleting a thread."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: DeleteThreadRequest) -> DeleteThreadResponse:
        thread_id = ThreadId(parse_id(request.thread_id, "thread_id"))
        await self.moderation_service.delete_thread(thread_id, request.viewer)
        return DeleteThreadResponse(thread_id=str(thread_id))
