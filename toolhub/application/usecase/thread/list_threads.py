"""List threads use case."""

import logfire
from pydantic import BaseModel, Field

from toolhub.application.usecase.common import ThreadItem
from toolhub.domain.repository import ThreadSortOrder
from toolhub.domain.service import ThreadService, UserService, VoteService
from toolhub.domain.value import ANONYMOUS, VotableType, Viewer


class ListThreadsRequest(BaseModel):
    """List threads request."""

    sort: ThreadSortOrder = ThreadSortOrder.HOT
    category: str | None = None
    limit: int | None = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)
    viewer: Viewer = ANONYMOUS


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadItem]
    has_more: bool
    limit: int
    offset: int


class ListThreadsUseCase:
    """Use case for listing active threads, pinned first."""

    def __init__(
        self,
        thread_service: ThreadService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            user_service: User service for author projections
            vote_service: Vote service for the viewer's votes
        """
        self.thread_service = thread_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Args:
            request: Sort order, optional category filter and pagination

        Returns:
            One page of threads with the viewer's vote on each
        """
        with logfire.span(
            "list_threads.execute",
            sort=request.sort.value,
            category=request.category,
            offset=request.offset,
        ):
            threads, has_more = await self.thread_service.list_threads(
                sort=request.sort,
                category=request.category,
                limit=request.limit,
                offset=request.offset,
            )

            # Batch lookups to avoid N+1
            authors = await self.user_service.get_author_summaries(
                thread.author_id for thread in threads
            )
            user_votes = await self.vote_service.get_viewer_votes(
                request.viewer, VotableType.THREAD, [thread.id for thread in threads]
            )

            items = [
                ThreadItem.build(
                    thread, authors[thread.author_id], user_votes.get(thread.id)
                )
                for thread in threads
            ]
            logfire.info("Threads listed", count=len(items), has_more=has_more)

            return ListThreadsResponse(
                threads=items,
                has_more=has_more,
                limit=self.thread_service.page_size(request.limit),
                offset=request.offset,
            )
