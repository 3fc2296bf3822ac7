"""Thread routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, ConfigDict

from toolhub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from toolhub.application.usecase.common import CommentItem, ThreadItem
from toolhub.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from toolhub.domain.repository import ThreadSortOrder
from toolhub.domain.service import ViewerService

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    model_config = ConfigDict(extra="forbid")

    title: str
    content: str
    category: str | None = None


class UpdateThreadAPIRequest(BaseModel):
    """API request for editing a thread. Omitted fields are kept."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    content: str | None = None
    category: str | None = None


class CreateCommentAPIRequest(BaseModel):
    """API request for a top-level comment."""

    model_config = ConfigDict(extra="forbid")

    content: str


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    viewer_service: FromDishka[ViewerService],
    sort: ThreadSortOrder = Query(default=ThreadSortOrder.HOT),
    category: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListThreadsResponse:
    """List active threads, pinned first.

    Public endpoint. Authenticated viewers also get their own vote on each
    thread.

    Args:
        list_threads_use_case: List threads use case from DI
        viewer_service: Viewer resolution from DI
        sort: hot, new or top
        category: Optional category filter
        limit: Page size (capped by configuration)
        offset: Number of threads to skip
        auth_token: JWT token from cookie

    Returns:
        A page of threads
    """
    viewer = await viewer_service.resolve(auth_token)
    return await list_threads_use_case.execute(
        ListThreadsRequest(
            sort=sort, category=category, limit=limit, offset=offset, viewer=viewer
        )
    )


@router.post("", response_model=ThreadItem, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: CreateThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> ThreadItem:
    """Create a new thread.

    Requires authentication.

    Args:
        request: Thread creation data
        create_thread_use_case: Create thread use case from DI
        viewer_service: Viewer resolution from DI
        auth_token: JWT token from cookie

    Returns:
        Created thread
    """
    viewer = await viewer_service.resolve(auth_token)
    return await create_thread_use_case.execute(
        CreateThreadRequest(
            title=request.title,
            content=request.content,
            category=request.category,
            viewer=viewer,
        )
    )


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get a thread with its comment tree.

    Public endpoint. Deleted threads are reported as not found.

    Args:
        thread_id: Thread UUID
        get_thread_use_case: Get thread use case from DI
        viewer_service: Viewer resolution from DI
        auth_token: JWT token from cookie

    Returns:
        Thread and nested comments
    """
    viewer = await viewer_service.resolve(auth_token)
    return await get_thread_use_case.execute(
        GetThreadRequest(thread_id=thread_id, viewer=viewer)
    )


@router.put("/{thread_id}", response_model=ThreadItem)
async def update_thread(
    thread_id: str,
    request: UpdateThreadAPIRequest,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> ThreadItem:
    """Edit a thread. Only the author or an admin may edit."""
    viewer = await viewer_service.resolve(auth_token)
    return await update_thread_use_case.execute(
        UpdateThreadRequest(
            thread_id=thread_id,
            title=request.title,
            content=request.content,
            category=request.category,
            viewer=viewer,
        )
    )


@router.delete("/{thread_id}", response_model=DeleteThreadResponse)
async def delete_thread(
    thread_id: str,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteThreadResponse:
    """Soft-delete a thread. Only the author or an admin may delete."""
    viewer = await viewer_service.resolve(auth_token)
    return await delete_thread_use_case.execute(
        DeleteThreadRequest(thread_id=thread_id, viewer=viewer)
    )


@router.post(
    "/{thread_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    thread_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    viewer_service: FromDishka[ViewerService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Add a top-level comment to a thread.

    Requires authentication. Increments the thread's comment count.

    Args:
        thread_id: Thread UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        viewer_service: Viewer resolution from DI
        auth_token: JWT token from cookie

    Returns:
        Created comment
    """
    viewer = await viewer_service.resolve(auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            thread_id=thread_id, content=request.content, viewer=viewer
        )
    )
