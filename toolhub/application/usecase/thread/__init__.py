"""Thread use cases."""

from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .delete_thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .update_thread import UpdateThreadRequest, UpdateThreadUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "UpdateThreadRequest",
    "UpdateThreadUseCase",
]
