"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
