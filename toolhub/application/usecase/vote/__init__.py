"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_user_votes import (
    GetUserVotesRequest,
    GetUserVotesResponse,
    GetUserVotesUseCase,
    VoteItem,
    VoteSummary,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetUserVotesRequest",
    "GetUserVotesResponse",
    "GetUserVotesUseCase",
    "VoteItem",
    "VoteSummary",
]
