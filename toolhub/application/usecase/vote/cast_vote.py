"""Cast vote use case."""

from pydantic import BaseModel

from toolhub.application.usecase.base import parse_id
from toolhub.domain.error import ValidationError
from toolhub.domain.service import VoteService
from toolhub.domain.value import VotableType, VoteAction, VoteType, Viewer


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    vote_type: str  # "upvote" or "downvote"
    viewer: Viewer


class CastVoteResponse(BaseModel):
    """Counters after the vote and the viewer's resulting vote."""

    votable_type: VotableType
    votable_id: str
    user_vote: VoteType | None
    upvotes: int
    downvotes: int
    score: int
    action: VoteAction


class CastVoteUseCase:
    """Use case for voting on a thread or comment.

    Voting the same direction twice removes the vote; the other direction
    flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            ValidationError: If the ID or vote type is invalid
            AuthenticationRequiredError: If the viewer is anonymous
            NotFoundError: If the item is missing or deleted
            ConflictError: If a concurrent request recorded the same vote
        """
        votable_id = parse_id(request.votable_id, f"{request.votable_type.value}_id")
        try:
            vote_type = VoteType(request.vote_type)
        except ValueError as e:
            raise ValidationError(
                "vote_type must be 'upvote' or 'downvote'", "INVALID_VOTE_TYPE"
            ) from e

        result = await self.vote_service.cast_vote(
            request.votable_type, votable_id, request.viewer, vote_type
        )
        return CastVoteResponse(
            votable_type=result.votable_type,
            votable_id=str(result.votable_id),
            user_vote=result.user_vote,
            upvotes=result.upvotes,
            downvotes=result.downvotes,
            score=result.upvotes - result.downvotes,
            action=result.action,
        )
