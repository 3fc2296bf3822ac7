"""Get user votes use case."""

from datetime import datetime

from pydantic import BaseModel

from toolhub.domain.service import VoteService
from toolhub.domain.value import VotableType, VoteType, Viewer


class VoteItem(BaseModel):
    """A single vote of the viewer."""

    vote_id: str
    votable_type: VotableType
    votable_id: str
    vote_type: VoteType
    created_at: datetime
    updated_at: datetime


class VoteSummary(BaseModel):
    """Vote totals."""

    total_thread_votes: int
    total_comment_votes: int
    total_votes: int


class GetUserVotesRequest(BaseModel):
    """Get user votes request."""

    viewer: Viewer


class GetUserVotesResponse(BaseModel):
    """The viewer's votes grouped by item type, newest first."""

    thread_votes: list[VoteItem]
    comment_votes: list[VoteItem]
    summary: VoteSummary


class GetUserVotesUseCase:
    """Use case for listing the viewer's own votes."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetUserVotesRequest) -> GetUserVotesResponse:
        """Execute get user votes flow.

        Raises:
            AuthenticationRequiredError: If the viewer is anonymous
        """
        votes = await self.vote_service.list_user_votes(request.viewer)

        thread_votes: list[VoteItem] = []
        comment_votes: list[VoteItem] = []
        for vote in votes:
            item = VoteItem(
                vote_id=str(vote.id),
                votable_type=vote.votable_type,
                votable_id=str(vote.votable_id),
                vote_type=vote.vote_type,
                created_at=vote.created_at,
                updated_at=vote.updated_at,
            )
            if vote.votable_type == VotableType.THREAD:
                thread_votes.append(item)
            else:
                comment_votes.append(item)

        return GetUserVotesResponse(
            thread_votes=thread_votes,
            comment_votes=comment_votes,
            summary=VoteSummary(
                total_thread_votes=len(thread_votes),
                total_comment_votes=len(comment_votes),
                total_votes=len(votes),
            ),
        )
