"""Vote entity."""

from uuid import UUID

from toolhub.domain.model.common import EditableModel
from toolhub.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(EditableModel):
    """Vote entity.

    Business rules:
    - At most one vote per (user, votable) pair, enforced by a unique
      constraint in storage
    - Casting the same direction again removes the vote
    - Casting the opposite direction flips it
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # Can be ThreadId or CommentId
    vote_type: VoteType
