"""Strongly typed identifiers for Toolhub domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Community
UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)

# Tool scoring
ToolId = NewType("ToolId", UUID)
ReviewId = NewType("ReviewId", UUID)
EditorialScoreId = NewType("EditorialScoreId", UUID)
