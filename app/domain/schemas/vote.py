"""Pydantic schemas for restaurant voting."""

from app.domain.schemas.common import CamelModel


class VoteCounts(CamelModel):
    upvote_count: int
    downvote_count: int
    vote_count: int


class VoteResponse(VoteCounts):
    message: str


class VoteStatus(VoteCounts):
    has_upvoted: bool
    has_downvoted: bool
