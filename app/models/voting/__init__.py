"""Voting domain models - tracked events and vote records."""

from app.models.voting.event import DEFAULT_SLATE, Position, TrackedLegislativeEvent
from app.models.voting.record import Provenance, VoteOutcome, VoteRecord, VotingRecord

__all__ = [
    "DEFAULT_SLATE",
    "Position",
    "TrackedLegislativeEvent",
    "Provenance",
    "VoteOutcome",
    "VoteRecord",
    "VotingRecord",
]
