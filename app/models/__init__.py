"""Models package - entities and report schemas for all domains."""

from app.models.common import BaseEntity
from app.models.report import (
    AccountabilityReport,
    DataStatus,
    DiagnosticItem,
    EntityEntry,
    ReportMetadata,
    SummaryStats,
    VoteTally,
)
from app.models.roster import ElectoralProfile, Entity
from app.models.scoring import TIER_ORDER, ScoredEntity, ScoreResult, Strategy, Tier
from app.models.voting import (
    DEFAULT_SLATE,
    Position,
    Provenance,
    TrackedLegislativeEvent,
    VoteOutcome,
    VoteRecord,
    VotingRecord,
)

__all__ = [
    # Common
    "BaseEntity",
    # Roster
    "Entity",
    "ElectoralProfile",
    # Voting
    "DEFAULT_SLATE",
    "Position",
    "Provenance",
    "TrackedLegislativeEvent",
    "VoteOutcome",
    "VoteRecord",
    "VotingRecord",
    # Scoring
    "TIER_ORDER",
    "ScoredEntity",
    "ScoreResult",
    "Strategy",
    "Tier",
    # Report
    "AccountabilityReport",
    "DataStatus",
    "DiagnosticItem",
    "EntityEntry",
    "ReportMetadata",
    "SummaryStats",
    "VoteTally",
]
