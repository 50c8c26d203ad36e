"""Scoring domain entities - computed per-entity results."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity
from app.models.roster import Entity


class Tier(StrEnum):
    """Priority tier, ordinal by electoral margin."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


TIER_ORDER = (Tier.CRITICAL, Tier.HIGH, Tier.MEDIUM, Tier.LOW)


class Strategy(StrEnum):
    """Outreach strategy for an entity."""

    IMMEDIATE = "IMMEDIATE"
    FOCUSED = "FOCUSED"
    SUSTAINED = "SUSTAINED"
    LONG_TERM = "LONG_TERM"
    RESEARCH_NEEDED = "RESEARCH_NEEDED"


@dataclass
class ScoreResult(BaseEntity):
    """Derived scores for one entity."""

    inconsistency_score: int
    priority_score: int
    tier: Tier
    combined_priority: float
    strategy: Strategy


@dataclass
class ScoredEntity:
    """An entity with its score and load position."""

    entity: Entity
    score: ScoreResult
    load_index: int

    @property
    def vulnerability_level(self) -> str:
        if not self.entity.electoral_profile.is_known:
            return "UNKNOWN"
        return self.score.tier.value
