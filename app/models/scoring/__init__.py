"""Scoring domain models."""

from app.models.scoring.entities import TIER_ORDER, ScoredEntity, ScoreResult, Strategy, Tier

__all__ = [
    "TIER_ORDER",
    "ScoredEntity",
    "ScoreResult",
    "Strategy",
    "Tier",
]
