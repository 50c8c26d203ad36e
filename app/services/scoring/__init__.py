"""Scoring services."""

from app.services.scoring.calculator import ScoreCalculator
from app.services.scoring.tiering import TieringEngine

__all__ = [
    "ScoreCalculator",
    "TieringEngine",
]
