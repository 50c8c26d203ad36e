"""Services package - service class exports."""

from app.services.accountability import AccountabilityService
from app.services.report import ReportAssembler
from app.services.scoring import ScoreCalculator, TieringEngine
from app.services.voting import VotePatternSynthesizer

__all__ = [
    "AccountabilityService",
    "ReportAssembler",
    "ScoreCalculator",
    "TieringEngine",
    "VotePatternSynthesizer",
]
