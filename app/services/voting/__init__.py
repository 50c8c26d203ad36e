"""Voting services."""

from app.services.voting.synthesizer import VotePatternSynthesizer, entity_seed

__all__ = [
    "VotePatternSynthesizer",
    "entity_seed",
]
