"""Roster domain models."""

from app.models.roster.entity import ElectoralProfile, Entity

__all__ = [
    "ElectoralProfile",
    "Entity",
]
