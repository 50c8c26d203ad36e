"""Accountability pipeline service."""

from app.services.accountability.service import AccountabilityService

__all__ = [
    "AccountabilityService",
]
