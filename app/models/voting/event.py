"""Tracked legislative events - the fixed slate of scored votes."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class Position(StrEnum):
    """Declared favorable position on an event."""

    FOR = "FOR"
    AGAINST = "AGAINST"


@dataclass(frozen=True)
class TrackedLegislativeEvent:
    """One hand-curated vote used as a scoring input."""

    id: str
    title: str
    date: date
    favorable_position: Position
    weight: float = 0.0  # importance; only used in weighted-conflict mode
    description: str = ""
    category: str = ""


DEFAULT_SLATE: tuple[TrackedLegislativeEvent, ...] = (
    TrackedLegislativeEvent(
        id="RTB2024_001",
        title="Residential Tenancies (Amendment) Bill 2024",
        date=date(2024, 3, 15),
        favorable_position=Position.FOR,
        weight=25,
        description="Rent control caps and eviction protections",
        category="tenant_protection",
    ),
    TrackedLegislativeEvent(
        id="VPT2024_001",
        title="Vacant Property Tax (Amendment) Bill 2024",
        date=date(2024, 4, 22),
        favorable_position=Position.FOR,
        weight=20,
        description="Penalties for keeping properties vacant",
        category="housing_supply",
    ),
    TrackedLegislativeEvent(
        id="PDH2024_001",
        title="Planning and Development (Housing) Bill 2024",
        date=date(2024, 6, 11),
        favorable_position=Position.FOR,
        weight=15,
        description="Social housing requirements in developments",
        category="social_housing",
    ),
    TrackedLegislativeEvent(
        id="RTS2024_001",
        title="Residential Tenancies (Security of Tenure) Bill 2024",
        date=date(2024, 9, 18),
        favorable_position=Position.FOR,
        weight=25,
        description="Indefinite tenancies and eviction restrictions",
        category="tenant_protection",
    ),
    TrackedLegislativeEvent(
        id="PTR2024_001",
        title="Property Tax (Rental Income) Amendment 2024",
        date=date(2024, 10, 29),
        favorable_position=Position.FOR,
        weight=15,
        description="Tax relief reductions for rental properties",
        category="landlord_taxation",
    ),
)
