"""Vote records and per-entity voting records."""

from dataclasses import dataclass, field
from enum import StrEnum

from app.models.common import BaseEntity
from app.models.voting.event import TrackedLegislativeEvent
from helpers import formulas


class VoteOutcome(StrEnum):
    FAVORABLE = formulas.FAVORABLE
    UNFAVORABLE = formulas.UNFAVORABLE
    ABSTAIN = formulas.ABSTAIN

    @classmethod
    def parse(cls, value: str) -> "VoteOutcome":
        """Parse a raw division label (For/Against/Abstain, Tá/Níl/Staon, Yea/Nay)."""
        outcome = _OUTCOME_ALIASES.get(str(value).strip().lower())
        if outcome is None:
            raise ValueError(f"Unknown vote outcome: {value!r}")
        return outcome


_OUTCOME_ALIASES = {
    "for": VoteOutcome.FAVORABLE,
    "yes": VoteOutcome.FAVORABLE,
    "yea": VoteOutcome.FAVORABLE,
    "tá": VoteOutcome.FAVORABLE,
    "against": VoteOutcome.UNFAVORABLE,
    "no": VoteOutcome.UNFAVORABLE,
    "nay": VoteOutcome.UNFAVORABLE,
    "níl": VoteOutcome.UNFAVORABLE,
    "abstain": VoteOutcome.ABSTAIN,
    "abstention": VoteOutcome.ABSTAIN,
    "staon": VoteOutcome.ABSTAIN,
}


class Provenance(StrEnum):
    """Where an entity's voting record came from."""

    SOURCED = "SOURCED"
    SYNTHESIZED = "SYNTHESIZED"
    NONE = "NONE"


@dataclass
class VoteRecord(BaseEntity):
    """One entity's outcome on one tracked event."""

    event_id: str
    outcome: VoteOutcome
    is_conflict: bool

    @classmethod
    def for_event(cls, event: TrackedLegislativeEvent, outcome: VoteOutcome) -> "VoteRecord":
        return cls(
            event_id=event.id,
            outcome=outcome,
            is_conflict=formulas.is_conflict(outcome, event.favorable_position),
        )


@dataclass
class VotingRecord(BaseEntity):
    """All of an entity's records on the slate, with a single provenance."""

    provenance: Provenance
    total_tracked: int
    votes: list[VoteRecord] = field(default_factory=list)

    @classmethod
    def empty(cls, total_tracked: int) -> "VotingRecord":
        return cls(provenance=Provenance.NONE, total_tracked=total_tracked)

    def _count(self, outcome: VoteOutcome) -> int:
        return sum(1 for v in self.votes if v.outcome == outcome)

    @property
    def favorable(self) -> int:
        return self._count(VoteOutcome.FAVORABLE)

    @property
    def unfavorable(self) -> int:
        return self._count(VoteOutcome.UNFAVORABLE)

    @property
    def abstentions(self) -> int:
        return self._count(VoteOutcome.ABSTAIN)

    @property
    def missed(self) -> int:
        """Tracked events with no record at all."""
        return max(self.total_tracked - len(self.votes), 0)

    @property
    def conflicts(self) -> int:
        return sum(1 for v in self.votes if v.is_conflict)

    @property
    def is_synthesized(self) -> bool:
        return self.provenance == Provenance.SYNTHESIZED
