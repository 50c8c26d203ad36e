"""Represented individuals and their electoral context."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity
from app.models.voting.record import VotingRecord


@dataclass
class ElectoralProfile(BaseEntity):
    """Constituency vulnerability. None means unknown, never zero."""

    margin_percentage: float | None = None
    votes_to_flip: int | None = None

    @property
    def is_known(self) -> bool:
        return self.margin_percentage is not None


@dataclass
class Entity(BaseEntity):
    """A represented individual keyed by full name."""

    name: str
    affiliation: str
    constituency: str
    holdings: int = 0
    holds_executive_office: bool = False
    voting_record: VotingRecord | None = None
    electoral_profile: ElectoralProfile = field(default_factory=ElectoralProfile)

    @property
    def is_property_holder(self) -> bool:
        return self.holdings > 0

    def attach(self, voting_record: VotingRecord, electoral_profile: ElectoralProfile) -> None:
        """Integration step - the only mutation an entity receives during a run."""
        self.voting_record = voting_record
        self.electoral_profile = electoral_profile
