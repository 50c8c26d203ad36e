"""Injected scoring configuration - immutable lookup tables and weights."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Base likelihood of voting against the favorable position, per affiliation
DEFAULT_UNFAVORABLE_LIKELIHOOD = MappingProxyType(
    {
        "Fianna Fáil": 0.70,
        "Fine Gael": 0.75,
        "Independent": 0.80,
        "Sinn Féin": 0.30,
        "Social Democrats": 0.20,
    }
)
DEFAULT_LIKELIHOOD = 0.60

DEFAULT_GOVERNING_AFFILIATIONS = frozenset({"Fianna Fáil", "Fine Gael", "Green Party"})


@dataclass(frozen=True)
class SynthesisConfig:
    """Vote pattern synthesis parameters."""

    unfavorable_likelihood: Mapping[str, float] = field(default_factory=lambda: DEFAULT_UNFAVORABLE_LIKELIHOOD)
    default_likelihood: float = DEFAULT_LIKELIHOOD
    holdings_step: float = 0.1
    holdings_cap: float = 0.3
    likelihood_ceiling: float = 0.95
    abstain_band: float = 0.1
    seed: int | None = None

    def __post_init__(self):
        # Freeze caller-supplied dicts
        if not isinstance(self.unfavorable_likelihood, MappingProxyType):
            object.__setattr__(self, "unfavorable_likelihood", MappingProxyType(dict(self.unfavorable_likelihood)))

    def is_known_affiliation(self, affiliation: str) -> bool:
        return affiliation in self.unfavorable_likelihood

    def base_likelihood(self, affiliation: str) -> float:
        return self.unfavorable_likelihood.get(affiliation, self.default_likelihood)


@dataclass(frozen=True)
class ScoringConfig:
    """Inconsistency and priority score weights."""

    holdings_points: int = 5
    holdings_cap: int = 50
    conflict_points: int = 15
    executive_points: int = 15
    vulnerability_points: int = 10
    vulnerability_threshold: float = 5.0
    weighted_conflicts: bool = False
    score_weight: float = 0.6
    priority_weight: float = 0.4
    governing_affiliations: frozenset[str] = DEFAULT_GOVERNING_AFFILIATIONS
