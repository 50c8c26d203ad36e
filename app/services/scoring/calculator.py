"""Score calculator - inconsistency and priority scores per entity."""

from collections.abc import Sequence

from loguru import logger

from app.config import ScoringConfig
from app.errors import ScoringError
from app.models.roster import Entity
from app.models.scoring import ScoreResult, Strategy, Tier
from app.models.voting import TrackedLegislativeEvent
from helpers import formulas


class ScoreCalculator:
    """Computes a ScoreResult from an integrated entity. Read-only over its input."""

    def __init__(self, slate: Sequence[TrackedLegislativeEvent], config: ScoringConfig | None = None):
        self._config = config or ScoringConfig()
        self._weights = {event.id: event.weight for event in slate}
        logger.debug("ScoreCalculator initialized (weighted_conflicts={})", self._config.weighted_conflicts)

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def _conflict_points(self, entity: Entity) -> float:
        # Conflicting votes only count against an entity with holdings
        if not entity.is_property_holder:
            return 0
        record = entity.voting_record
        if self._config.weighted_conflicts:
            return formulas.weighted_conflict_term(
                [self._weights.get(v.event_id, 0.0) for v in record.votes if v.is_conflict]
            )
        return formulas.conflict_term(record.conflicts, self._config.conflict_points)

    def inconsistency_score(self, entity: Entity) -> int:
        """Composite 0-100 score."""
        cfg = self._config
        margin = entity.electoral_profile.margin_percentage
        return formulas.inconsistency_score(
            formulas.holdings_term(entity.holdings, cfg.holdings_points, cfg.holdings_cap),
            self._conflict_points(entity),
            cfg.executive_points if entity.holds_executive_office else 0,
            formulas.vulnerability_term(margin, cfg.vulnerability_threshold, cfg.vulnerability_points),
        )

    def score(self, entity: Entity) -> ScoreResult:
        if entity.voting_record is None:
            raise ScoringError(f"No voting record attached to {entity.name}")
        if entity.holdings < 0:
            raise ScoringError(f"Negative holdings for {entity.name}: {entity.holdings}")

        margin = entity.electoral_profile.margin_percentage
        conflicts = entity.voting_record.conflicts if entity.is_property_holder else 0

        score = self.inconsistency_score(entity)
        priority = formulas.priority_score(entity.holdings, conflicts, margin)
        if not formulas.PRIORITY_MIN <= priority <= formulas.PRIORITY_MAX:
            raise ScoringError(f"Priority out of range for {entity.name}: {priority}")

        return ScoreResult(
            inconsistency_score=score,
            priority_score=priority,
            tier=Tier(formulas.tier_for_margin(margin)),
            combined_priority=formulas.combined_priority(
                score, priority, self._config.score_weight, self._config.priority_weight
            ),
            strategy=Strategy(formulas.engagement_strategy(margin, entity.holdings)),
        )
