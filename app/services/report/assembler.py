"""Report assembler - summary statistics and tiered lists."""

from collections.abc import Mapping
from datetime import datetime, timezone

from loguru import logger

from app.config import ScoringConfig
from app.errors import Diagnostic
from app.models.report import (
    AccountabilityReport,
    DataStatus,
    DiagnosticItem,
    EntityEntry,
    ReportMetadata,
    SummaryStats,
    VoteTally,
)
from app.models.scoring import ScoredEntity, Tier
from app.models.voting import Provenance
from helpers import formulas
from settings import TIER_CAPS


def to_entry(item: ScoredEntity) -> EntityEntry:
    """Flatten a scored entity. Provenance always travels with the entry."""
    entity, score = item.entity, item.score
    record = entity.voting_record
    profile = entity.electoral_profile

    return EntityEntry(
        name=entity.name,
        affiliation=entity.affiliation,
        constituency=entity.constituency,
        holdings=entity.holdings,
        is_property_holder=entity.is_property_holder,
        holds_executive_office=entity.holds_executive_office,
        provenance=record.provenance.value,
        votes=VoteTally(
            total_tracked=record.total_tracked,
            favorable=record.favorable,
            unfavorable=record.unfavorable,
            abstentions=record.abstentions,
            missed=record.missed,
            conflicting=record.conflicts,
        ),
        inconsistency_score=score.inconsistency_score,
        priority_score=score.priority_score,
        combined_priority=score.combined_priority,
        tier=score.tier.value,
        vulnerability_level=item.vulnerability_level,
        margin_percentage=profile.margin_percentage,
        votes_to_flip=profile.votes_to_flip if profile.is_known else None,
        strategy=score.strategy.value,
    )


class ReportAssembler:
    """Builds the AccountabilityReport from tiered results."""

    def __init__(self, config: ScoringConfig | None = None, caps: Mapping[str, int] | None = None):
        self._config = config or ScoringConfig()
        self._caps = dict(TIER_CAPS if caps is None else caps)
        logger.debug("ReportAssembler initialized: caps={}", self._caps)

    def summarize(self, scored: list[ScoredEntity]) -> SummaryStats:
        holders = [s for s in scored if s.entity.is_property_holder]
        return SummaryStats(
            average_inconsistency_score=round(formulas.mean([s.score.inconsistency_score for s in holders]), 2),
            average_conflicting_votes=round(formulas.mean([s.entity.voting_record.conflicts for s in holders]), 2),
            executive_office_count=sum(1 for s in scored if s.entity.holds_executive_office),
            governing_holder_count=sum(
                1 for s in holders if s.entity.affiliation in self._config.governing_affiliations
            ),
            sourced_records=sum(1 for s in scored if s.entity.voting_record.provenance == Provenance.SOURCED),
            synthesized_records=sum(1 for s in scored if s.entity.voting_record.is_synthesized),
        )

    def assemble(
        self,
        scored: list[ScoredEntity],
        tiers: dict[Tier, list[ScoredEntity]],
        data_status: Mapping[str, str],
        diagnostics: list[Diagnostic],
        tracked_events: int,
        generated_at: datetime | None = None,
    ) -> AccountabilityReport:
        entries = {item.entity.name: to_entry(item) for item in scored}

        report = AccountabilityReport(
            metadata=ReportMetadata(
                generated_at=generated_at or datetime.now(timezone.utc),
                entity_count=len(scored),
                property_holder_count=sum(1 for s in scored if s.entity.is_property_holder),
                tracked_events=tracked_events,
                tier_counts={tier.value: len(members) for tier, members in tiers.items()},
                data_status=DataStatus(**data_status),
            ),
            tiers={
                tier.value: [entries[m.entity.name] for m in members[: self._caps.get(tier.value, len(members))]]
                for tier, members in tiers.items()
            },
            entities=[entries[s.entity.name] for s in sorted(scored, key=lambda s: s.load_index)],
            summary=self.summarize(scored),
            diagnostics=[
                DiagnosticItem(severity=d.severity.value, code=d.code.value, message=d.message, entity=d.entity)
                for d in diagnostics
            ],
        )

        logger.info(
            "Report assembled: {} entities, {} diagnostics",
            report.metadata.entity_count,
            len(report.diagnostics),
        )
        return report
