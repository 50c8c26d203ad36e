"""Accountability service - single-pass integrate, score, tier, report."""

from collections.abc import Mapping
from datetime import datetime

from loguru import logger

from app.errors import Diagnostic, DiagnosticCode, ScoringError, Severity
from app.models.report import AccountabilityReport
from app.models.roster import Entity
from app.models.scoring import ScoredEntity
from app.models.voting import Provenance, VotingRecord
from app.services.report import ReportAssembler
from app.services.scoring import ScoreCalculator, TieringEngine
from app.services.voting import VotePatternSynthesizer
from ingest import RecordStore, build_store, validate_store
from settings.logging import log_diagnostics


class AccountabilityService:
    """Runs the whole batch over one already-loaded dataset."""

    def __init__(
        self,
        synthesizer: VotePatternSynthesizer,
        calculator: ScoreCalculator,
        tiering: TieringEngine,
        assembler: ReportAssembler,
    ):
        self._synthesizer = synthesizer
        self._calculator = calculator
        self._tiering = tiering
        self._assembler = assembler
        logger.debug("AccountabilityService initialized")

    def voting_record_for(self, entity: Entity, store: RecordStore) -> VotingRecord:
        """Sourced votes if any, synthesized for holders, otherwise an empty record."""
        total = len(store.slate)
        sourced = store.sourced_for(entity.name)
        if sourced:
            return VotingRecord(provenance=Provenance.SOURCED, total_tracked=total, votes=list(sourced))
        if entity.is_property_holder:
            return self._synthesizer.synthesize(entity)
        return VotingRecord.empty(total)

    def integrate(self, store: RecordStore, diagnostics: list[Diagnostic] | None = None) -> list[Entity]:
        """Attach a voting record and electoral profile to every entity.

        Warnings go to ``diagnostics``, or to the store when none is given.
        """
        if diagnostics is None:
            diagnostics = store.diagnostics
        warned: set[str] = set()
        config = self._synthesizer.config

        for entity in store.entities:
            record = self.voting_record_for(entity, store)
            if record.is_synthesized and not config.is_known_affiliation(entity.affiliation):
                if entity.affiliation not in warned:
                    warned.add(entity.affiliation)
                    diagnostics.append(
                        Diagnostic(
                            Severity.WARNING,
                            DiagnosticCode.UNKNOWN_AFFILIATION,
                            f"Unrecognized affiliation {entity.affiliation!r}; "
                            f"default likelihood {config.default_likelihood} used",
                            entity.name,
                        )
                    )
                    logger.warning("Unrecognized affiliation {}", entity.affiliation)
            entity.attach(record, store.electoral_for(entity.constituency))

        synthesized = sum(1 for e in store.entities if e.voting_record.is_synthesized)
        logger.info("Integrated {} entities ({} synthesized records)", len(store.entities), synthesized)
        return store.entities

    def score_all(self, entities: list[Entity], diagnostics: list[Diagnostic]) -> list[ScoredEntity]:
        """Score each entity independently. Failures are isolated per entity."""
        scored = []
        for index, entity in enumerate(entities):
            try:
                result = self._calculator.score(entity)
            except ScoringError as e:
                diagnostics.append(Diagnostic(Severity.ERROR, DiagnosticCode.SCORING_FAILED, e.message, entity.name))
                logger.error("Failed to score {}: {}", entity.name, e)
                continue
            scored.append(ScoredEntity(entity=entity, score=result, load_index=index))

        logger.info("Scored {} of {} entities", len(scored), len(entities))
        return scored

    def report(self, store: RecordStore, generated_at: datetime | None = None) -> AccountabilityReport:
        """Integrate, score, tier and assemble for a prepared store.

        Run diagnostics are collected on a copy, so the store holds only
        ingest diagnostics and can be reported on again.
        """
        log_diagnostics(store.diagnostics)
        diagnostics = list(store.diagnostics)
        entities = self.integrate(store, diagnostics)
        scored = self.score_all(entities, diagnostics)
        tiers = self._tiering.partition(scored)

        validation = validate_store(store)
        if not validation["valid"]:
            logger.warning("Data issues: {}", validation["issues"])

        return self._assembler.assemble(
            scored,
            tiers,
            validation["status"],
            diagnostics,
            tracked_events=len(store.slate),
            generated_at=generated_at,
        )

    def run(
        self,
        roster: Mapping,
        votes: Mapping | None = None,
        electoral: Mapping | None = None,
        generated_at: datetime | None = None,
    ) -> AccountabilityReport:
        """Main entry point: raw parsed inputs in, report out."""
        store = build_store(roster, votes, electoral, self._synthesizer.slate)
        logger.info("Running accountability report for {} entities", len(store.entities))
        return self.report(store, generated_at)
