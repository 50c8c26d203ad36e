"""Tests for the accountability pipeline: integration, report assembly and the container."""

import json
from datetime import datetime, timezone

import pytest

from app.config import ScoringConfig, SynthesisConfig
from app.container import Container, container
from app.errors import DiagnosticCode, Severity
from app.models.roster import Entity
from app.models.voting import DEFAULT_SLATE
from app.services.accountability import AccountabilityService
from app.services.report import ReportAssembler
from app.services.scoring import ScoreCalculator, TieringEngine
from app.services.voting import VotePatternSynthesizer
from ingest import build_store

GENERATED_AT = datetime(2024, 11, 1, 9, 0, tzinfo=timezone.utc)

ROSTER = {
    "Aoife Murphy": {"party": "Fine Gael", "constituency": "Kerry", "property_count": 3, "minister": True},
    "Brian Walsh": {"party": "Sinn Féin", "constituency": "Louth", "property_count": 0},
    "Ciara Kelly": {"party": "Fianna Fáil", "constituency": "Cork South-West", "property_count": 12},
}
VOTES = {
    "Aoife Murphy": [{"vote_id": e.id, "vote_cast": "Against"} for e in DEFAULT_SLATE],
    "Ciara Kelly": [{"vote_id": e.id, "vote_cast": "For"} for e in DEFAULT_SLATE],
}
ELECTORAL = {
    "Kerry": {"margin_percentage": 0.8, "votes_needed": 95},
    "Louth": {"margin_percentage": 9.0, "votes_needed": 2100},
    "Cork South-West": {"margin_percentage": 2.0, "votes_needed": 480},
}


def _service(seed=42, caps=None) -> AccountabilityService:
    scoring = ScoringConfig()
    return AccountabilityService(
        synthesizer=VotePatternSynthesizer(DEFAULT_SLATE, SynthesisConfig(seed=seed)),
        calculator=ScoreCalculator(DEFAULT_SLATE, scoring),
        tiering=TieringEngine(),
        assembler=ReportAssembler(scoring, caps=caps),
    )


@pytest.fixture
def report():
    return _service().run(ROSTER, VOTES, ELECTORAL, generated_at=GENERATED_AT)


def _entry(report, name):
    return next(e for e in report.entities if e.name == name)


class TestSourcedRun:
    def test_metadata(self, report):
        meta = report.metadata
        assert meta.entity_count == 3
        assert meta.property_holder_count == 2
        assert meta.tracked_events == 5
        assert meta.tier_counts == {"CRITICAL": 1, "HIGH": 1, "MEDIUM": 0, "LOW": 1}
        assert meta.data_status.model_dump() == {"roster": "COMPLETE", "voting": "SOURCED", "electoral": "COMPLETE"}
        assert report.diagnostics == []

    def test_entities_in_load_order(self, report):
        assert [e.name for e in report.entities] == list(ROSTER)

    def test_critical_entry(self, report):
        entry = _entry(report, "Aoife Murphy")
        assert entry.provenance == "SOURCED"
        assert entry.inconsistency_score == 100
        assert entry.priority_score == 8
        assert entry.combined_priority == 92.0
        assert entry.tier == "CRITICAL"
        assert entry.vulnerability_level == "CRITICAL"
        assert entry.strategy == "FOCUSED"
        assert entry.votes.conflicting == 5
        assert entry.votes_to_flip == 95

    def test_non_holder_gets_empty_record(self, report):
        entry = _entry(report, "Brian Walsh")
        assert entry.provenance == "NONE"
        assert entry.is_property_holder is False
        assert entry.inconsistency_score == 0
        assert entry.votes.missed == 5
        assert entry.tier == "LOW"
        assert entry.strategy == "LONG_TERM"

    def test_high_entry(self, report):
        entry = _entry(report, "Ciara Kelly")
        assert entry.inconsistency_score == 60
        assert entry.priority_score == 6
        assert entry.tier == "HIGH"
        assert entry.votes.favorable == 5
        assert entry.votes.conflicting == 0

    def test_summary(self, report):
        summary = report.summary
        assert summary.average_inconsistency_score == 80.0
        assert summary.average_conflicting_votes == 2.5
        assert summary.executive_office_count == 1
        assert summary.governing_holder_count == 2
        assert summary.sourced_records == 2
        assert summary.synthesized_records == 0

    def test_json_is_reproducible(self, report):
        again = _service(seed=7).run(ROSTER, VOTES, ELECTORAL, generated_at=GENERATED_AT)
        assert report.to_json() == again.to_json()

    def test_json_structure(self, report):
        data = json.loads(report.to_json())
        assert set(data) == {"metadata", "tiers", "entities", "summary", "diagnostics"}
        assert set(data["tiers"]) == {"CRITICAL", "HIGH", "MEDIUM", "LOW"}
        assert data["tiers"]["CRITICAL"][0]["name"] == "Aoife Murphy"

    def test_frame(self, report):
        frame = report.to_frame()
        assert frame.height == 3
        assert {"name", "provenance", "tier", "votes_conflicting", "votes_missed"} <= set(frame.columns)
        assert "votes" not in frame.columns
        assert frame["name"].to_list() == list(ROSTER)


class TestSynthesizedRun:
    def test_large_holder_unknown_margin(self):
        roster = {"Dara Byrne": {"party": "Fianna Fáil", "constituency": "Galway West", "property_count": 27}}
        report = _service().run(roster, generated_at=GENERATED_AT)
        entry = report.entities[0]

        assert entry.provenance == "SYNTHESIZED"
        assert entry.votes.missed == 0
        assert entry.inconsistency_score == min(50 + 15 * entry.votes.conflicting, 100)
        assert entry.tier == "LOW"
        assert entry.vulnerability_level == "UNKNOWN"
        assert entry.margin_percentage is None
        assert entry.votes_to_flip is None
        assert entry.strategy == "RESEARCH_NEEDED"

        assert report.metadata.data_status.voting == "ABSENT"
        assert report.metadata.data_status.electoral == "ABSENT"
        missing = [d for d in report.diagnostics if d.code == DiagnosticCode.MISSING_DATASET]
        assert len(missing) == 2
        assert all(d.severity == Severity.INFO for d in missing)

    def test_same_seed_same_report(self):
        first = _service(seed=5).run(ROSTER, electoral=ELECTORAL, generated_at=GENERATED_AT)
        second = _service(seed=5).run(ROSTER, electoral=ELECTORAL, generated_at=GENERATED_AT)
        assert first.to_json() == second.to_json()
        assert first.summary.synthesized_records == 2

    def test_partial_sourced_set_stays_sourced(self):
        votes = {"Aoife Murphy": [{"vote_id": "RTB2024_001", "vote_cast": "Against"}]}
        report = _service().run(ROSTER, votes, ELECTORAL, generated_at=GENERATED_AT)

        aoife = _entry(report, "Aoife Murphy")
        assert aoife.provenance == "SOURCED"
        assert aoife.votes.missed == 4
        assert aoife.votes.conflicting == 1
        assert _entry(report, "Ciara Kelly").provenance == "SYNTHESIZED"
        assert report.metadata.data_status.voting == "PARTIAL"

    def test_unknown_affiliation_warned_once(self):
        roster = {
            "E1": {"party": "Aontú", "constituency": "Meath West", "property_count": 2},
            "E2": {"party": "Aontú", "constituency": "Meath West", "property_count": 4},
            "E3": {"party": "Right to Change", "constituency": "Meath East", "property_count": 0},
        }
        report = _service().run(roster, generated_at=GENERATED_AT)
        warnings = [d for d in report.diagnostics if d.code == DiagnosticCode.UNKNOWN_AFFILIATION]
        assert len(warnings) == 1
        assert warnings[0].severity == Severity.WARNING
        assert "Aontú" in warnings[0].message


class TestAssembly:
    def test_tier_caps(self):
        roster = {
            f"E{i}": {"party": "Fine Gael", "constituency": "Kerry", "property_count": i + 1}
            for i in range(4)
        }
        caps = {"CRITICAL": 2, "HIGH": 2, "MEDIUM": 2, "LOW": 2}
        report = _service(caps=caps).run(roster, electoral=ELECTORAL, generated_at=GENERATED_AT)

        assert report.metadata.tier_counts["CRITICAL"] == 4
        assert len(report.tiers["CRITICAL"]) == 2
        assert len(report.entities) == 4
        combined = [e.combined_priority for e in report.tiers["CRITICAL"]]
        assert combined == sorted(combined, reverse=True)

    def test_empty_roster(self):
        report = _service().run({}, {}, {}, generated_at=GENERATED_AT)
        assert report.metadata.entity_count == 0
        assert report.summary.average_inconsistency_score == 0.0
        assert report.to_frame().height == 0

    def test_scoring_failure_isolated(self):
        service = _service()
        store = build_store(ROSTER, VOTES, ELECTORAL)
        entities = service.integrate(store)
        broken = Entity(name="Broken", affiliation="Fine Gael", constituency="Kerry", holdings=1)

        scored = service.score_all(entities + [broken], store.diagnostics)
        assert [s.entity.name for s in scored] == list(ROSTER)
        failed = [d for d in store.diagnostics if d.code == DiagnosticCode.SCORING_FAILED]
        assert len(failed) == 1
        assert failed[0].entity == "Broken"
        assert failed[0].severity == Severity.ERROR


class TestIsolation:
    def test_non_holder_conflicting_votes_score_zero(self):
        roster = {"Niamh Doyle": {"party": "Sinn Féin", "constituency": "Louth", "property_count": 0}}
        votes = {"Niamh Doyle": [{"vote_id": e.id, "vote_cast": "Against"} for e in DEFAULT_SLATE]}
        report = _service().run(roster, votes, ELECTORAL, generated_at=GENERATED_AT)

        entry = report.entities[0]
        assert entry.provenance == "SOURCED"
        assert entry.votes.conflicting == 5
        assert entry.inconsistency_score == 0
        assert entry.priority_score == 1
        assert entry.tier == "LOW"

    def test_bad_vote_list_does_not_abort(self):
        votes = {"Aoife Murphy": 5, "Ciara Kelly": VOTES["Ciara Kelly"]}
        report = _service().run(ROSTER, votes, ELECTORAL, generated_at=GENERATED_AT)

        assert report.metadata.entity_count == 3
        assert _entry(report, "Aoife Murphy").provenance == "SYNTHESIZED"
        assert _entry(report, "Ciara Kelly").provenance == "SOURCED"
        assert [d.entity for d in report.diagnostics if d.code == DiagnosticCode.MALFORMED_VOTE] == ["Aoife Murphy"]

    def test_non_mapping_datasets_degrade(self):
        report = _service().run(ROSTER, votes=["x"], electoral="y", generated_at=GENERATED_AT)
        assert report.metadata.entity_count == 3
        assert report.metadata.data_status.voting == "ABSENT"
        assert report.metadata.data_status.electoral == "ABSENT"

    def test_store_reported_twice(self):
        roster = {
            "E1": {"party": "Aontú", "constituency": "Meath West", "property_count": 2},
            "E2": {"party": "Fine Gael", "constituency": "Kerry", "property_count": 1},
        }
        service = _service()
        store = build_store(roster)
        ingest_count = len(store.diagnostics)

        first = service.report(store, generated_at=GENERATED_AT)
        second = service.report(store, generated_at=GENERATED_AT)

        assert len(store.diagnostics) == ingest_count
        assert first.diagnostics == second.diagnostics
        codes = [d.code for d in second.diagnostics]
        assert codes.count(DiagnosticCode.UNKNOWN_AFFILIATION) == 1
        assert first.to_json() == second.to_json()


class TestContainer:
    def test_singleton(self):
        assert Container() is container

    def test_init_and_force(self):
        container.init(synthesis=SynthesisConfig(seed=3), force=True)
        assert isinstance(container.accountability, AccountabilityService)
        synthesizer = container.synthesizer

        container.init(synthesis=SynthesisConfig(seed=4))
        assert container.synthesizer is synthesizer

        container.init(synthesis=SynthesisConfig(seed=4), force=True)
        assert container.synthesizer is not synthesizer
        assert container.synthesis_config.seed == 4

    def test_runs_report(self):
        container.init(synthesis=SynthesisConfig(seed=1), force=True)
        report = container.accountability.run(ROSTER, VOTES, ELECTORAL, generated_at=GENERATED_AT)
        assert report.metadata.entity_count == 3
