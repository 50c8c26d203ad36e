"""Pydantic schemas for the accountability report."""

from datetime import datetime

import polars as pl
from pydantic import BaseModel


class VoteTally(BaseModel):
    """Vote counts on the tracked slate."""

    total_tracked: int
    favorable: int
    unfavorable: int
    abstentions: int
    missed: int
    conflicting: int


class EntityEntry(BaseModel):
    """One scored entity as presented to consumers."""

    name: str
    affiliation: str
    constituency: str
    holdings: int
    is_property_holder: bool
    holds_executive_office: bool
    provenance: str
    votes: VoteTally
    inconsistency_score: int
    priority_score: int
    combined_priority: float
    tier: str
    vulnerability_level: str
    margin_percentage: float | None = None
    votes_to_flip: int | None = None
    strategy: str


class DataStatus(BaseModel):
    """Completeness of each input dataset."""

    roster: str
    voting: str
    electoral: str


class ReportMetadata(BaseModel):
    generated_at: datetime
    entity_count: int
    property_holder_count: int
    tracked_events: int
    tier_counts: dict[str, int]
    data_status: DataStatus


class SummaryStats(BaseModel):
    """Aggregates over property-holding entities."""

    average_inconsistency_score: float
    average_conflicting_votes: float
    executive_office_count: int
    governing_holder_count: int
    sourced_records: int
    synthesized_records: int


class DiagnosticItem(BaseModel):
    severity: str
    code: str
    message: str
    entity: str | None = None


class AccountabilityReport(BaseModel):
    """Tiered report plus the full unclipped result set."""

    metadata: ReportMetadata
    tiers: dict[str, list[EntityEntry]]
    entities: list[EntityEntry]
    summary: SummaryStats
    diagnostics: list[DiagnosticItem] = []

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)

    def to_frame(self) -> pl.DataFrame:
        """Flat per-entity table, vote tallies prefixed with ``votes_``."""
        rows = []
        for entry in self.entities:
            row = entry.model_dump(exclude={"votes"})
            row.update({f"votes_{k}": v for k, v in entry.votes.model_dump().items()})
            rows.append(row)
        if not rows:
            return pl.DataFrame(schema={"name": pl.Utf8})
        return pl.DataFrame(rows, infer_schema_length=None)
