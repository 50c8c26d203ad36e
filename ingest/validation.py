"""Dataset completeness checks."""

from app.errors import DiagnosticCode
from ingest.store import RecordStore


def validate_store(store: RecordStore) -> dict:
    """Completeness status and coverage stats for each dataset."""
    issues = []
    stats = {}

    holders = [e for e in store.entities if e.is_property_holder]
    stats["entities"] = len(store.entities)
    stats["property_holders"] = len(holders)
    if not store.entities:
        issues.append("No valid roster entries")

    rejected = sum(1 for d in store.diagnostics if d.code == DiagnosticCode.MALFORMED_ENTITY)
    stats["rejected_entities"] = rejected
    roster = "PARTIAL" if rejected else "COMPLETE"
    if rejected:
        issues.append(f"{rejected} roster entries rejected")

    if store.sourced_votes is None:
        voting = "ABSENT"
        stats["holders_sourced"] = 0
    else:
        sourced = sum(1 for e in holders if store.sourced_for(e.name))
        stats["holders_sourced"] = sourced
        if sourced == len(holders):
            voting = "SOURCED"
        elif sourced:
            voting = "PARTIAL"
        else:
            voting = "SYNTHESIZED"
    unsourced = len(holders) - stats["holders_sourced"]
    if unsourced:
        issues.append(f"{unsourced} property holders rely on synthesized votes")

    if store.electoral is None:
        electoral = "ABSENT"
        stats["electoral_coverage_pct"] = 0
    else:
        constituencies = {e.constituency for e in store.entities}
        known = {c for c in constituencies if store.electoral_for(c).is_known}
        if constituencies:
            stats["electoral_coverage_pct"] = round(len(known) / len(constituencies) * 100, 1)
        else:
            stats["electoral_coverage_pct"] = 0
        electoral = "COMPLETE" if known == constituencies else "PARTIAL"
    if electoral != "COMPLETE":
        issues.append("Some constituencies have unknown electoral margins")

    return {
        "status": {"roster": roster, "voting": voting, "electoral": electoral},
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
