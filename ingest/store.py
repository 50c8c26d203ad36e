"""Record store - normalize already-parsed inputs into domain entities."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from loguru import logger
from pydantic import ValidationError

from app.errors import Diagnostic, DiagnosticCode, IngestError, Severity
from app.models.roster import ElectoralProfile, Entity
from app.models.voting import DEFAULT_SLATE, TrackedLegislativeEvent, VoteRecord
from ingest.schemas import ElectoralRecordSchema, RosterRecordSchema, SourcedVoteSchema


@dataclass
class RecordStore:
    """Everything one run needs, held in memory."""

    entities: list[Entity]
    slate: tuple[TrackedLegislativeEvent, ...] = DEFAULT_SLATE
    sourced_votes: dict[str, list[VoteRecord]] | None = None
    electoral: dict[str, ElectoralProfile] | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def sourced_for(self, name: str) -> list[VoteRecord]:
        if self.sourced_votes is None:
            return []
        return self.sourced_votes.get(name, [])

    def electoral_for(self, constituency: str) -> ElectoralProfile:
        if self.electoral is None:
            return ElectoralProfile()
        return self.electoral.get(constituency, ElectoralProfile())


def _errors(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())


def load_roster(roster: Mapping, diagnostics: list[Diagnostic]) -> list[Entity]:
    """Validate roster records; malformed ones are excluded with an error."""
    if not isinstance(roster, Mapping):
        raise IngestError(f"Roster must be a mapping, got {type(roster).__name__}")

    entities = []
    seen: set[str] = set()
    for name, record in roster.items():
        label = str(name) if name is not None else None
        if not isinstance(record, Mapping):
            diagnostics.append(
                Diagnostic(Severity.ERROR, DiagnosticCode.MALFORMED_ENTITY, "Record is not a mapping", label)
            )
            logger.debug("Skipping roster entry {}: not a mapping", label)
            continue
        try:
            parsed = RosterRecordSchema.model_validate({**record, "name": name})
        except ValidationError as e:
            diagnostics.append(Diagnostic(Severity.ERROR, DiagnosticCode.MALFORMED_ENTITY, _errors(e), label))
            logger.debug("Skipping roster entry {}: {}", label, _errors(e))
            continue

        if parsed.name in seen:
            diagnostics.append(Diagnostic(Severity.ERROR, DiagnosticCode.MALFORMED_ENTITY, "Duplicate name", label))
            continue
        seen.add(parsed.name)

        entities.append(
            Entity(
                name=parsed.name,
                affiliation=parsed.affiliation,
                constituency=parsed.constituency,
                holdings=parsed.holdings,
                holds_executive_office=parsed.holds_executive_office,
            )
        )

    logger.info("Loaded {} of {} roster entries", len(entities), len(roster))
    return entities


def load_sourced_votes(
    votes: Mapping | None,
    slate: Sequence[TrackedLegislativeEvent],
    known_names: set[str],
    diagnostics: list[Diagnostic],
) -> dict[str, list[VoteRecord]] | None:
    """Validate sourced votes against the slate. None when the dataset is absent."""
    if votes is None:
        diagnostics.append(
            Diagnostic(Severity.INFO, DiagnosticCode.MISSING_DATASET, "No sourced voting data; holders will be synthesized")
        )
        return None
    if not isinstance(votes, Mapping):
        diagnostics.append(
            Diagnostic(
                Severity.WARNING,
                DiagnosticCode.MALFORMED_VOTE,
                f"Voting dataset must be a mapping, got {type(votes).__name__}; treated as absent",
            )
        )
        logger.warning("Voting dataset is a {}, ignoring it", type(votes).__name__)
        return None

    events = {event.id: event for event in slate}
    result: dict[str, list[VoteRecord]] = {}

    for name, entries in votes.items():
        if name not in known_names:
            diagnostics.append(
                Diagnostic(Severity.WARNING, DiagnosticCode.UNKNOWN_ENTITY, "Votes for name not on roster", str(name))
            )
            continue
        if entries is None:
            entries = []
        if not isinstance(entries, (list, tuple)):
            diagnostics.append(
                Diagnostic(
                    Severity.WARNING,
                    DiagnosticCode.MALFORMED_VOTE,
                    f"Vote list must be a list, got {type(entries).__name__}",
                    name,
                )
            )
            continue

        records: dict[str, VoteRecord] = {}
        for entry in entries:
            try:
                parsed = SourcedVoteSchema.model_validate(entry)
            except ValidationError as e:
                diagnostics.append(Diagnostic(Severity.WARNING, DiagnosticCode.MALFORMED_VOTE, _errors(e), name))
                continue

            event = events.get(parsed.event_id)
            if event is None:
                diagnostics.append(
                    Diagnostic(
                        Severity.WARNING,
                        DiagnosticCode.MALFORMED_VOTE,
                        f"Untracked event: {parsed.event_id}",
                        name,
                    )
                )
                continue
            # Last record per event wins
            records[event.id] = VoteRecord.for_event(event, parsed.outcome)

        if records:
            result[name] = [records[e.id] for e in slate if e.id in records]

    logger.info("Loaded sourced votes for {} entities", len(result))
    return result


def load_electoral(electoral: Mapping | None, diagnostics: list[Diagnostic]) -> dict[str, ElectoralProfile] | None:
    """Validate electoral margins. Malformed constituencies degrade to unknown."""
    if electoral is None:
        diagnostics.append(
            Diagnostic(Severity.INFO, DiagnosticCode.MISSING_DATASET, "No electoral data; all margins unknown")
        )
        return None
    if not isinstance(electoral, Mapping):
        diagnostics.append(
            Diagnostic(
                Severity.WARNING,
                DiagnosticCode.MALFORMED_ELECTORAL,
                f"Electoral dataset must be a mapping, got {type(electoral).__name__}; treated as absent",
            )
        )
        logger.warning("Electoral dataset is a {}, ignoring it", type(electoral).__name__)
        return None

    result: dict[str, ElectoralProfile] = {}
    for constituency, record in electoral.items():
        try:
            parsed = ElectoralRecordSchema.model_validate(record)
        except ValidationError as e:
            diagnostics.append(
                Diagnostic(
                    Severity.WARNING,
                    DiagnosticCode.MALFORMED_ELECTORAL,
                    f"{constituency}: {_errors(e)}",
                )
            )
            continue
        result[constituency] = ElectoralProfile(
            margin_percentage=parsed.margin_percentage,
            votes_to_flip=parsed.votes_to_flip,
        )

    logger.info("Loaded electoral data for {} constituencies", len(result))
    return result


def build_store(
    roster: Mapping,
    votes: Mapping | None = None,
    electoral: Mapping | None = None,
    slate: Sequence[TrackedLegislativeEvent] = DEFAULT_SLATE,
) -> RecordStore:
    """Load all three datasets into a RecordStore."""
    diagnostics: list[Diagnostic] = []
    entities = load_roster(roster, diagnostics)
    names = {e.name for e in entities}

    return RecordStore(
        entities=entities,
        slate=tuple(slate),
        sourced_votes=load_sourced_votes(votes, slate, names, diagnostics),
        electoral=load_electoral(electoral, diagnostics),
        diagnostics=diagnostics,
    )
