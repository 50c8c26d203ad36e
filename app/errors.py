"""Errors and diagnostics for the accountability pipeline."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class AccountabilityError(Exception):
    """Base error."""

    def __init__(self, message: str = "Accountability pipeline error"):
        self.message = message
        super().__init__(self.message)


class IngestError(AccountabilityError):
    """Input dataset cannot be read at all."""


class ScoringError(AccountabilityError):
    """Entity cannot be scored."""


class Severity(StrEnum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class DiagnosticCode(StrEnum):
    MISSING_DATASET = "MISSING_DATASET"
    MALFORMED_ENTITY = "MALFORMED_ENTITY"
    MALFORMED_VOTE = "MALFORMED_VOTE"
    UNKNOWN_ENTITY = "UNKNOWN_ENTITY"
    MALFORMED_ELECTORAL = "MALFORMED_ELECTORAL"
    UNKNOWN_AFFILIATION = "UNKNOWN_AFFILIATION"
    SCORING_FAILED = "SCORING_FAILED"


@dataclass
class Diagnostic(BaseEntity):
    """One warning or error surfaced alongside results."""

    severity: Severity
    code: DiagnosticCode
    message: str
    entity: str | None = None
