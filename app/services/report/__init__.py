"""Report services."""

from app.services.report.assembler import ReportAssembler, to_entry

__all__ = [
    "ReportAssembler",
    "to_entry",
]
