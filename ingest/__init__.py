"""Ingest package - normalize parsed inputs into the record store."""

from ingest.store import RecordStore, build_store
from ingest.validation import validate_store

__all__ = [
    "RecordStore",
    "build_store",
    "validate_store",
]
