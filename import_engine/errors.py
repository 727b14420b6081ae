"""
import_engine.errors - Exception taxonomy of the import pipeline.

RecordError and its subclasses are record-level: the orchestrator
turns them into failure entries and moves on to the next row.
ImportAbortedError is batch-level: the unit of work has been rolled
back and nothing from the batch was persisted.
"""

from __future__ import annotations


class RecordError(Exception):
    """Raised when a single row cannot be imported."""
    pass


class ValidationFailed(RecordError):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class MissingFamilyError(RecordError):
    def __init__(self, family_code: str):
        self.family_code = family_code
        super().__init__(f"family not found: {family_code}")


class ConstraintViolation(RecordError):
    """Storage refused the write (duplicate identity, foreign key)."""
    pass


class ImportAbortedError(Exception):
    """Infrastructure failure; the whole batch was discarded."""
    pass


class CsvFormatError(ValueError):
    """An input file cannot be read as a delimited table."""
    pass
