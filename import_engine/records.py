"""
import_engine.records - Transient value types that flow through an import.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ImportRecord:
    """One parsed row plus its 1-based data-row number in the source file."""

    row_number: int
    fields: dict[str, Optional[str]] = field(default_factory=dict)

    def get(self, name: str) -> str:
        """Field value as a stripped string ("" when absent)."""
        value = self.fields.get(name)
        return value.strip() if isinstance(value, str) else ""

    def optional(self, name: str) -> Optional[str]:
        value = self.get(name)
        return value or None


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpsertOutcome:
    created: bool


@dataclass(frozen=True)
class FailureEntry:
    row_number: int
    key: str
    reason: str
