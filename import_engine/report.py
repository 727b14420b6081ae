"""
import_engine.report - Structured result of an import run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from import_engine.records import FailureEntry


@dataclass
class EntityStats:
    processed: int = 0
    inserted: int = 0
    updated: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> str:
        if not self.processed:
            return "0%"
        return f"{(self.processed - self.failed) / self.processed * 100:.2f}%"


@dataclass
class ImportStats:
    families: EntityStats = field(default_factory=EntityStats)
    products: EntityStats = field(default_factory=EntityStats)

    def to_dict(self) -> dict:
        d: dict[str, int] = {}
        for prefix, s in (("families", self.families), ("products", self.products)):
            d[f"{prefix}Processed"] = s.processed
            d[f"{prefix}Inserted"]  = s.inserted
            d[f"{prefix}Updated"]   = s.updated
            d[f"{prefix}Failed"]    = s.failed
        return d


@dataclass
class ImportResult:
    stats: ImportStats
    family_failures: list[FailureEntry] = field(default_factory=list)
    product_failures: list[FailureEntry] = field(default_factory=list)
    failure_files: dict[str, Optional[str]] = field(
        default_factory=lambda: {"families": None, "products": None}
    )
    duration_ms: int = 0

    def to_dict(self) -> dict:
        return {
            "stats": self.stats.to_dict(),
            "failureFiles": dict(self.failure_files),
            "duration": self.duration_ms,
        }
