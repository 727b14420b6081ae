"""
import_engine.failures - Write rejected rows to a downloadable CSV.

One file per entity type and run:
    <failure_dir>/<UTC timestamp>-<entity_type>_failures.csv
Columns are rowNumber;<key column>;reason, rows in input order.
Reasons containing the delimiter, quotes or newlines are quoted by
the csv module.  Nothing is written for an empty failure list.
"""

from __future__ import annotations

import csv
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

import config
from import_engine.records import FailureEntry

logger = logging.getLogger(__name__)

KEY_COLUMNS = {
    "families": "familyCode",
    "products": "sku",
}


class FailureReporter:

    def __init__(self, failure_dir: Path | str | None = None, delimiter: Optional[str] = None):
        self.failure_dir = Path(failure_dir or config.FAILURE_DIR)
        self.delimiter = delimiter or config.CSV_DELIMITER

    def export(self, entity_type: str, failures: Sequence[FailureEntry]) -> Optional[str]:
        """Return the path of the written report, or None when there was nothing to write."""
        if not failures:
            logger.info("No %s failures to export", entity_type)
            return None

        self.failure_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self.failure_dir / f"{timestamp}-{entity_type}_failures.csv"

        with open(path, "w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, delimiter=self.delimiter)
            writer.writerow(["rowNumber", KEY_COLUMNS.get(entity_type, "key"), "reason"])
            for f in failures:
                writer.writerow([f.row_number, f.key, f.reason])

        logger.info("Exported %d %s failures to %s", len(failures), entity_type, path)
        return str(path)

    def resolve(self, name: str) -> Optional[Path]:
        """Map a report file name back to its path; None if unknown."""
        candidate = self.failure_dir / Path(name).name
        return candidate if candidate.is_file() else None
