"""
import_engine.importer - Top-level orchestrator.

Coordinates validator → reference checker → upsert executor for the
two entity types, inside one unit of work, and produces an
ImportResult with per-entity stats and failure report locations.

Ordering: every family row is handled before the first product row,
because products may point at families created by the same batch.
Record-level problems (RecordError) become failure entries and the
batch carries on; anything else aborts the batch and rolls it back.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.engine import get_session
from import_engine.csv_parser import parse_families, parse_products
from import_engine.errors import ImportAbortedError, RecordError, ValidationFailed
from import_engine.failures import FailureReporter
from import_engine.field_map import FAMILY_KEY, PRODUCT_KEY
from import_engine.records import FailureEntry, ImportRecord, UpsertOutcome, ValidationResult
from import_engine.references import ReferenceChecker
from import_engine.report import EntityStats, ImportResult, ImportStats
from import_engine.rules import DEFAULT_RULES, ValidationRules
from import_engine.unit_of_work import UnitOfWork
from import_engine.upsert import UpsertExecutor
from import_engine.validator import RecordValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityHandler:
    """The per-entity pieces a BatchProcessor needs."""

    entity_type: str
    key_field: str
    validate: Callable[[ImportRecord], ValidationResult]
    upsert: Callable[[ImportRecord], UpsertOutcome]
    check_references: Optional[Callable[[ImportRecord], None]] = None


class BatchProcessor:
    """Runs one entity's records in input order, collecting failures."""

    def __init__(self, handler: EntityHandler, stats: EntityStats):
        self.handler = handler
        self.stats = stats
        self.failures: list[FailureEntry] = []

    def run(self, records: Sequence[ImportRecord]) -> list[FailureEntry]:
        h = self.handler
        started = time.perf_counter()

        for record in records:
            self.stats.processed += 1
            key = record.get(h.key_field)
            try:
                outcome = self._process(record)
            except RecordError as exc:
                self.stats.failed += 1
                self.failures.append(FailureEntry(record.row_number, key, str(exc)))
                logger.warning("%s row %d (%s) rejected: %s",
                               h.entity_type, record.row_number, key or "-", exc)
                continue

            if outcome.created:
                self.stats.inserted += 1
            else:
                self.stats.updated += 1
            logger.debug("%s row %d (%s) %s", h.entity_type, record.row_number, key,
                         "inserted" if outcome.created else "updated")

        logger.info(
            "%s: %d processed, %d inserted, %d updated, %d failed (%s ok) in %dms",
            h.entity_type, self.stats.processed, self.stats.inserted,
            self.stats.updated, self.stats.failed, self.stats.success_rate,
            _elapsed_ms(started),
        )
        return self.failures

    def _process(self, record: ImportRecord) -> UpsertOutcome:
        h = self.handler
        verdict = h.validate(record)
        if not verdict.valid:
            raise ValidationFailed(verdict.errors)
        if h.check_references is not None:
            h.check_references(record)
        return h.upsert(record)


def build_handlers(session: Session, validator: RecordValidator) -> tuple[EntityHandler, EntityHandler]:
    """Wire the family and product handlers to one session."""
    executor = UpsertExecutor(session)
    references = ReferenceChecker(session)
    families = EntityHandler(
        entity_type="families",
        key_field=FAMILY_KEY,
        validate=validator.validate_family,
        upsert=executor.upsert_family,
    )
    products = EntityHandler(
        entity_type="products",
        key_field=PRODUCT_KEY,
        validate=validator.validate_product,
        upsert=executor.upsert_product,
        check_references=references.check_product,
    )
    return families, products


def process_import(
    family_records: Sequence[ImportRecord],
    product_records: Sequence[ImportRecord],
    *,
    session_factory: Callable[[], Session] = get_session,
    reporter: Optional[FailureReporter] = None,
    rules: ValidationRules = DEFAULT_RULES,
) -> ImportResult:
    """
    Import already-parsed family and product rows.

    Parameters
    ----------
    family_records, product_records : rows in source order
    session_factory : returns a fresh Session (defaults to db.get_session)
    reporter : where failure reports go (defaults to config.FAILURE_DIR)
    rules : field rules for the validator

    Returns
    -------
    ImportResult; raises ImportAbortedError on infrastructure failure,
    in which case nothing from the batch is persisted.
    """
    started = time.perf_counter()
    reporter = reporter or FailureReporter()
    validator = RecordValidator(rules)
    stats = ImportStats()

    logger.info("Import started: %d families, %d products",
                len(family_records), len(product_records))

    try:
        with UnitOfWork(session_factory) as uow:
            family_handler, product_handler = build_handlers(uow.session, validator)
            family_failures = BatchProcessor(family_handler, stats.families).run(family_records)
            product_failures = BatchProcessor(product_handler, stats.products).run(product_records)
            uow.commit()
    except SQLAlchemyError as exc:
        logger.exception("Import aborted, batch rolled back")
        raise ImportAbortedError(f"Import aborted by storage error: {exc}") from exc

    result = ImportResult(
        stats=stats,
        family_failures=family_failures,
        product_failures=product_failures,
    )
    result.failure_files["families"] = reporter.export("families", family_failures)
    result.failure_files["products"] = reporter.export("products", product_failures)
    result.duration_ms = _elapsed_ms(started)

    logger.info("Import finished in %dms: %s", result.duration_ms, stats.to_dict())
    return result


def run_import(
    families_content: str | bytes,
    products_content: str | bytes,
    **kwargs,
) -> ImportResult:
    """Parse two CSV blobs and import them.  Raises CsvFormatError on unreadable input."""
    return process_import(
        parse_families(families_content),
        parse_products(products_content),
        **kwargs,
    )


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
