"""
import_engine - Family / product CSV import pipeline.

Public API:
    run_import(families_csv, products_csv) → ImportResult
    process_import(family_records, product_records) → ImportResult
"""

from import_engine.importer import run_import, process_import        # noqa: F401
from import_engine.report import ImportResult, ImportStats            # noqa: F401
from import_engine.records import ImportRecord, FailureEntry          # noqa: F401
from import_engine.errors import (                                    # noqa: F401
    RecordError,
    ImportAbortedError,
    CsvFormatError,
)
from import_engine.failures import FailureReporter                   # noqa: F401
