"""
import_engine.csv_parser - Low-level CSV reading and cleaning.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Header whitespace stripping
  • Header alias resolution (see field_map)
  • Turning rows into ImportRecords numbered from 1 (first data row)
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Optional

import config
from import_engine.errors import CsvFormatError
from import_engine.field_map import FAMILY_COLUMNS, PRODUCT_COLUMNS, OPTIONAL_FIELDS
from import_engine.records import ImportRecord

logger = logging.getLogger(__name__)


def prepare_reader(raw: str | bytes, delimiter: Optional[str] = None) -> Optional[csv.DictReader]:
    """
    Accept raw file content (bytes or str), clean it,
    and return a DictReader.  Returns None if content is empty.
    """
    text = _decode(raw)
    if not text or not text.strip():
        return None

    reader = csv.DictReader(io.StringIO(text), delimiter=delimiter or config.CSV_DELIMITER)
    if reader.fieldnames is None:
        return None

    # Strip whitespace from every header
    reader.fieldnames = [h.strip() for h in reader.fieldnames]
    return reader


def parse_families(raw: str | bytes, delimiter: Optional[str] = None) -> list[ImportRecord]:
    return _parse(raw, FAMILY_COLUMNS, "families", delimiter)


def parse_products(raw: str | bytes, delimiter: Optional[str] = None) -> list[ImportRecord]:
    return _parse(raw, PRODUCT_COLUMNS, "products", delimiter)


# ── Private helpers ────────────────────────────────────────────────────

def _parse(
    raw: str | bytes,
    columns: dict[str, list[str]],
    label: str,
    delimiter: Optional[str],
) -> list[ImportRecord]:
    reader = prepare_reader(raw, delimiter)
    if reader is None:
        raise CsvFormatError(f"{label} CSV has no header row or is empty")

    header_for = _resolve_headers(reader.fieldnames, columns)
    missing = sorted(set(columns) - set(header_for))
    if missing:
        # Rows will still be validated; the absent fields simply read as empty.
        logger.warning("%s CSV lacks columns for: %s", label, ", ".join(missing))

    records: list[ImportRecord] = []
    for row_number, row in enumerate(reader, start=1):
        fields: dict[str, Optional[str]] = {}
        for name in columns:
            header = header_for.get(name)
            value = (row.get(header) or "").strip() if header else ""
            fields[name] = value or (None if name in OPTIONAL_FIELDS else "")
        records.append(ImportRecord(row_number=row_number, fields=fields))

    logger.info("Parsed %d %s rows", len(records), label)
    return records


def _resolve_headers(fieldnames: list[str], columns: dict[str, list[str]]) -> dict[str, str]:
    """Return {record field → actual header} for every alias found."""
    by_norm = {_norm(h): h for h in fieldnames}
    resolved: dict[str, str] = {}
    for name, aliases in columns.items():
        for alias in aliases:
            header = by_norm.get(_norm(alias))
            if header is not None:
                resolved[name] = header
                break
    return resolved


def _norm(header: str) -> str:
    return "".join(header.split()).casefold()


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        # Strip UTF-8 BOM
        if raw.startswith(b"\xef\xbb\xbf"):
            raw = raw[3:]
        return raw.decode("utf-8", errors="replace")
    if raw.startswith("\ufeff"):
        return raw[1:]
    return raw
