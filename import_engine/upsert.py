"""
import_engine.upsert - Insert-or-update of one validated record.

Each call runs in its own SAVEPOINT.  A constraint violation rolls
back only that savepoint (no half-written row) and is reported as a
record-level ConstraintViolation; the surrounding unit of work stays
usable for the remaining rows.  Any other database error propagates.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from db.models import Family, Product
from import_engine.errors import ConstraintViolation
from import_engine.records import ImportRecord, UpsertOutcome
from services.catalog_service import CatalogService


class UpsertExecutor:

    def __init__(self, session: Session):
        self.session = session

    def upsert_family(self, record: ImportRecord) -> UpsertOutcome:
        code = record.get("code")
        values = {
            "name": record.get("name"),
            "product_line": record.get("product_line"),
            "brand": record.get("brand"),
            "status": record.get("status"),
        }
        return self._upsert(
            lambda: CatalogService.get_family(self.session, code),
            lambda: Family(code=code, **values),
            values,
            f"family {code}",
        )

    def upsert_product(self, record: ImportRecord) -> UpsertOutcome:
        sku = record.get("sku")
        values = {
            "name": record.get("name"),
            "ean_upc": record.get("ean_upc"),
            "vehicle_type": record.optional("vehicle_type"),
            "family_code": record.get("family_code"),
        }
        return self._upsert(
            lambda: CatalogService.get_product(self.session, sku),
            lambda: Product(sku=sku, **values),
            values,
            f"product {sku}",
        )

    # ── Private helpers ────────────────────────────────────────────────

    def _upsert(self, find, build, values: dict, label: str) -> UpsertOutcome:
        try:
            with self.session.begin_nested():
                existing = find()
                if existing is None:
                    CatalogService.insert(self.session, build())
                    return UpsertOutcome(created=True)
                CatalogService.update(self.session, existing, values)
                return UpsertOutcome(created=False)
        except IntegrityError as exc:
            raise ConstraintViolation(
                f"{label} rejected by storage: {exc.orig}"
            ) from exc
