"""
import_engine.references - Cross-entity checks for product rows.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from import_engine.errors import MissingFamilyError
from import_engine.records import ImportRecord
from services.catalog_service import CatalogService


class ReferenceChecker:
    """
    Runs inside the import's own session: a family inserted earlier in
    the batch is already flushed and therefore visible here.
    """

    def __init__(self, session: Session):
        self.session = session

    def family_exists(self, code: str) -> bool:
        return CatalogService.family_exists(self.session, code)

    def check_product(self, record: ImportRecord) -> None:
        """Raise MissingFamilyError when the product's family is unknown."""
        code = record.get("family_code")
        if not self.family_exists(code):
            raise MissingFamilyError(code)
