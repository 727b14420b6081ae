"""
services.catalog_service - Identity lookups and writes on Family / Product.

All session management is the caller's responsibility (open before,
close/commit after).  This keeps the service testable and allows
the caller to batch multiple operations in one transaction.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models import Base, Family, Product


class CatalogService:

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get_family(session: Session, code: str) -> Family | None:
        return session.get(Family, code)

    @staticmethod
    def get_product(session: Session, sku: str) -> Product | None:
        return session.get(Product, sku)

    @staticmethod
    def family_exists(session: Session, code: str) -> bool:
        """
        Checked through the session, so families flushed earlier in the
        same (uncommitted) transaction count as existing.
        """
        if not code:
            return False
        stmt = select(Family.code).where(Family.code == code)
        return session.execute(stmt).first() is not None

    # ── Write ──────────────────────────────────────────────────────────

    @staticmethod
    def insert(session: Session, entity: Base) -> Base:
        session.add(entity)
        session.flush()
        return entity

    @staticmethod
    def update(session: Session, entity: Base, values: dict) -> Base:
        for attr, val in values.items():
            setattr(entity, attr, val)
        session.flush()
        return entity
