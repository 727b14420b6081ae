"""
db.models - SQLAlchemy ORM declarations.

Tables
------
families  - one row per family code.  Status is constrained to
            ACTIVE / INACTIVE at the database level as well.
products  - one row per SKU.  family_code is a foreign key with
            ON UPDATE CASCADE / ON DELETE RESTRICT: renaming a family
            follows through to its products, deleting a family that
            still has products is refused by the database.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, String,
)
from sqlalchemy.orm import DeclarativeBase, relationship


FAMILY_STATUSES = ("ACTIVE", "INACTIVE")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class Family(Base):
    __tablename__ = "families"

    code         = Column(String(50), primary_key=True)            # FAM_WIPERS_001
    name         = Column(String(50), nullable=False)
    product_line = Column(String(50), nullable=False, index=True)
    brand        = Column(String(50), nullable=False, index=True)
    status       = Column(String(8), nullable=False, index=True)

    # ── Timestamps ─────────────────────────────────────────────────────
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    # Deletion is left to the database so RESTRICT is what decides.
    products = relationship(
        "Product", back_populates="family", passive_deletes="all",
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('ACTIVE', 'INACTIVE')", name="ck_family_status",
        ),
    )

    def to_dict(self) -> dict:
        return {
            "familyCode": self.code,
            "familyName": self.name,
            "productLine": self.product_line,
            "brand": self.brand,
            "status": self.status,
        }


class Product(Base):
    __tablename__ = "products"

    sku          = Column(String(50), primary_key=True)            # SKU-10001
    name         = Column(String(200), nullable=False, index=True)
    ean_upc      = Column(String(14), nullable=False)
    vehicle_type = Column(String(50), nullable=True)
    family_code  = Column(
        String(50),
        ForeignKey("families.code", onupdate="CASCADE", ondelete="RESTRICT"),
        nullable=False, index=True,
    )

    # ── Timestamps ─────────────────────────────────────────────────────
    created_at = Column(DateTime, default=_utcnow)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    family = relationship("Family", back_populates="products", lazy="selectin")

    def to_dict(self, *, with_family: bool = True) -> dict:
        d = {
            "sku": self.sku,
            "name": self.name,
            "eanUpc": self.ean_upc,
            "vehicleType": self.vehicle_type,
            "familyCode": self.family_code,
            "createdAt": self.created_at.isoformat() if self.created_at else "",
        }
        if with_family and self.family is not None:
            d["family"] = self.family.to_dict()
        return d
