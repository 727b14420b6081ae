"""
services.search_service - Filtered, paginated product listing.

Product columns (SKU, name) match partially and case-insensitively;
family columns (code, product line, brand, status) match exactly
through an inner join on the product's family.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.orm import Session

import config
from db.models import Family, Product


@dataclass(frozen=True)
class Page:
    items: list[Product]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    def pagination(self) -> dict:
        return {
            "currentPage": self.page,
            "pageSize": self.page_size,
            "totalResults": self.total,
            "totalPages": self.total_pages,
            "hasNextPage": self.page < self.total_pages,
            "hasPreviousPage": self.page > 1,
        }


class SearchService:

    @staticmethod
    def search(
        session: Session,
        *,
        family_code: str = "",
        product_line: str = "",
        brand: str = "",
        status: str = "",
        sku: str = "",
        name: str = "",
        page: int = 1,
        limit: int = config.DEFAULT_PAGE_SIZE,
    ) -> Page:
        page, limit = SearchService.clamp_paging(page, limit)

        stmt = select(Product).join(Product.family)
        if sku:
            stmt = stmt.where(Product.sku.ilike(f"%{sku}%"))
        if name:
            stmt = stmt.where(Product.name.ilike(f"%{name}%"))
        if family_code:
            stmt = stmt.where(Family.code == family_code)
        if product_line:
            stmt = stmt.where(Family.product_line == product_line)
        if brand:
            stmt = stmt.where(Family.brand == brand)
        if status:
            stmt = stmt.where(Family.status == status)

        total = session.execute(
            select(func.count()).select_from(stmt.subquery())
        ).scalar_one()
        items = session.execute(
            stmt.order_by(Product.sku.asc()).offset((page - 1) * limit).limit(limit)
        ).scalars().all()

        return Page(items=list(items), page=page, page_size=limit, total=total)

    @staticmethod
    def clamp_paging(page, limit) -> tuple[int, int]:
        """Coerce page to >= 1 and limit to 1..MAX_PAGE_SIZE; junk falls back to defaults."""
        try:
            page = int(page)
        except (TypeError, ValueError):
            page = 1
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            limit = config.DEFAULT_PAGE_SIZE
        return max(1, page), min(max(1, limit), config.MAX_PAGE_SIZE)
