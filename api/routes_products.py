"""
api.routes_products - /api/v1/products search endpoint.
"""

from flask import request, jsonify

from api import api_bp
from db import get_session
from services.search_service import SearchService
import config


@api_bp.route("/products")
def search_products():
    """
    GET /api/v1/products?familyCode=&productLine=&brand=&status=&sku=&name=&page=1&limit=20

    Family filters are exact; sku/name are partial matches.
    Results are ordered by SKU.
    """
    args = request.args
    session = get_session()
    try:
        page = SearchService.search(
            session,
            family_code=args.get("familyCode", "").strip(),
            product_line=args.get("productLine", "").strip(),
            brand=args.get("brand", "").strip(),
            status=args.get("status", "").strip(),
            sku=args.get("sku", "").strip(),
            name=args.get("name", "").strip(),
            page=args.get("page", 1),
            limit=args.get("limit", config.DEFAULT_PAGE_SIZE),
        )
        return jsonify({
            "success": True,
            "data": [p.to_dict() for p in page.items],
            "pagination": page.pagination(),
        })
    finally:
        session.close()
