"""
services - Business-logic layer sitting between API and DB.
"""

from services.catalog_service import CatalogService   # noqa: F401
from services.search_service import SearchService     # noqa: F401
