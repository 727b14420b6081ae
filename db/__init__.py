"""
db - Database layer.

Public API:
    init_db()           → create engine + tables
    get_session()       → new Session
    check_connection()  → liveness probe
    Family, Product     → ORM models
"""

from db.engine import init_db, get_session, check_connection   # noqa: F401
from db.models import Base, Family, Product, FAMILY_STATUSES   # noqa: F401
