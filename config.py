"""
Catalog - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.  A .env file next to the
process working directory is honoured.
"""

from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR    = Path(__file__).resolve().parent
FAILURE_DIR = Path(os.environ.get("CATALOG_FAILURE_DIR", BASE_DIR / "failures"))

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("CATALOG_DB", f"sqlite:///{BASE_DIR / 'catalog.sqlite'}")

# ── Import ─────────────────────────────────────────────────────────────
CSV_DELIMITER   = os.environ.get("CATALOG_CSV_DELIMITER", ";")
MAX_UPLOAD_SIZE = int(os.environ.get("CATALOG_MAX_UPLOAD", str(5 * 1024 * 1024)))

# ── Server ─────────────────────────────────────────────────────────────
HOST      = os.environ.get("CATALOG_HOST", "0.0.0.0")
PORT      = int(os.environ.get("CATALOG_PORT", "5000"))
DEBUG     = os.environ.get("CATALOG_DEBUG", "0") == "1"
LOG_LEVEL = os.environ.get("CATALOG_LOG_LEVEL", "INFO").upper()

# ── Pagination ─────────────────────────────────────────────────────────
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE     = 100
