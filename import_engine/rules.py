"""
import_engine.rules - Field rules used by the record validator.

ValidationRules is immutable and handed to RecordValidator at
construction, so validators with different rule sets can coexist
(e.g. a stricter product-line list in one test).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from db.models import FAMILY_STATUSES


@dataclass(frozen=True)
class ValidationRules:
    family_code_pattern: re.Pattern = re.compile(r"^FAM_[A-Z_]+_\d{3}$", re.ASCII)
    sku_pattern:         re.Pattern = re.compile(r"^SKU-\d+$", re.ASCII)

    # identity columns are String(50)
    family_code_max:  int = 50
    sku_max:          int = 50

    family_name_max:  int = 50
    product_line_max: int = 50
    brand_max:        int = 50
    product_name_max: int = 200
    vehicle_type_max: int = 50

    ean_upc_min: int = 8
    ean_upc_max: int = 14

    statuses: frozenset[str] = frozenset(FAMILY_STATUSES)
    # None → product line is free text
    product_lines: Optional[frozenset[str]] = None


DEFAULT_RULES = ValidationRules()
