"""
import_engine.validator - Field-level checks on a single ImportRecord.

Pure: no session, no I/O.  Every check runs and every violation is
collected, so a rejected row carries its complete list of problems.
"""

from __future__ import annotations

from import_engine.records import ImportRecord, ValidationResult
from import_engine.rules import DEFAULT_RULES, ValidationRules


class RecordValidator:

    def __init__(self, rules: ValidationRules = DEFAULT_RULES):
        self.rules = rules

    # ── Families ───────────────────────────────────────────────────────

    def validate_family(self, record: ImportRecord) -> ValidationResult:
        r = self.rules
        errors: list[str] = []

        code = record.get("code")
        if not code:
            errors.append("Family Code is required")
        elif len(code) > r.family_code_max:
            errors.append(f"Family Code must be at most {r.family_code_max} characters")
        elif not r.family_code_pattern.match(code):
            errors.append(f"Family Code must match pattern (e.g., FAM_WIPERS_001), got {code!r}")

        self._check_text(errors, record.get("name"), "Family Name", r.family_name_max)
        self._check_text(errors, record.get("brand"), "Brand", r.brand_max)

        line = record.get("product_line")
        if self._check_text(errors, line, "Product Line", r.product_line_max):
            if r.product_lines is not None and line not in r.product_lines:
                allowed = ", ".join(sorted(r.product_lines))
                errors.append(f"Product Line must be one of: {allowed}")

        status = record.get("status")
        if not status:
            errors.append("Status is required")
        elif status not in r.statuses:
            errors.append(f"Status must be either {' or '.join(sorted(r.statuses))}")

        return ValidationResult(valid=not errors, errors=errors)

    # ── Products ───────────────────────────────────────────────────────

    def validate_product(self, record: ImportRecord) -> ValidationResult:
        r = self.rules
        errors: list[str] = []

        sku = record.get("sku")
        if not sku:
            errors.append("SKU is required")
        elif len(sku) > r.sku_max:
            errors.append(f"SKU must be at most {r.sku_max} characters")
        elif not r.sku_pattern.match(sku):
            errors.append(f"SKU must match pattern (e.g., SKU-12345), got {sku!r}")

        self._check_text(errors, record.get("name"), "Product Name", r.product_name_max)

        ean = record.get("ean_upc")
        if not ean:
            errors.append("EAN/UPC is required")
        else:
            if not ean.isdigit() or not ean.isascii():
                errors.append("EAN/UPC must contain only digits")
            if not r.ean_upc_min <= len(ean) <= r.ean_upc_max:
                errors.append(
                    f"EAN/UPC length must be between {r.ean_upc_min} and "
                    f"{r.ean_upc_max} digits, got {len(ean)}"
                )

        # Existence is the reference checker's job
        family_code = record.get("family_code")
        if not family_code:
            errors.append("Family Code is required")
        elif len(family_code) > r.family_code_max:
            errors.append(f"Family Code must be at most {r.family_code_max} characters")

        vehicle = record.get("vehicle_type")
        if vehicle and len(vehicle) > r.vehicle_type_max:
            errors.append(f"Vehicle Type must be at most {r.vehicle_type_max} characters")

        return ValidationResult(valid=not errors, errors=errors)

    # ── Private helpers ────────────────────────────────────────────────

    @staticmethod
    def _check_text(errors: list[str], value: str, label: str, max_len: int) -> bool:
        """Required + bounded.  Returns True when the value passed."""
        if not value:
            errors.append(f"{label} is required")
            return False
        if len(value) > max_len:
            errors.append(f"{label} must be between 1 and {max_len} characters")
            return False
        return True
