"""
import_engine.field_map - Column-name ↔ record-field mapping.

Each record field accepts a handful of header spellings so exports
from spreadsheets ("Family Code") and from other systems
("familyCode", "family_code") import without editing the header row.
Matching is case- and whitespace-insensitive.
"""

# record field  →  accepted CSV headers
FAMILY_COLUMNS: dict[str, list[str]] = {
    "code":         ["familyCode", "family_code", "Family Code", "code"],
    "name":         ["familyName", "family_name", "Family Name", "name"],
    "product_line": ["productLine", "product_line", "Product Line"],
    "brand":        ["brand", "Brand"],
    "status":       ["status", "Status"],
}

PRODUCT_COLUMNS: dict[str, list[str]] = {
    "sku":          ["sku", "SKU"],
    "name":         ["name", "productName", "product_name", "Product Name"],
    "family_code":  ["familyCode", "family_code", "Family Code"],
    "ean_upc":      ["eanUpc", "ean_upc", "EAN/UPC", "EAN UPC", "ean"],
    "vehicle_type": ["vehicleType", "vehicle_type", "Vehicle Type"],
}

# Fields that become None instead of "" when the cell is blank
OPTIONAL_FIELDS = frozenset({"vehicle_type"})

# Field carrying the record identity, reported in failure entries
FAMILY_KEY  = "code"
PRODUCT_KEY = "sku"
