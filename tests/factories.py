import factory

from db.models import Family, Product
from import_engine.records import ImportRecord


class FamilyFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Factory for creating Family rows."""

    class Meta:
        model = Family
        sqlalchemy_session_persistence = "commit"

    code = factory.Sequence(lambda n: f"FAM_TEST_{n:03d}")
    name = factory.Sequence(lambda n: f"Family {n}")
    product_line = factory.Faker("random_element", elements=["WIPERS", "FILTRATION", "ENGINE COOLING"])
    brand = "VALEO"
    status = "ACTIVE"


class ProductFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Factory for creating Product rows attached to a family."""

    class Meta:
        model = Product
        sqlalchemy_session_persistence = "commit"

    sku = factory.Sequence(lambda n: f"SKU-{10000 + n}")
    name = factory.Sequence(lambda n: f"Product {n}")
    ean_upc = factory.Sequence(lambda n: f"{4000000000000 + n}")
    vehicle_type = factory.Faker("random_element", elements=["CAR", "TRUCK", None])
    family = factory.SubFactory(FamilyFactory)
    family_code = factory.SelfAttribute("family.code")


def family_record(row, code, name="Wiper Blades", product_line="WIPERS",
                  brand="VALEO", status="ACTIVE"):
    """Build a parsed family row the way csv_parser would."""
    return ImportRecord(row_number=row, fields={
        "code": code, "name": name, "product_line": product_line,
        "brand": brand, "status": status,
    })


def product_record(row, sku, family_code, name="Flat Blade 600mm",
                   ean_upc="3276424000001", vehicle_type="CAR"):
    """Build a parsed product row the way csv_parser would."""
    return ImportRecord(row_number=row, fields={
        "sku": sku, "name": name, "family_code": family_code,
        "ean_upc": ean_upc, "vehicle_type": vehicle_type,
    })
