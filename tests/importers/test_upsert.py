import pytest
from sqlalchemy.exc import IntegrityError

from db import get_session, Family, Product
from import_engine.errors import ConstraintViolation
from import_engine.references import ReferenceChecker
from import_engine.unit_of_work import UnitOfWork
from import_engine.upsert import UpsertExecutor
from services.catalog_service import CatalogService
from tests.factories import FamilyFactory, ProductFactory, family_record, product_record


def test_upsert_reports_created_then_updated():
    with UnitOfWork(get_session) as uow:
        executor = UpsertExecutor(uow.session)
        assert executor.upsert_family(family_record(1, "FAM_WIPERS_001")).created is True
        assert executor.upsert_family(family_record(2, "FAM_WIPERS_001", brand="BOSCH")).created is False
        uow.commit()

    with get_session() as s:
        assert s.get(Family, "FAM_WIPERS_001").brand == "BOSCH"


def test_product_upsert_overwrites_mutable_fields(session):
    ProductFactory(sku="SKU-10001", name="Old", vehicle_type="TRUCK")
    FamilyFactory(code="FAM_OTHER_002")

    with UnitOfWork(get_session) as uow:
        outcome = UpsertExecutor(uow.session).upsert_product(
            product_record(1, "SKU-10001", "FAM_OTHER_002", name="New", vehicle_type=None)
        )
        uow.commit()

    assert outcome.created is False
    with get_session() as s:
        p = s.get(Product, "SKU-10001")
        assert (p.name, p.family_code, p.vehicle_type) == ("New", "FAM_OTHER_002", None)


def test_duplicate_identity_race_is_a_record_failure(session, monkeypatch):
    """Another writer inserted the family between our lookup and our insert."""
    FamilyFactory(code="FAM_WIPERS_001", name="Theirs")
    monkeypatch.setattr(CatalogService, "get_family", staticmethod(lambda s, code: None))

    with UnitOfWork(get_session) as uow:
        executor = UpsertExecutor(uow.session)
        with pytest.raises(ConstraintViolation) as excinfo:
            executor.upsert_family(family_record(1, "FAM_WIPERS_001", name="Ours"))
        assert isinstance(excinfo.value.__cause__, IntegrityError)
        assert "family FAM_WIPERS_001 rejected by storage" in str(excinfo.value)

        # The savepoint rolled back; the transaction is still usable.
        assert executor.upsert_family(family_record(2, "FAM_FILTER_002")).created is True
        uow.commit()

    with get_session() as s:
        assert s.get(Family, "FAM_WIPERS_001").name == "Theirs"
        assert s.get(Family, "FAM_FILTER_002") is not None


def test_foreign_key_is_enforced_by_storage():
    """Bypassing the reference checker still cannot create an orphan."""
    with UnitOfWork(get_session) as uow:
        with pytest.raises(ConstraintViolation):
            UpsertExecutor(uow.session).upsert_product(product_record(1, "SKU-1", "FAM_GHOST_001"))
        uow.commit()

    with get_session() as s:
        assert s.get(Product, "SKU-1") is None


def test_family_with_products_cannot_be_deleted(session):
    product = ProductFactory()
    family = session.get(Family, product.family_code)

    session.delete(family)
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_reference_checker_sees_uncommitted_families():
    with UnitOfWork(get_session) as uow:
        checker = ReferenceChecker(uow.session)
        assert checker.family_exists("FAM_WIPERS_001") is False
        UpsertExecutor(uow.session).upsert_family(family_record(1, "FAM_WIPERS_001"))
        assert checker.family_exists("FAM_WIPERS_001") is True
        assert checker.family_exists("") is False


def test_unit_of_work_rolls_back_on_error():
    with pytest.raises(RuntimeError):
        with UnitOfWork(get_session) as uow:
            UpsertExecutor(uow.session).upsert_family(family_record(1, "FAM_WIPERS_001"))
            raise RuntimeError("boom")

    assert uow.active is False
    with get_session() as s:
        assert s.get(Family, "FAM_WIPERS_001") is None


def test_rollback_after_commit_is_a_no_op(monkeypatch):
    with UnitOfWork(get_session) as uow:
        UpsertExecutor(uow.session).upsert_family(family_record(1, "FAM_WIPERS_001"))
        uow.commit()
        assert uow.active is False

        calls = []
        monkeypatch.setattr(uow.session, "rollback", lambda: calls.append(1))
        uow.rollback()
        assert calls == []

    with get_session() as s:
        assert s.get(Family, "FAM_WIPERS_001") is not None
