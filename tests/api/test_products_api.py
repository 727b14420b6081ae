import pytest

import config
from tests.factories import FamilyFactory, ProductFactory


@pytest.fixture
def catalog(session):
    wipers = FamilyFactory(code="FAM_WIPERS_001", product_line="WIPERS", brand="VALEO")
    filters = FamilyFactory(code="FAM_FILTER_001", product_line="FILTRATION",
                            brand="BOSCH", status="INACTIVE")
    ProductFactory(sku="SKU-10003", name="Rear Wiper", family=wipers)
    ProductFactory(sku="SKU-10001", name="Flat Blade 600mm", family=wipers)
    ProductFactory(sku="SKU-10002", name="Flat Blade 450mm", family=wipers)
    ProductFactory(sku="SKU-20001", name="Cabin Filter", family=filters)
    return session


def _skus(response):
    return [p["sku"] for p in response.get_json()["data"]]


def test_list_is_ordered_by_sku(client, catalog):
    response = client.get("/api/v1/products")
    assert response.status_code == 200
    assert _skus(response) == ["SKU-10001", "SKU-10002", "SKU-10003", "SKU-20001"]


def test_family_filters_are_exact(client, catalog):
    assert _skus(client.get("/api/v1/products?productLine=FILTRATION")) == ["SKU-20001"]
    assert _skus(client.get("/api/v1/products?brand=VALE")) == []
    assert _skus(client.get("/api/v1/products?status=INACTIVE")) == ["SKU-20001"]
    assert len(_skus(client.get("/api/v1/products?familyCode=FAM_WIPERS_001"))) == 3


def test_name_and_sku_are_partial_case_insensitive(client, catalog):
    assert _skus(client.get("/api/v1/products?name=flat%20blade")) == ["SKU-10001", "SKU-10002"]
    assert _skus(client.get("/api/v1/products?sku=200")) == ["SKU-20001"]


def test_product_carries_its_family(client, catalog):
    [product] = client.get("/api/v1/products?sku=SKU-20001").get_json()["data"]
    assert product["familyCode"] == "FAM_FILTER_001"
    assert product["family"]["brand"] == "BOSCH"


def test_pagination(client, catalog):
    body = client.get("/api/v1/products?page=2&limit=3").get_json()
    assert [p["sku"] for p in body["data"]] == ["SKU-20001"]
    assert body["pagination"] == {
        "currentPage": 2,
        "pageSize": 3,
        "totalResults": 4,
        "totalPages": 2,
        "hasNextPage": False,
        "hasPreviousPage": True,
    }


def test_pagination_is_clamped(client, catalog):
    body = client.get("/api/v1/products?page=0&limit=100000").get_json()
    assert body["pagination"]["currentPage"] == 1
    assert body["pagination"]["pageSize"] == config.MAX_PAGE_SIZE

    body = client.get("/api/v1/products?page=abc&limit=xyz").get_json()
    assert body["pagination"]["currentPage"] == 1
    assert body["pagination"]["pageSize"] == config.DEFAULT_PAGE_SIZE


def test_empty_catalog(client):
    body = client.get("/api/v1/products").get_json()
    assert body["data"] == []
    assert body["pagination"]["totalPages"] == 0
    assert body["pagination"]["hasNextPage"] is False
