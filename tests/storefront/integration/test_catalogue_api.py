"""Integration tests for catalogue endpoints."""

from fastapi.testclient import TestClient
from storefront.api.application import create_app
from storefront.stores import build_stores, set_stores
from storefront.stores.jsonl_adapter import JsonLinesRecordStore


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "domain": "storefront"}


def test_list_products(client):
    response = client.get("/")
    assert response.status_code == 200
    assert [p["id"] for p in response.json()["products"]] == ["p1", "p2", "p3"]


def test_search_by_name(client):
    body = client.get("/", params={"q": "  MUG "}).json()
    assert [p["id"] for p in body["products"]] == ["p1"]
    assert body["q"] == "MUG"


def test_search_by_description(client):
    body = client.get("/", params={"q": "dot-grid"}).json()
    assert [p["id"] for p in body["products"]] == ["p3"]


def test_product_detail(client):
    response = client.get("/product/p2")
    assert response.status_code == 200
    assert response.json() == {
        "id": "p2",
        "name": "Linen Tote",
        "description": "Natural linen bag with an inside pocket",
        "price": 250,
        "image": "/img/tote.jpg",
    }


def test_unknown_product_is_404(client):
    assert client.get("/product/nope").status_code == 404


def test_unreadable_catalogue_lists_nothing(tmp_path):
    path = tmp_path / "products.jsonl"
    path.write_text("{not json\n", encoding="utf-8")
    set_stores(build_stores({"products": JsonLinesRecordStore("products", path)}))

    response = TestClient(create_app()).get("/")

    assert response.status_code == 200
    assert response.json()["products"] == []
