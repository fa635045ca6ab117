"""Integration tests for cart endpoints via TestClient."""

import pytest
from fastapi.testclient import TestClient


def _add(client, product_id, quantity=1):
    return client.post("/cart/add", json={"product_id": product_id, "quantity": quantity})


class TestViewCart:
    def test_new_session_has_empty_cart(self, client):
        response = client.get("/cart")
        assert response.status_code == 200
        assert response.json()["cart"] == {"items": [], "total": 0, "item_count": 0}

    def test_cart_count_header(self, client):
        _add(client, "p1", 2)
        response = client.get("/cart")
        assert response.headers["X-Cart-Count"] == "2"


class TestAddToCart:
    def test_add(self, client):
        response = _add(client, "p1", "2")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product added to cart."
        assert body["cart"]["total"] == 200
        assert body["cart"]["items"][0]["quantity"] == 2

    def test_add_accumulates(self, client):
        _add(client, "p1", 2)
        body = _add(client, "p1", 3).json()
        assert [(i["product_id"], i["quantity"]) for i in body["cart"]["items"]] == [("p1", 5)]

    def test_malformed_quantity_adds_one(self, client):
        body = _add(client, "p2", "plenty").json()
        assert body["cart"]["items"][0]["quantity"] == 1

    def test_unknown_product(self, client):
        response = _add(client, "nope", 1)

        assert response.status_code == 400
        assert response.json() == {"errors": {"product_id": "Invalid product"}}
        assert client.get("/cart").json()["cart"]["items"] == []

    def test_carts_are_per_session(self, client):
        _add(client, "p1", 2)
        other = TestClient(client.app)
        assert other.get("/cart").json()["cart"]["items"] == []

    @pytest.mark.parametrize("quantity", [[3], {"n": 3}, True, None])
    def test_non_numeric_json_quantity_adds_one(self, client, quantity):
        response = _add(client, "p1", quantity)

        assert response.status_code == 200
        assert response.json()["cart"]["items"][0]["quantity"] == 1


class TestUpdateAndRemove:
    def test_update_quantity(self, client):
        _add(client, "p1", 2)
        body = client.post("/cart/update", json={"product_id": "p1", "quantity": "4"}).json()
        assert body["cart"]["total"] == 400
        assert body["message"] == "Cart updated."

    def test_update_to_zero_removes(self, client):
        _add(client, "p1", 2)
        _add(client, "p2", 1)
        body = client.post("/cart/update", json={"product_id": "p1", "quantity": 0}).json()
        assert [i["product_id"] for i in body["cart"]["items"]] == ["p2"]

    def test_non_numeric_json_update_removes(self, client):
        _add(client, "p1", 2)
        response = client.post("/cart/update", json={"product_id": "p1", "quantity": [5]})
        assert response.status_code == 200
        assert response.json()["cart"]["items"] == []

    def test_remove(self, client):
        _add(client, "p1", 2)
        response = client.post("/cart/remove", json={"product_id": "p1"})
        assert response.status_code == 200
        assert response.json()["cart"]["items"] == []

    def test_remove_absent_is_noop(self, client):
        _add(client, "p1", 2)
        body = client.post("/cart/remove", json={"product_id": "p3"}).json()
        assert body["cart"]["total"] == 200

    def test_vanished_product_disappears_from_cart(self, client, product_records):
        _add(client, "p1", 2)
        _add(client, "p3", 1)
        with product_records.transaction() as records:
            records[:] = [r for r in records if r["id"] != "p3"]

        body = client.get("/cart").json()

        assert [i["product_id"] for i in body["cart"]["items"]] == ["p1"]
        assert body["cart"]["total"] == 200
