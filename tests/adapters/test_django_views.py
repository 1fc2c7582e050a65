"""
Tests for the Django adapter — routes, JSON parsing and status mapping.
"""

from __future__ import annotations

import pytest

from adapters.django_api import build_dependencies, reset_dependencies


@pytest.fixture(autouse=True)
def billing_settings(settings):
    settings.BILLING = {
        "LOW_STOCK_THRESHOLD": 3,
        "SEED_DEMO_DATA": True,
        "DEFAULT_PAYMENT_MODE": "paid",
    }
    reset_dependencies()
    yield settings
    reset_dependencies()


def _post(client, url, body):
    return client.post(url, data=body, content_type="application/json")


class TestWiring:
    def test_singleton_until_reset(self):
        first = build_dependencies()
        assert build_dependencies() is first
        reset_dependencies()
        assert build_dependencies() is not first

    def test_seed_flag_off(self, billing_settings):
        billing_settings.BILLING = {"SEED_DEMO_DATA": False}
        reset_dependencies()
        assert build_dependencies().billing_service.list_items() == []


class TestItemsView:
    def test_list_seeded_items(self, client):
        response = client.get("/v1/items")
        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert [i["name"] for i in body["data"]] == ["Item A", "Item B", "Item C"]

    def test_search_query(self, client):
        body = client.get("/v1/items", {"q": "item c"}).json()
        assert [i["id"] for i in body["data"]] == [3]

    def test_create_item(self, client):
        response = _post(client, "/v1/items", {
            "name": "Item D", "price": "12.50", "quantity": 2, "tax_rate": 0,
        })
        assert response.status_code == 200
        assert response.json()["data"]["low_stock"] is True

    def test_missing_field(self, client):
        response = _post(client, "/v1/items", {"name": "Item D"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"
        assert response.json()["error"]["message"] == "price is required."

    def test_oversized_quantity_rejected_without_mutation(self, client):
        response = _post(client, "/v1/items", {
            "name": "Item D", "price": "1", "quantity": "1e5000", "tax_rate": 0,
        })
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_FAILED"
        assert response.json()["error"]["details"]["field"] == "quantity"
        assert len(client.get("/v1/items").json()["data"]) == 3

    def test_method_not_allowed(self, client):
        response = client.delete("/v1/items")
        assert response.status_code == 405
        assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


class TestCartViews:
    def test_add_adjust_remove(self, client):
        response = _post(client, "/v1/cart/add", {"item_id": 1, "quantity": 2})
        assert response.status_code == 200
        assert response.json()["data"]["totals"]["total"] == "220.00"

        response = _post(client, "/v1/cart/adjust", {"item_id": 1, "delta": -1})
        assert response.json()["data"]["lines"][0]["quantity"] == 1

        response = _post(client, "/v1/cart/remove", {"item_id": 1})
        assert response.json()["data"]["lines"] == []

    def test_insufficient_stock_is_conflict(self, client):
        response = _post(client, "/v1/cart/add", {"item_id": 2, "quantity": 6})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INSUFFICIENT_STOCK"

    def test_invalid_json(self, client):
        response = client.post(
            "/v1/cart/add", data="{not json", content_type="application/json",
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_non_object_body(self, client):
        response = client.post(
            "/v1/cart/add", data="[1, 2]", content_type="application/json",
        )
        assert response.status_code == 400

    def test_string_quantity_rejected(self, client):
        response = _post(client, "/v1/cart/add", {"item_id": 1, "quantity": "2"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "quantity must be an integer."

    def test_clear_releases_stock(self, client):
        _post(client, "/v1/cart/add", {"item_id": 1, "quantity": 4})
        response = client.post("/v1/cart/clear")
        assert response.status_code == 200
        service = build_dependencies().billing_service
        assert service.inventory.available(1) == 10

    def test_get_cart_only(self, client):
        assert client.get("/v1/cart").status_code == 200
        assert client.post("/v1/cart").status_code == 405


class TestCustomerViews:
    def test_list_seeded_customers(self, client):
        body = client.get("/v1/customers").json()
        assert [c["available_credit"] for c in body["data"]] == [
            "800.00", "1500.00",
        ]

    def test_register(self, client):
        response = _post(client, "/v1/customers", {
            "name": "Tight Budget", "phone": "555-0000", "credit_limit": 100,
        })
        assert response.status_code == 200
        assert response.json()["data"]["id"] == 3


class TestCheckoutAndHistoryViews:
    def test_paid_checkout(self, client):
        _post(client, "/v1/cart/add", {"item_id": 1, "quantity": 2})
        response = _post(client, "/v1/checkout", {
            "customer_id": 1, "payment_mode": "paid",
        })
        assert response.status_code == 200
        assert response.json()["data"]["message"] == (
            "Purchase completed! Total: $220.00"
        )
        assert client.get("/v1/cart").json()["data"]["lines"] == []

    def test_credit_over_limit(self, client):
        _post(client, "/v1/customers", {
            "name": "Tight Budget", "phone": "555-0000", "credit_limit": 100,
        })
        _post(client, "/v1/cart/add", {"item_id": 1, "quantity": 2})
        response = _post(client, "/v1/checkout", {
            "customer_id": 3, "payment_mode": "credit",
        })
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CREDIT_LIMIT_EXCEEDED"
        assert len(client.get("/v1/cart").json()["data"]["lines"]) == 1

    def test_checkout_without_customer(self, client):
        _post(client, "/v1/cart/add", {"item_id": 1, "quantity": 1})
        response = _post(client, "/v1/checkout", {})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "NO_CUSTOMER_SELECTED"

    def test_unknown_customer(self, client):
        _post(client, "/v1/cart/add", {"item_id": 1, "quantity": 1})
        response = _post(client, "/v1/checkout", {"customer_id": 42})
        assert response.status_code == 404

    def test_transactions_filter(self, client):
        body = client.get("/v1/transactions", {"payment_mode": "credit"}).json()
        assert [t["id"] for t in body["data"]] == [2, 3]
        assert [t["customer_name"] for t in body["data"]] == [
            "Jane Smith", "John Doe",
        ]

    def test_transactions_all(self, client):
        body = client.get("/v1/transactions").json()
        assert len(body["data"]) == 3
