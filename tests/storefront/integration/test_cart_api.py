"""Integration tests for the cart endpoint via TestClient."""

import pytest
from protean import current_domain
from storefront.cart.cart import Cart

URL = "/api/v1/internal/cart/item"


@pytest.fixture()
def payload(make_product, catalogue):
    return {
        "product_id": make_product(),
        "flavor_id": catalogue.chocolate,
        "size_id": catalogue.medium,
        "quantity": 2,
    }


class TestAddCartItemEndpoint:
    def test_add(self, client, payload):
        response = client.post(URL, json=payload, headers={"X-User-Id": "42"})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["data"]["unit_price"] == 125.0
        assert body["data"]["total_price"] == 250.0

        cart = current_domain.repository_for(Cart).for_user(1, 42)
        assert str(cart.id) == body["data"]["cart_id"]

    def test_default_user(self, client, payload):
        client.post(URL, json=payload)
        assert current_domain.repository_for(Cart).for_user(1, 1) is not None

    def test_merge(self, client, payload):
        client.post(URL, json=payload)
        response = client.post(URL, json=payload)
        assert response.json()["data"]["line_quantity"] == 4

    def test_quantity_over_cap(self, client, payload):
        payload["quantity"] = 11
        response = client.post(URL, json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "quantityExceedsMaximum"

    def test_zero_quantity(self, client, payload):
        payload["quantity"] = 0
        response = client.post(URL, json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "quantityRequired"

    def test_observations_too_long(self, client, payload):
        payload["observations"] = "x" * 201
        response = client.post(URL, json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_missing_body_field(self, client, payload):
        del payload["size_id"]
        response = client.post(URL, json=payload)
        assert response.status_code == 400

    def test_unknown_product(self, client, payload):
        payload["product_id"] = "missing"
        response = client.post(URL, json=payload)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "productNotAvailable"
