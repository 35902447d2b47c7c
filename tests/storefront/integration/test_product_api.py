"""Integration tests for the product endpoints via TestClient."""

from storefront.product.pricing import SetPromotionalPrice

BASE = "/api/v1/internal/product"


class TestListEndpoint:
    def test_envelope(self, client, make_product):
        make_product()
        response = client.get(BASE)
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert "timestamp" in body["metadata"]
        assert body["data"]["pagination"] == {
            "total_items": 1,
            "total_pages": 1,
            "current_page": 1,
            "page_size": 12,
        }
        assert body["data"]["products"][0]["name"] == "Chocolate Truffle Cake"

    def test_filters_from_query_string(self, client, make_product, catalogue, process):
        make_product(name="Truffle")
        promo = make_product(name="Forest", base_price=140.0)
        process(SetPromotionalPrice(account_id=1, product_id=promo, promotional_price=90.0))

        response = client.get(BASE, params={"max_price": 95, "categories": catalogue.birthday})
        names = [p["name"] for p in response.json()["data"]["products"]]
        assert names == ["Forest"]

    def test_account_header_scopes_results(self, client, make_product):
        make_product()
        response = client.get(BASE, headers={"X-Account-Id": "2"})
        assert response.json()["data"]["products"] == []

    def test_invalid_page_size(self, client, catalogue):
        response = client.get(BASE, params={"page_size": 10})
        assert response.status_code == 400

        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["message"] == "pageSizeInvalidValue"
        assert "timestamp" in body

    def test_invalid_sort(self, client, catalogue):
        response = client.get(BASE, params={"sort_by": "cheapest"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "sortByInvalidValue"

    def test_search_term_too_long(self, client, catalogue):
        response = client.get(BASE, params={"search_term": "x" * 101})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_non_numeric_account_header(self, client, catalogue):
        response = client.get(BASE, headers={"X-Account-Id": "abc"})
        assert response.status_code == 400


class TestDetailEndpoint:
    def test_detail(self, client, make_product):
        product_id = make_product()
        response = client.get(f"{BASE}/{product_id}")
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["product"]["id"] == product_id
        assert data["product"]["confectioner"]["name"] == "Ana's Kitchen"
        assert [s["name"] for s in data["sizes"]] == ["Small", "Medium"]
        assert data["reviews"] == []

    def test_missing_product(self, client, catalogue):
        response = client.get(f"{BASE}/missing")
        assert response.status_code == 404

        body = response.json()
        assert body["success"] is False
        assert body["error"]["message"] == "productDoesntExist"


class TestRelatedEndpoint:
    def test_related(self, client, make_product, catalogue):
        reference = make_product(name="Reference")
        make_product(name="Sibling")
        make_product(name="Stranger", category_id=catalogue.wedding)

        response = client.get(f"{BASE}/{reference}/related")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()["data"]] == ["Sibling", "Stranger"]

    def test_limit_minimum(self, client, make_product):
        reference = make_product()
        response = client.get(f"{BASE}/{reference}/related", params={"limit": 0})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "limitMinimumValue"

    def test_invalid_criteria(self, client, make_product):
        reference = make_product()
        response = client.get(f"{BASE}/{reference}/related", params={"criteria": "cor"})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "criteriaInvalidValue"
