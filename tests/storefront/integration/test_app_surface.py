"""Integration tests for health and unknown routes."""


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        body = response.json()
        assert body["status"] == "ok"
        assert body["service"] == "storefront"
        assert "timestamp" in body


class TestUnknownRoute:
    def test_not_found_envelope(self, client):
        response = client.get("/api/v1/internal/nowhere")
        assert response.status_code == 404

        body = response.json()
        assert body["success"] is False
        assert body["error"] == {
            "code": "NOT_FOUND",
            "message": "Route GET /api/v1/internal/nowhere not found",
        }

    def test_wrong_method_on_known_path_is_not_found(self, client):
        response = client.delete("/api/v1/internal/cart/item")
        assert response.status_code == 404
        assert response.json()["error"] == {
            "code": "NOT_FOUND",
            "message": "Route DELETE /api/v1/internal/cart/item not found",
        }
