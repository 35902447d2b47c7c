import structlog
from storefront.utils.logging import bind_request


def test_bind_request_replaces_previous_context():
    structlog.contextvars.bind_contextvars(stale="yes")

    bind_request("POST", "/api/v1/internal/cart/item", account_id="3", user_id="9")

    assert structlog.contextvars.get_contextvars() == {
        "method": "POST",
        "path": "/api/v1/internal/cart/item",
        "account_id": "3",
        "user_id": "9",
    }
    structlog.contextvars.clear_contextvars()


def test_bind_request_leaves_out_missing_tenant_headers():
    bind_request("GET", "/health")

    assert structlog.contextvars.get_contextvars() == {"method": "GET", "path": "/health"}
    structlog.contextvars.clear_contextvars()
