import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import cart_router, health_router, product_router, register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(health_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    register_exception_handlers(app)
    return TestClient(app, raise_server_exceptions=False)
