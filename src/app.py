"""LoveCakes storefront FastAPI application.

Serves catalogue browsing and cart operations for the LoveCakes frontend.
Every request runs inside the storefront domain context; commands are
processed synchronously.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from pyproject.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from storefront.api import cart_router, health_router, product_router, register_exception_handlers
from storefront.domain import storefront
from storefront.utils.logging import bind_request

storefront.init()


def _cors_origins() -> list[str]:
    raw = os.environ.get("STOREFRONT_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="LoveCakes Storefront API",
    description="Artisanal cake catalogue and shopping cart",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind request details to log lines."""
    bind_request(
        request.method,
        request.url.path,
        account_id=request.headers.get("X-Account-Id"),
        user_id=request.headers.get("X-User-Id"),
    )
    with storefront.domain_context():
        return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health_router)
app.include_router(product_router)
app.include_router(cart_router)
register_exception_handlers(app)
