"""Storefront API package."""

from storefront.api.errors import register_exception_handlers
from storefront.api.routes import cart_router, health_router, product_router

__all__ = ["product_router", "cart_router", "health_router", "register_exception_handlers"]
