"""Storefront API package."""

from storefront.api.routes import auth_router, cart_router, catalogue_router, checkout_router, orders_router

__all__ = ["catalogue_router", "cart_router", "checkout_router", "auth_router", "orders_router"]
