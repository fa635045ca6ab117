"""Application factory: middleware, error handlers and routers.

The domain must already be initialized (``storefront.init()``) before the
returned app serves requests.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from storefront.api import auth_router, cart_router, catalogue_router, checkout_router, orders_router
from storefront.api.session import SESSION_KEY
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.exceptions import StorageUnavailable
from storefront.stores import get_stores
from storefront.utils.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Storefront API",
        description="Catalogue browsing, session cart and checkout",
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and report the cart badge count."""
        bind_request_context(session_id=request.session.get(SESSION_KEY), path=request.url.path)
        try:
            with storefront.domain_context():
                response = await call_next(request)
                sid = request.session.get(SESSION_KEY)
                if sid:
                    response.headers["X-Cart-Count"] = str(get_stores().carts.get_cart(sid).item_count)
            return response
        finally:
            clear_request_context()

    # Added last so it wraps the domain middleware and the session is loaded first
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age,
        same_site="lax",
    )

    @app.exception_handler(StorageUnavailable)
    async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
        logger.error("storage_unavailable", store=exc.store, reason=exc.reason, path=request.url.path)
        return JSONResponse(status_code=503, content={"detail": "Storage temporarily unavailable"})

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    app.include_router(catalogue_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(auth_router)
    app.include_router(orders_router)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
