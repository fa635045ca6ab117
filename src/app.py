"""Storefront FastAPI application.

Web server for catalogue browsing, the session cart, checkout and accounts.
Each request is wrapped in the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# STOREFRONT_STORE selects the storage backend ("memory" or "jsonl").
from storefront.domain import storefront  # noqa: E402

storefront.init()

from storefront.api.application import create_app  # noqa: E402

app = create_app()
