"""Store factory.

Provides get_stores() / set_stores() to swap storage backends:
- in-memory record stores for development and testing
- JSON-lines files under the configured data directory
"""

from dataclasses import dataclass

from storefront.config import get_settings
from storefront.stores.port import RecordStore


@dataclass
class Stores:
    """The typed stores the storefront reads and writes."""

    catalog: "CatalogStore"  # noqa: F821
    carts: "CartStore"  # noqa: F821
    orders: "OrderStore"  # noqa: F821
    users: "UserStore"  # noqa: F821


_current_stores: Stores | None = None

STORE_FILES = {
    "products": "products.jsonl",
    "carts": "carts.jsonl",
    "orders": "orders.jsonl",
    "users": "users.jsonl",
}


def build_record_store(name: str) -> RecordStore:
    """Create the record store for one collection according to the configured backend."""
    settings = get_settings()
    if settings.store_backend == "memory":
        from storefront.stores.memory_adapter import MemoryRecordStore

        return MemoryRecordStore(name)
    if settings.store_backend == "jsonl":
        from storefront.stores.jsonl_adapter import JsonLinesRecordStore

        return JsonLinesRecordStore(name, settings.data_dir / STORE_FILES[name])
    raise ValueError(f"Unknown store backend: {settings.store_backend}")


def build_stores(records: dict[str, RecordStore] | None = None) -> Stores:
    """Wire typed stores over record stores, building any that are not supplied."""
    from storefront.account.store import UserStore
    from storefront.cart.store import CartStore
    from storefront.catalogue.store import CatalogStore
    from storefront.order.store import OrderStore

    records = dict(records or {})
    for name in STORE_FILES:
        records.setdefault(name, build_record_store(name))

    return Stores(
        catalog=CatalogStore(records["products"]),
        carts=CartStore(records["carts"]),
        orders=OrderStore(records["orders"]),
        users=UserStore(records["users"]),
    )


def get_stores() -> Stores:
    """Return the active store set, building it from settings on first use."""
    global _current_stores
    if _current_stores is None:
        _current_stores = build_stores()
    return _current_stores


def set_stores(stores: Stores) -> None:
    """Override the active store set (useful for tests)."""
    global _current_stores
    _current_stores = stores


def reset_stores() -> None:
    """Reset to the configured default stores."""
    global _current_stores
    _current_stores = None
