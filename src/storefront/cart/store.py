"""Session cart store: a keyed store from session id to that session's cart.

A session's cart is created (empty) the first time it is asked for. Reads
degrade to an empty cart when the store cannot be read; writes propagate.
"""

from storefront.cart.cart import SessionCart
from storefront.exceptions import StorageUnavailable
from storefront.stores.port import RecordStore
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _find(records, session_id):
    return next((r for r in records if r.get("session_id") == session_id), None)


class CartStore:
    def __init__(self, records: RecordStore):
        self._records = records

    def get_cart(self, session_id) -> SessionCart:
        sid = str(session_id)
        try:
            record = _find(self._records.read(), sid)
            if record is None:
                with self._records.transaction() as records:
                    record = _find(records, sid)
                    if record is None:
                        record = {"session_id": sid, "lines": []}
                        records.append(record)
                        logger.debug("cart_created", session_id=sid)
        except StorageUnavailable as exc:
            logger.warning("cart_unreadable", session_id=sid, reason=exc.reason)
            return SessionCart.create(sid)

        return SessionCart.from_record(record)

    def save_cart(self, cart: SessionCart) -> None:
        record = cart.to_record()
        with self._records.transaction() as records:
            records[:] = [r for r in records if r.get("session_id") != record["session_id"]]
            records.append(record)

    def clear_cart(self, session_id) -> None:
        self.save_cart(SessionCart.create(session_id))
