"""Order store — append-only persistence of placed orders.

Writes fail fast: if the order cannot be appended, the error propagates and
the checkout is treated as not having happened.
"""

from storefront.exceptions import StorageUnavailable
from storefront.order.order import Order
from storefront.stores.port import RecordStore
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderStore:
    def __init__(self, records: RecordStore):
        self._records = records

    def append_order(self, order: Order) -> None:
        with self._records.transaction() as records:
            records.append(order.to_record())

    def list_orders(self) -> list[Order]:
        try:
            records = self._records.read()
        except StorageUnavailable as exc:
            logger.warning("orders_unreadable", reason=exc.reason)
            return []
        return [Order.from_record(record) for record in records]

    def list_orders_for_user(self, user_id) -> list[Order]:
        if not user_id:
            return []
        return [order for order in self.list_orders() if order.user_id and str(order.user_id) == str(user_id)]

    def get_order(self, order_id) -> Order | None:
        return next((order for order in self.list_orders() if str(order.id) == str(order_id)), None)
