"""Committing a checkout: turn a priced cart into a stored order."""

from storefront.order.order import Order
from storefront.stores import get_stores
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def commit_order(customer, priced_cart, user_id=None) -> Order:
    """Create the order and append it to the order store.

    The caller must have checked that the cart is non-empty and that the
    customer details passed validation. Clearing the session cart afterwards
    is the caller's job.
    """
    order = Order.place(customer, priced_cart, user_id=user_id)
    get_stores().orders.append_order(order)
    logger.info(
        "order_placed",
        order_id=str(order.id),
        user_id=str(user_id) if user_id else None,
        total=order.total,
        line_count=len(order.items),
    )
    return order
