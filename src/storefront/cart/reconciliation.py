"""Reading a session's cart: price it and persist the self-healing repair."""

from storefront.cart.pricing import PricedCart, reconcile
from storefront.stores import get_stores
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def price_session_cart(session_id) -> PricedCart:
    """Return the priced cart for a session, repairing the stored cart on the way.

    Lines for vanished products are dropped and duplicate lines for one product
    are merged. The stored cart is only rewritten when the repair changed
    something, so pricing the same unchanged cart twice writes at most once.
    """
    stores = get_stores()
    cart = stores.carts.get_cart(session_id)
    priced, repaired = reconcile(stores.catalog.list_products(), cart.lines)

    stored = [(str(line.product_id), line.quantity) for line in cart.lines]
    if stored != [(line.product_id, line.quantity) for line in repaired]:
        kept = {line.product_id for line in repaired}
        dropped = sorted({product_id for product_id, _ in stored} - kept)
        cart.replace_lines(repaired)
        stores.carts.save_cart(cart)
        logger.info("cart_repaired", session_id=str(session_id), dropped=dropped, lines_before=len(stored), lines_after=len(repaired))

    return priced
