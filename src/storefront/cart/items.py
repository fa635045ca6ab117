"""Cart line management — commands and handler.

Quantities are carried as the raw form value; the cart normalises them.
"""

from protean import handle
from protean.fields import Identifier, String, Text

from storefront.cart.cart import SessionCart
from storefront.domain import storefront
from storefront.exceptions import InvalidProductError
from storefront.stores import get_stores
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="SessionCart")
class AddToCart:
    session_id = Identifier(required=True)
    product_id = String(max_length=255, sanitize=False)
    quantity = Text(sanitize=False)


@storefront.command(part_of="SessionCart")
class UpdateCartLine:
    session_id = Identifier(required=True)
    product_id = String(max_length=255, sanitize=False)
    quantity = Text(sanitize=False)


@storefront.command(part_of="SessionCart")
class RemoveFromCart:
    session_id = Identifier(required=True)
    product_id = String(max_length=255, sanitize=False)


@storefront.command_handler(part_of=SessionCart)
class ManageCartLinesHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        stores = get_stores()
        if stores.catalog.get_product(command.product_id) is None:
            logger.info("cart_add_rejected", session_id=command.session_id, product_id=command.product_id)
            raise InvalidProductError(command.product_id)

        cart = stores.carts.get_cart(command.session_id)
        added = cart.add_item(command.product_id, command.quantity)
        stores.carts.save_cart(cart)
        logger.info("cart_item_added", session_id=command.session_id, product_id=command.product_id, quantity=added)

    @handle(UpdateCartLine)
    def update_cart_line(self, command):
        stores = get_stores()
        cart = stores.carts.get_cart(command.session_id)
        cart.update_item(command.product_id, command.quantity)
        stores.carts.save_cart(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        stores = get_stores()
        cart = stores.carts.get_cart(command.session_id)
        cart.remove_item(command.product_id)
        stores.carts.save_cart(cart)
