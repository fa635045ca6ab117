"""Placing an order — command and handler.

The handler re-prices the session cart, refuses an empty cart before looking
at the form, validates the customer details, commits the order and clears the
cart so a resubmitted form cannot place the same items twice.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text

from storefront.cart.cart import SessionCart
from storefront.cart.reconciliation import price_session_cart
from storefront.checkout.validation import validate_checkout
from storefront.domain import storefront
from storefront.exceptions import EmptyCartError
from storefront.order.commit import commit_order
from storefront.stores import get_stores


@storefront.command(part_of="SessionCart")
class PlaceOrder:
    session_id = Identifier(required=True)
    user_id = Identifier()
    name = Text(sanitize=False)
    email = Text(sanitize=False)
    address = Text(sanitize=False)


@storefront.command_handler(part_of=SessionCart)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        priced = price_session_cart(command.session_id)
        if priced.is_empty:
            raise EmptyCartError()

        errors = validate_checkout(command.name, command.email, command.address)
        if errors:
            raise ValidationError({field: [message] for field, message in errors.items()})

        order = commit_order(
            {"name": command.name, "email": command.email, "address": command.address},
            priced,
            user_id=command.user_id,
        )
        get_stores().carts.clear_cart(command.session_id)
        return order
