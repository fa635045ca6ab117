"""BDD tests for checkout."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when
from storefront.catalogue.product import Product
from storefront.checkout.placement import PlaceOrder
from storefront.exceptions import EmptyCartError
from storefront.stores import get_stores

scenarios("features/checkout.feature")


@pytest.fixture()
def outcome():
    return {"order": None, "exc": None}


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.re(r'the customer checks out as "(?P<name>[^"]*)" "(?P<email>[^"]*)" "(?P<address>[^"]*)"'))
def check_out(session_id, name, email, address, outcome):
    command = PlaceOrder(session_id=session_id, name=name, email=email, address=address)
    try:
        outcome["order"] = current_domain.process(command, asynchronous=False)
    except (EmptyCartError, ValidationError) as exc:
        outcome["exc"] = exc


@when(parsers.cfparse('the price of product "{product_id}" changes to {price:d}'))
def change_price(product_id, price):
    catalog = get_stores().catalog
    product = catalog.get_product(product_id)
    catalog.add_product(Product.from_record({**product.to_record(), "price": price}))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("an order is placed with total {total:d}"))
def order_placed(outcome, total):
    assert outcome["exc"] is None
    assert get_stores().orders.get_order(outcome["order"].id).total == total


@then("checkout is refused because the cart is empty")
def refused_empty(outcome):
    assert isinstance(outcome["exc"], EmptyCartError)


@then(parsers.cfparse('checkout fails on fields "{fields}"'))
def fails_on_fields(outcome, fields):
    assert isinstance(outcome["exc"], ValidationError)
    assert set(outcome["exc"].messages) == {field.strip() for field in fields.split(",")}


@then("no order is stored")
def no_order():
    assert get_stores().orders.list_orders() == []


@then(parsers.cfparse('the stored order charges {price:d} for product "{product_id}"'))
def order_charges(outcome, price, product_id):
    order = get_stores().orders.get_order(outcome["order"].id)
    line = next(line for line in order.items if str(line.product_id) == product_id)
    assert line.price == price
