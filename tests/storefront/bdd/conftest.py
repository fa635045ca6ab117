"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart
from storefront.stores import get_stores


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an empty cart for session "{sid}"'), target_fixture="session_id")
def empty_cart(sid):
    get_stores().carts.clear_cart(sid)
    return sid


@given(parsers.cfparse('{qty:d} of product "{product_id}" are added to the cart'))
@when(parsers.cfparse('{qty:d} of product "{product_id}" are added to the cart'))
def add_quantity(session_id, qty, product_id, error):
    _add(session_id, product_id, str(qty), error)


@when(parsers.cfparse('"{raw}" of product "{product_id}" are added to the cart'))
def add_raw_quantity(session_id, raw, product_id, error):
    _add(session_id, product_id, raw, error)


def _add(session_id, product_id, quantity, error):
    try:
        current_domain.process(
            AddToCart(session_id=session_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.re(r"the cart has (?P<count>\d+) lines?"), converters={"count": int})
def cart_has_lines(session_id, count):
    assert len(get_stores().carts.get_cart(session_id).lines) == count
