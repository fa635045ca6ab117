"""Session cart aggregate — the per-browser cart a shopper builds before checkout.

Each browser session owns exactly one cart. The cart holds an ordered list of
lines, one per product; adding a product that is already present increases
that line's quantity instead of appending a duplicate.

Quantities arrive from form input, so every mutation normalises the raw value
rather than rejecting it: a malformed add quantity becomes 1, a malformed
update quantity becomes 0 (which removes the line).
"""

import math
import re

from protean.fields import HasMany, Identifier, Integer

from storefront.domain import storefront

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_quantity(raw):
    """Read a leading base-10 integer from form input, or None when there is none.

    Mirrors how browsers' integer parsing treats form values: surrounding
    whitespace is ignored, trailing junk after the digits is dropped
    ("3 boxes" -> 3) and fractions are truncated ("2.7" -> 2).
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


@storefront.entity(part_of="SessionCart")
class CartLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.aggregate
class SessionCart:
    session_id = Identifier(identifier=True, required=True)
    lines = HasMany(CartLine)

    # -------------------------------------------------------------------
    # Factory / persistence
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id, lines=()):
        cart = cls(session_id=session_id)
        for line in lines:
            cart.add_lines(CartLine(product_id=line["product_id"], quantity=line["quantity"]))
        return cart

    @classmethod
    def from_record(cls, record):
        return cls.create(record["session_id"], record.get("lines") or ())

    def to_record(self):
        return {
            "session_id": str(self.session_id),
            "lines": [{"product_id": str(line.product_id), "quantity": line.quantity} for line in self.lines],
        }

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        if product_id is None:
            return None
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)

    @property
    def item_count(self):
        return sum(line.quantity for line in self.lines)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity):
        """Add ``quantity`` of a product, merging into an existing line.

        The caller is responsible for checking the product exists in the catalogue.
        """
        amount = parse_quantity(quantity)
        if amount is None or amount <= 0:
            amount = 1

        existing = self.line_for(product_id)
        if existing:
            existing.quantity += amount
        else:
            self.add_lines(CartLine(product_id=str(product_id), quantity=amount))
        return amount

    def update_item(self, product_id, quantity):
        """Set a line's quantity; zero removes it. Unknown products are ignored."""
        amount = parse_quantity(quantity)
        if amount is None or amount < 0:
            amount = 0

        existing = self.line_for(product_id)
        if existing is None:
            return
        if amount == 0:
            self.remove_lines(existing)
        else:
            existing.quantity = amount

    def remove_item(self, product_id):
        existing = self.line_for(product_id)
        if existing is not None:
            self.remove_lines(existing)

    def replace_lines(self, lines):
        """Swap every line for ``lines`` (anything with ``product_id`` and ``quantity``), keeping their order."""
        self.clear()
        for line in lines:
            self.add_lines(CartLine(product_id=str(line.product_id), quantity=line.quantity))

    def clear(self):
        for line in list(self.lines):
            self.remove_lines(line)
