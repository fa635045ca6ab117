"""Cart pricing — reconcile a cart's lines against the current catalogue.

``reconcile`` is a pure function: it never touches a store. It returns the
priced view together with the repaired lines (unknown products dropped,
duplicates merged), and the caller decides whether to write them back.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ReconciledLine:
    """A cart line that still resolves, with duplicates for the same product folded in."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class PricedCartItem:
    """One cart line priced against the catalogue at read time."""

    product_id: str
    name: str
    price: int
    image: str
    quantity: int
    subtotal: int

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "quantity": self.quantity,
            "subtotal": self.subtotal,
        }


@dataclass(frozen=True)
class PricedCart:
    """Derived cart view; recomputed on every read and never persisted."""

    items: tuple[PricedCartItem, ...] = ()
    total: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "item_count": self.item_count,
        }


def reconcile(catalog: Iterable, lines: Sequence) -> tuple[PricedCart, list[ReconciledLine]]:
    """Price ``lines`` against ``catalog``.

    Args:
        catalog: Products (anything with ``id``, ``name``, ``price``, ``image``).
        lines: Cart lines (anything with ``product_id`` and ``quantity``).

    Returns:
        ``(priced_cart, repaired_lines)``. Lines whose product is missing from
        the catalogue are left out of both. Several lines for one product are
        merged into the first, summing quantities, so each product appears at
        most once. Order follows first occurrence; quantities are not clamped.
    """
    by_id = {str(product.id): product for product in catalog}

    quantities: dict[str, int] = {}
    for line in lines:
        product_id = str(line.product_id)
        if product_id in by_id:
            quantities[product_id] = quantities.get(product_id, 0) + line.quantity

    items = tuple(
        PricedCartItem(
            product_id=product_id,
            name=by_id[product_id].name,
            price=by_id[product_id].price,
            image=by_id[product_id].image or "",
            quantity=quantity,
            subtotal=by_id[product_id].price * quantity,
        )
        for product_id, quantity in quantities.items()
    )
    repaired = [ReconciledLine(product_id, quantity) for product_id, quantity in quantities.items()]

    return PricedCart(items=items, total=sum(item.subtotal for item in items)), repaired
