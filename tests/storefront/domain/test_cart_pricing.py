"""Tests for reconciling cart lines against the catalogue."""

from storefront.cart.cart import CartLine
from storefront.cart.pricing import PricedCart, ReconciledLine, reconcile


def _lines(*pairs):
    return [CartLine(product_id=pid, quantity=qty) for pid, qty in pairs]


class TestReconcile:
    def test_total_is_sum_of_subtotals(self, catalog):
        priced, _ = reconcile(catalog, _lines(("p1", 2), ("p2", 1)))

        assert [item.subtotal for item in priced.items] == [200, 250]
        assert priced.total == 450
        assert priced.item_count == 3

    def test_item_carries_catalogue_details(self, catalog):
        priced, _ = reconcile(catalog, _lines(("p2", 2)))

        item = priced.items[0]
        assert item.product_id == "p2"
        assert item.name == "Linen Tote"
        assert item.price == 250
        assert item.image == "/img/tote.jpg"
        assert item.quantity == 2

    def test_unknown_products_are_dropped(self, catalog):
        priced, repaired = reconcile(catalog, _lines(("p1", 1), ("gone", 4), ("p3", 2)))

        assert [item.product_id for item in priced.items] == ["p1", "p3"]
        assert [str(line.product_id) for line in repaired] == ["p1", "p3"]
        assert priced.total == 100 + 170

    def test_empty_cart(self, catalog):
        priced, repaired = reconcile(catalog, [])

        assert priced == PricedCart(items=(), total=0)
        assert priced.is_empty
        assert repaired == []

    def test_all_lines_invalid(self, catalog):
        priced, repaired = reconcile(catalog, _lines(("x", 1), ("y", 2)))

        assert priced.is_empty
        assert priced.total == 0
        assert repaired == []

    def test_reconciling_repaired_lines_again_is_stable(self, catalog):
        first, repaired = reconcile(catalog, _lines(("p1", 2), ("gone", 1), ("p2", 1)))
        second, repaired_again = reconcile(catalog, repaired)

        assert second == first
        assert repaired_again == repaired

    def test_duplicate_lines_are_merged_into_the_first(self, catalog):
        priced, repaired = reconcile(catalog, _lines(("p2", 1), ("p1", 1), ("p2", 2)))

        assert [(item.product_id, item.quantity, item.subtotal) for item in priced.items] == [
            ("p2", 3, 750),
            ("p1", 1, 100),
        ]
        assert repaired == [ReconciledLine("p2", 3), ReconciledLine("p1", 1)]
        assert priced.total == 850

    def test_quantities_are_not_clamped(self, catalog):
        priced, _ = reconcile(catalog, _lines(("p1", 1000)))
        assert priced.total == 100_000

    def test_to_dict(self, catalog):
        priced, _ = reconcile(catalog, _lines(("p3", 2)))

        assert priced.to_dict() == {
            "items": [
                {"product_id": "p3", "name": "Notebook", "price": 85, "image": "", "quantity": 2, "subtotal": 170}
            ],
            "total": 170,
            "item_count": 2,
        }
