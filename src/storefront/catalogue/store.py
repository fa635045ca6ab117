"""Catalogue store — read access to products for browsing, carts and checkout.

Reads are fail-soft: an unreadable or corrupt catalogue is treated as empty
so that browsing degrades to "no products" instead of failing the request.
"""

from protean.exceptions import ValidationError

from storefront.catalogue.product import Product
from storefront.exceptions import StorageUnavailable
from storefront.stores.port import RecordStore
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogStore:
    def __init__(self, records: RecordStore):
        self._records = records

    def list_products(self) -> list[Product]:
        try:
            records = self._records.read()
        except StorageUnavailable as exc:
            logger.warning("catalogue_unreadable", reason=exc.reason)
            return []

        products = []
        for record in records:
            try:
                products.append(Product.from_record(record))
            except (KeyError, ValidationError) as exc:
                logger.warning("catalogue_record_skipped", record_id=record.get("id"), error=str(exc))
        return products

    def get_product(self, product_id) -> Product | None:
        if product_id is None:
            return None
        return next((p for p in self.list_products() if str(p.id) == str(product_id)), None)

    def search(self, query: str | None) -> list[Product]:
        products = self.list_products()
        if not query or not query.strip():
            return products
        return [p for p in products if p.matches(query)]

    def add_product(self, product: Product) -> None:
        """Insert or replace a product (used for seeding the catalogue)."""
        with self._records.transaction() as records:
            records[:] = [r for r in records if str(r.get("id")) != str(product.id)]
            records.append(product.to_record())
        logger.info("product_saved", product_id=str(product.id))
