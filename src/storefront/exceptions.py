"""Storefront error taxonomy.

Field-level problems reuse Protean's ``ValidationError`` (a dict of field name
to messages) so the API layer can render every rejection the same way.
"""

from protean.exceptions import ValidationError


class InvalidProductError(ValidationError):
    """A cart operation referenced a product the catalogue does not know."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__({"product_id": ["Invalid product"]})


class EmptyCartError(Exception):
    """Checkout was attempted with no resolvable cart items."""


class StorageUnavailable(Exception):
    """A backing store could not be read or written."""

    def __init__(self, store: str, reason: str):
        self.store = store
        self.reason = reason
        super().__init__(f"{store} store unavailable: {reason}")
