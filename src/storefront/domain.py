"""Storefront bounded context — catalogue browsing, session carts and checkout.

A single Protean domain hosts the catalogue, the session cart, the checkout
flow that turns a cart into an order, and the user accounts that own orders.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
