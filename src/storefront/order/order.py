"""Order aggregate — the permanent record of a completed checkout.

An order is created exactly once, when a cart is committed, and is never
modified afterwards. Its lines are copies of the priced cart items taken at
commit time, so later catalogue changes (new prices, removed products) do not
alter what the customer was charged.
"""

from datetime import UTC, datetime
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text, ValueObject

from storefront.domain import storefront


@storefront.value_object(part_of="Order")
class CustomerDetails:
    """Who the order is for and where it ships, as entered at checkout."""

    name = Text(required=True, sanitize=False)
    email = Text(required=True, sanitize=False)
    address = Text(required=True, sanitize=False)


@storefront.entity(part_of="Order")
class OrderLine:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255, sanitize=False)
    price = Integer(required=True, min_value=0)
    image = String(max_length=1024, default="", sanitize=False)
    quantity = Integer(required=True, min_value=1)
    subtotal = Integer(required=True, min_value=0)


@storefront.aggregate
class Order:
    created_at = DateTime(required=True)
    user_id = Identifier()
    customer = ValueObject(CustomerDetails, required=True)
    items = HasMany(OrderLine)
    total = Integer(required=True, min_value=0)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer, priced_cart, user_id=None):
        """Build an order from validated customer details and a priced cart.

        Args:
            customer: Dict with name, email, address.
            priced_cart: The ``PricedCart`` being checked out.
            user_id: Owning user, when the shopper is signed in.
        """
        if priced_cart.is_empty:
            raise ValidationError({"cart": ["Cannot place an order for an empty cart"]})

        order = cls(
            id=str(uuid4()),
            created_at=datetime.now(UTC),
            user_id=user_id,
            customer=CustomerDetails(
                name=customer["name"],
                email=customer["email"],
                address=customer["address"],
            ),
            total=priced_cart.total,
        )
        for item in priced_cart.items:
            order.add_items(
                OrderLine(
                    product_id=item.product_id,
                    name=item.name,
                    price=item.price,
                    image=item.image,
                    quantity=item.quantity,
                    subtotal=item.subtotal,
                )
            )
        return order

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    @classmethod
    def from_record(cls, record):
        order = cls(
            id=record["id"],
            created_at=datetime.fromisoformat(record["created_at"]),
            user_id=record.get("user_id"),
            customer=CustomerDetails(**record["customer"]),
            total=record["total"],
        )
        for item in record.get("items", []):
            order.add_items(OrderLine(**item))
        return order

    def to_record(self):
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat(),
            "user_id": str(self.user_id) if self.user_id else None,
            "customer": {
                "name": self.customer.name,
                "email": self.customer.email,
                "address": self.customer.address,
            },
            "items": [
                {
                    "product_id": str(line.product_id),
                    "name": line.name,
                    "price": line.price,
                    "image": line.image or "",
                    "quantity": line.quantity,
                    "subtotal": line.subtotal,
                }
                for line in self.items
            ],
            "total": self.total,
        }
