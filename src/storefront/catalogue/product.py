"""Product aggregate — a sellable item in the catalogue.

Products are owned by the catalogue store and are read-only to the cart and
checkout flows. Prices are whole amounts in the minor currency unit.
"""

from protean.fields import Integer, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255, sanitize=False)
    description = Text(default="", sanitize=False)
    price = Integer(required=True, min_value=0)
    image = String(max_length=1024, default="", sanitize=False)

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record["id"],
            name=record["name"],
            description=record.get("description") or "",
            price=record["price"],
            image=record.get("image") or "",
        )

    def to_record(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description or "",
            "price": self.price,
            "image": self.image or "",
        }

    def matches(self, query):
        """Case-insensitive substring match on name or description."""
        needle = query.strip().lower()
        if not needle:
            return True
        return needle in self.name.lower() or needle in (self.description or "").lower()
