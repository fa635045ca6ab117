"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer), kept separate from
internal Protean commands. Quantities are accepted as loosely as a browser
form would send them (any JSON value); the cart normalises them.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    id: str
    name: str
    description: str = ""
    price: int
    image: str = ""


class ProductListResponse(BaseModel):
    products: list[ProductSchema]
    q: str = ""


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str = ""
    quantity: Any = None

    model_config = {"json_schema_extra": {"examples": [{"product_id": "p1", "quantity": "2"}]}}


class UpdateCartLineRequest(BaseModel):
    product_id: str = ""
    quantity: Any = None


class RemoveFromCartRequest(BaseModel):
    product_id: str = ""


class PricedCartItemSchema(BaseModel):
    product_id: str
    name: str
    price: int
    image: str = ""
    quantity: int
    subtotal: int


class PricedCartSchema(BaseModel):
    items: list[PricedCartItemSchema] = []
    total: int = 0
    item_count: int = 0


class CartResponse(BaseModel):
    cart: PricedCartSchema
    message: str | None = None


# ---------------------------------------------------------------------------
# Checkout & orders
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    address: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Jane Doe", "email": "jane@example.com", "address": "12 Market Street"}]
        }
    }


class CheckoutForm(BaseModel):
    name: str = ""
    email: str = ""
    address: str = ""


class CheckoutResponse(BaseModel):
    cart: PricedCartSchema
    form: CheckoutForm
    errors: dict[str, str] = {}


class CustomerSchema(BaseModel):
    name: str
    email: str
    address: str


class OrderSchema(BaseModel):
    id: str
    created_at: datetime
    user_id: str | None = None
    customer: CustomerSchema
    items: list[PricedCartItemSchema]
    total: int


class OrderPlacedResponse(BaseModel):
    order: OrderSchema
    message: str


class OrderListResponse(BaseModel):
    orders: list[OrderSchema]


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class RegisterRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    next: str | None = None


class UserSchema(BaseModel):
    id: str
    name: str
    email: str


class LoginFormResponse(BaseModel):
    next: str = "/"
