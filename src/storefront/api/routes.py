"""FastAPI routes for the Storefront — catalogue, cart, checkout, accounts and orders."""

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.account.authentication import INVALID_CREDENTIALS, authenticate
from storefront.account.registration import RegisterUser
from storefront.api.schemas import (
    AddToCartRequest,
    CartResponse,
    CheckoutForm,
    CheckoutRequest,
    CheckoutResponse,
    LoginFormResponse,
    LoginRequest,
    OrderListResponse,
    OrderPlacedResponse,
    OrderSchema,
    PricedCartSchema,
    ProductListResponse,
    ProductSchema,
    RegisterRequest,
    RemoveFromCartRequest,
    UpdateCartLineRequest,
    UserSchema,
)
from storefront.api.session import (
    current_user_id,
    require_authenticated,
    safe_next,
    session_id,
    sign_in,
    sign_out,
)
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartLine
from storefront.cart.reconciliation import price_session_cart
from storefront.checkout.placement import PlaceOrder
from storefront.config import get_settings
from storefront.exceptions import EmptyCartError
from storefront.stores import get_stores


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _raw(value):
    """Form values travel to commands as text; anything that is not a scalar counts as missing."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    return str(value)


def _field_errors(exc: ValidationError) -> dict[str, str]:
    return {
        field: messages[0] if isinstance(messages, list) else str(messages) for field, messages in exc.messages.items()
    }


def _cart_schema(priced) -> PricedCartSchema:
    return PricedCartSchema(**priced.to_dict())


def _order_schema(order) -> OrderSchema:
    return OrderSchema(**order.to_record())


def _cart_response(request: Request, message: str) -> CartResponse:
    return CartResponse(cart=_cart_schema(price_session_cart(session_id(request))), message=message)


def _checkout_gate(request: Request):
    if get_settings().require_login_for_checkout:
        return require_authenticated(request)
    return None


# ---------------------------------------------------------------------------
# Catalogue Router
# ---------------------------------------------------------------------------
catalogue_router = APIRouter(tags=["catalogue"])


@catalogue_router.get("/", response_model=ProductListResponse)
async def list_products(q: str = "") -> ProductListResponse:
    query = q.strip()
    products = get_stores().catalog.search(query)
    return ProductListResponse(products=[ProductSchema(**p.to_record()) for p in products], q=query)


@catalogue_router.get("/product/{product_id}", response_model=ProductSchema)
async def get_product(product_id: str) -> ProductSchema:
    product = get_stores().catalog.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductSchema(**product.to_record())


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def view_cart(request: Request) -> CartResponse:
    return CartResponse(cart=_cart_schema(price_session_cart(session_id(request))))


@cart_router.post("/add", response_model=CartResponse)
async def add_to_cart(request: Request, body: AddToCartRequest):
    try:
        command = AddToCart(
            session_id=session_id(request),
            product_id=body.product_id or None,
            quantity=_raw(body.quantity),
        )
        current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        return JSONResponse(status_code=400, content={"errors": _field_errors(exc)})
    return _cart_response(request, "Product added to cart.")


@cart_router.post("/update", response_model=CartResponse)
async def update_cart_line(request: Request, body: UpdateCartLineRequest):
    try:
        command = UpdateCartLine(
            session_id=session_id(request),
            product_id=body.product_id or None,
            quantity=_raw(body.quantity),
        )
        current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        return JSONResponse(status_code=400, content={"errors": _field_errors(exc)})
    return _cart_response(request, "Cart updated.")


@cart_router.post("/remove", response_model=CartResponse)
async def remove_from_cart(request: Request, body: RemoveFromCartRequest):
    try:
        command = RemoveFromCart(session_id=session_id(request), product_id=body.product_id or None)
        current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        return JSONResponse(status_code=400, content={"errors": _field_errors(exc)})
    return _cart_response(request, "Product removed from cart.")


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.get("", response_model=CheckoutResponse)
async def checkout_form(request: Request):
    redirect = _checkout_gate(request)
    if redirect is not None:
        return redirect

    priced = price_session_cart(session_id(request))
    if priced.is_empty:
        return RedirectResponse("/cart", status_code=303)
    return CheckoutResponse(cart=_cart_schema(priced), form=CheckoutForm())


@checkout_router.post("", status_code=201, response_model=OrderPlacedResponse)
async def place_order(request: Request, body: CheckoutRequest):
    redirect = _checkout_gate(request)
    if redirect is not None:
        return redirect

    sid = session_id(request)
    try:
        command = PlaceOrder(
            session_id=sid,
            user_id=current_user_id(request),
            name=body.name,
            email=body.email,
            address=body.address,
        )
        order = current_domain.process(command, asynchronous=False)
    except EmptyCartError:
        return RedirectResponse("/cart", status_code=303)
    except ValidationError as exc:
        priced = price_session_cart(sid)
        if priced.is_empty:
            return RedirectResponse("/cart", status_code=303)
        response = CheckoutResponse(
            cart=_cart_schema(priced),
            form=CheckoutForm(name=body.name or "", email=body.email or "", address=body.address or ""),
            errors=_field_errors(exc),
        )
        return JSONResponse(status_code=400, content=response.model_dump())

    return OrderPlacedResponse(order=_order_schema(order), message="Order placed. Thank you!")


# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=UserSchema)
async def register(request: Request, body: RegisterRequest):
    try:
        command = RegisterUser(
            name=body.name,
            email=body.email,
            password=body.password,
            confirm_password=body.confirm_password,
        )
        user_id = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        # Passwords are never echoed back
        form = {"name": body.name or "", "email": body.email or "", "password": "", "confirm_password": ""}
        return JSONResponse(status_code=400, content={"errors": _field_errors(exc), "form": form})

    sign_in(request, user_id)
    user = get_stores().users.get_user(user_id)
    return UserSchema(id=str(user.id), name=user.name, email=user.email)


@auth_router.get("/login", response_model=LoginFormResponse)
async def login_form(next_url: str = Query("/", alias="next")) -> LoginFormResponse:
    return LoginFormResponse(next=safe_next(next_url))


@auth_router.post("/login")
async def login(request: Request, body: LoginRequest):
    destination = safe_next(body.next)
    user = authenticate(body.email, body.password)
    if user is None:
        form = {"email": body.email or "", "password": "", "next": destination}
        return JSONResponse(status_code=400, content={"errors": {"email": INVALID_CREDENTIALS}, "form": form})

    sign_in(request, str(user.id))
    return RedirectResponse(destination, status_code=303)


@auth_router.post("/logout")
async def logout(request: Request):
    sign_out(request)
    return RedirectResponse("/", status_code=303)


@auth_router.get("/me", response_model=UserSchema)
async def me(request: Request):
    user = get_stores().users.get_user(current_user_id(request))
    if user is None:
        raise HTTPException(status_code=401, detail="Not signed in")
    return UserSchema(id=str(user.id), name=user.name, email=user.email)


# ---------------------------------------------------------------------------
# Orders Router
# ---------------------------------------------------------------------------
orders_router = APIRouter(prefix="/orders", tags=["orders"])


@orders_router.get("", response_model=OrderListResponse)
async def my_orders(request: Request):
    redirect = require_authenticated(request)
    if redirect is not None:
        return redirect
    orders = get_stores().orders.list_orders_for_user(current_user_id(request))
    return OrderListResponse(orders=[_order_schema(order) for order in orders])
