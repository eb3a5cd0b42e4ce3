"""FastAPI routes for the shopping cart.

The caller is identified by the ``X-User-Email`` header; authentication
proper happens upstream at the gateway.
"""

from fastapi import APIRouter, Depends, Header, HTTPException, Response
from protean.utils.globals import current_domain

from shopping.api.schemas import CartItemRequest, CartResponse, DeleteResultResponse
from shopping.cart.service import CartService
from shopping.user.user import User
from shopping.utils.logging import bind_user

cart_router = APIRouter(prefix="/v1/cart", tags=["cart"])


async def current_user(x_user_email: str | None = Header(default=None)) -> User:
    if not x_user_email:
        raise HTTPException(status_code=401, detail="Please authenticate")

    user = current_domain.repository_for(User).find_by_email(x_user_email)
    if user is None:
        raise HTTPException(status_code=401, detail="Please authenticate")

    bind_user(user.email)
    return user


def cart_service() -> CartService:
    return CartService()


@cart_router.get("", response_model=CartResponse)
async def get_cart(
    user: User = Depends(current_user),
    service: CartService = Depends(cart_service),
) -> CartResponse:
    return CartResponse.from_cart(service.get_cart_by_user(user))


@cart_router.post("", response_model=CartResponse)
async def add_product(
    body: CartItemRequest,
    user: User = Depends(current_user),
    service: CartService = Depends(cart_service),
) -> CartResponse:
    cart = service.add_product_to_cart(user, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.put("", response_model=CartResponse)
async def update_product(
    body: CartItemRequest,
    user: User = Depends(current_user),
    service: CartService = Depends(cart_service),
):
    """Set a line's quantity; a quantity of 0 removes the line."""
    if body.quantity == 0:
        service.delete_product_from_cart(user, body.product_id)
        return Response(status_code=204)

    cart = service.update_product_in_cart(user, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.delete("/items/{product_id}", response_model=DeleteResultResponse)
async def delete_product(
    product_id: str,
    user: User = Depends(current_user),
    service: CartService = Depends(cart_service),
) -> DeleteResultResponse:
    result = service.delete_product_from_cart(user, product_id)
    return DeleteResultResponse(**result)


@cart_router.put("/checkout", status_code=204)
async def checkout(
    user: User = Depends(current_user),
    service: CartService = Depends(cart_service),
) -> Response:
    service.checkout(user)
    return Response(status_code=204)
