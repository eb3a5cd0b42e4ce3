"""Pydantic request/response schemas for the cart API.

Request bodies keep the storefront's camelCase keys (``productId``); the
Python side uses snake_case names.
"""

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CartItemRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"productId": "BW0jAAeDJmlZCF8i", "quantity": 2}]},
    )

    product_id: str = Field(alias="productId", min_length=1)
    quantity: int


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class ProductSnapshotSchema(BaseModel):
    product_id: str
    name: str | None = None
    category: str | None = None
    cost: float
    rating: int | None = None
    image: str | None = None


class CartItemSchema(BaseModel):
    item_id: str
    product: ProductSnapshotSchema
    quantity: int


class CartResponse(BaseModel):
    cart_id: str
    email: str
    payment_option: str | None = None
    items: list[CartItemSchema] = Field(default_factory=list)
    total: float = 0.0

    @classmethod
    def from_cart(cls, cart):
        return cls(
            cart_id=str(cart.id),
            email=cart.email,
            payment_option=cart.payment_option,
            items=[
                CartItemSchema(
                    item_id=str(item.id),
                    product=ProductSnapshotSchema(
                        product_id=str(item.product.product_id),
                        name=item.product.name,
                        category=item.product.category,
                        cost=item.product.cost,
                        rating=item.product.rating,
                        image=item.product.image,
                    ),
                    quantity=item.quantity,
                )
                for item in cart.items
            ],
            total=cart.total(),
        )


class DeleteResultResponse(BaseModel):
    acknowledged: bool
    matched_count: int
    modified_count: int
    item_id: str
