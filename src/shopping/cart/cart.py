"""Cart aggregate: one per user, keyed by email.

A cart holds one line per product. Each line embeds a snapshot of the
product as it was when added, so catalogue price changes never reach a cart
that is already filled. Checkout empties the cart rather than closing it;
the same cart is reused for the user's next purchase.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from shopping import config
from shopping.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from shopping.domain import shopping

ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
NOT_IN_CART = "Product not in cart"
CART_EMPTY = "User cart is empty"


@shopping.value_object(part_of="Cart")
class ProductSnapshot:
    """Copy of a Product's catalogue data, frozen at the time it was added."""

    product_id = Identifier(required=True)
    name = String(max_length=255)
    category = String(max_length=100)
    cost = Float(required=True, min_value=0.0)
    rating = Integer()
    image = String(max_length=1024)

    @classmethod
    def of(cls, product):
        return cls(
            product_id=str(product.id),
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )


@shopping.entity(part_of="Cart")
class CartItem:
    product = ValueObject(ProductSnapshot, required=True)
    # Stored as supplied: no sign or range check.
    quantity = Integer(required=True)
    added_at = DateTime()

    def line_total(self):
        return self.product.cost * self.quantity


@shopping.aggregate
class Cart:
    email = String(required=True, max_length=254, unique=True)
    items = HasMany(CartItem)
    payment_option = String(max_length=50, default=lambda: config.DEFAULT_PAYMENT_OPTION)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    @classmethod
    def create(cls, email, payment_option=None):
        now = datetime.now(UTC)
        cart = cls(
            email=email,
            payment_option=payment_option or config.DEFAULT_PAYMENT_OPTION,
            created_at=now,
            updated_at=now,
        )
        cart.raise_(
            CartCreated(
                cart_id=str(cart.id),
                email=email,
                payment_option=cart.payment_option,
            )
        )
        return cart

    def item_for(self, product_id):
        """Return the line holding ``product_id``, or None."""
        return next((i for i in self.items if str(i.product.product_id) == str(product_id)), None)

    def total(self):
        return sum((item.line_total() for item in self.items), 0.0)

    def add_product(self, product, quantity):
        """Append a new line for ``product``; an existing line is never topped up."""
        if self.item_for(product.id) is not None:
            raise ValidationError({"product_id": [ALREADY_IN_CART]})

        now = datetime.now(UTC)
        item = CartItem(product=ProductSnapshot.of(product), quantity=quantity, added_at=now)
        self.add_items(item)
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product.id),
                quantity=quantity,
                unit_cost=product.cost,
            )
        )
        return item

    def update_quantity(self, product_id, quantity):
        item = self.item_for(product_id)
        if item is None:
            raise ValidationError({"product_id": [NOT_IN_CART]})

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return item

    def remove_product(self, product_id):
        """Drop the single line for ``product_id`` and return it."""
        matches = [i for i in self.items if str(i.product.product_id) == str(product_id)]
        if not matches:
            raise ValidationError({"product_id": [NOT_IN_CART]})

        item = matches[0]
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product_id),
            )
        )
        return item

    def check_out(self):
        """Empty the cart after payment and return the amount that was charged.

        Wallet and address checks belong to the caller, which has the User;
        this only refuses an empty cart.
        """
        if not self.items:
            raise ValidationError({"cart": [CART_EMPTY]})

        cart_total = self.total()
        item_count = len(self.items)

        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
            self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                email=self.email,
                cart_total=cart_total,
                item_count=item_count,
                checked_out_at=self.updated_at,
            )
        )
        return cart_total


@shopping.repository(part_of=Cart)
class CartRepository:
    def find_by_email(self, email: str) -> Cart | None:
        carts = self._dao.query.filter(email=email).all().items
        return carts[0] if carts else None
