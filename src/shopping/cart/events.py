"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from shopping.domain import shopping


@shopping.event(part_of="Cart")
class CartCreated:
    """A user got their first cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    payment_option = String(required=True)


@shopping.event(part_of="Cart")
class CartItemAdded:
    """A product was put into the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_cost = Float(required=True)


@shopping.event(part_of="Cart")
class CartItemQuantityUpdated:
    """The quantity on an existing cart line changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@shopping.event(part_of="Cart")
class CartItemRemoved:
    """A line was taken out of the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopping.event(part_of="Cart")
class CartCheckedOut:
    """The cart was paid for from the wallet and emptied."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    cart_total = Float(required=True)
    item_count = Integer(required=True)
    checked_out_at = DateTime(required=True)
