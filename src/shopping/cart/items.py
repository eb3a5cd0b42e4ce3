"""Cart line management: commands and handler.

Every handler looks the cart up by the owner's email, so commands carry the
email rather than a cart id.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from shopping.cart.cart import ALREADY_IN_CART, Cart
from shopping.domain import shopping
from shopping.product.product import Product

logger = structlog.get_logger(__name__)

PRODUCT_MISSING = "Product doesn't exist in database"
NO_CART_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
NO_CART = "User does not have a cart"


@shopping.command(part_of="Cart")
class AddProductToCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@shopping.command(part_of="Cart")
class UpdateProductInCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@shopping.command(part_of="Cart")
class DeleteProductFromCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)


def _load_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ValidationError({"product_id": [PRODUCT_MISSING]}) from None


@shopping.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_email(command.email)
        if cart is None:
            # CartService opens the cart first; reaching here means it vanished.
            raise ObjectNotFoundError(NO_CART)

        # Duplicates are refused before the catalogue is consulted
        if cart.item_for(command.product_id) is not None:
            raise ValidationError({"product_id": [ALREADY_IN_CART]})

        product = _load_product(command.product_id)
        item = cart.add_product(product, command.quantity)
        repo.add(cart)

        logger.info(
            "Added product to cart",
            email=command.email,
            product_id=str(command.product_id),
            item_id=str(item.id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(UpdateProductInCart)
    def update_product_in_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_email(command.email)
        if cart is None:
            raise ValidationError({"cart": [NO_CART_FOR_UPDATE]})

        _load_product(command.product_id)
        cart.update_quantity(command.product_id, command.quantity)
        repo.add(cart)

        logger.info(
            "Updated cart quantity",
            email=command.email,
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(DeleteProductFromCart)
    def delete_product_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_email(command.email)
        if cart is None:
            raise ValidationError({"cart": [NO_CART]})

        item = cart.remove_product(command.product_id)
        repo.add(cart)

        logger.info(
            "Removed product from cart",
            email=command.email,
            product_id=str(command.product_id),
            item_id=str(item.id),
        )
        return {
            "acknowledged": True,
            "matched_count": 1,
            "modified_count": 1,
            "item_id": str(item.id),
        }
