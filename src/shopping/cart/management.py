"""Cart creation: command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from shopping.cart.cart import Cart
from shopping.domain import shopping

logger = structlog.get_logger(__name__)


@shopping.command(part_of="Cart")
class CreateCart:
    """Open an empty cart for a user who does not have one yet."""

    email = String(required=True, max_length=254)
    payment_option = String(max_length=50)


@shopping.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create(email=command.email, payment_option=command.payment_option)
        current_domain.repository_for(Cart).add(cart)
        logger.info("Created cart", cart_id=str(cart.id), email=command.email)
        return str(cart.id)
