"""CartService: the entry point the transport layer calls.

Operations take the already-authenticated ``User`` and plain arguments,
dispatch the matching command synchronously and hand back the stored cart.
Checkout is the exception: it works on the caller's ``User`` directly.
Calls for the same user are serialized through ``UserLocks`` so each
read-decide-write sequence runs alone.
"""

import structlog
from protean import UnitOfWork
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shopping import config
from shopping.cart.cart import Cart
from shopping.cart.checkout import check_out
from shopping.cart.items import (
    NO_CART,
    AddProductToCart,
    DeleteProductFromCart,
    UpdateProductInCart,
)
from shopping.cart.management import CreateCart
from shopping.exceptions import CartCreationError
from shopping.user.user import User
from shopping.utils.locks import UserLocks

logger = structlog.get_logger(__name__)

_default_locks = UserLocks()


class CartService:
    def __init__(self, domain=None, locks: UserLocks | None = None):
        self._domain = domain
        self._locks = locks if locks is not None else _default_locks

    @property
    def domain(self):
        return self._domain if self._domain is not None else current_domain

    def _carts(self):
        return self.domain.repository_for(Cart)

    def _process(self, command):
        return self.domain.process(command, asynchronous=False)

    def get_cart_by_user(self, user) -> Cart:
        cart = self._carts().find_by_email(user.email)
        if cart is None:
            raise ObjectNotFoundError(NO_CART)
        return cart

    def add_product_to_cart(self, user, product_id, quantity) -> Cart:
        with self._locks.hold(user.email):
            if self._carts().find_by_email(user.email) is None:
                self._open_cart(user)

            self._process(AddProductToCart(email=user.email, product_id=product_id, quantity=quantity))
            return self.get_cart_by_user(user)

    def update_product_in_cart(self, user, product_id, quantity) -> Cart:
        with self._locks.hold(user.email):
            self._process(UpdateProductInCart(email=user.email, product_id=product_id, quantity=quantity))
            return self.get_cart_by_user(user)

    def delete_product_from_cart(self, user, product_id) -> dict:
        with self._locks.hold(user.email):
            return self._process(DeleteProductFromCart(email=user.email, product_id=product_id))

    def checkout(self, user) -> Cart:
        """Debit ``user`` for the cart total and empty the cart.

        ``user`` itself is debited and saved, so the caller sees the new
        balance. Both aggregates are written in one unit of work.
        """
        with self._locks.hold(user.email):
            cart = self.get_cart_by_user(user)
            with UnitOfWork():
                check_out(cart, user)
                self.domain.repository_for(User).add(user)
                self._carts().add(cart)
            return cart

    def _open_cart(self, user):
        try:
            return self._process(CreateCart(email=user.email, payment_option=config.DEFAULT_PAYMENT_OPTION))
        except Exception as exc:
            logger.error("Could not create cart", email=user.email, error=str(exc))
            raise CartCreationError({"cart": ["500 Internal server error"]}) from exc
