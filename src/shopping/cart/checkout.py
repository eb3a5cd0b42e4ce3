"""Wallet checkout across the Cart and the paying User.

Checkout spans two aggregates: the User pays, the Cart empties. The User is
the instance the caller resolved; its address and balance are what the
guards read, and it is the object that gets debited. The caller persists
both aggregates inside one unit of work.

Guards run in a fixed order and the first failure wins:

1. the cart has at least one line
2. the user has replaced the placeholder shipping address
3. the wallet covers the cart total (computed from the line snapshots)

The cart is drained before the wallet is touched, so a failure while
draining leaves the caller's User as it was.
"""

import structlog
from protean.exceptions import ValidationError

from shopping.cart.cart import CART_EMPTY, Cart

logger = structlog.get_logger(__name__)

ADDRESS_NOT_SET = "Address not set"
INSUFFICIENT_BALANCE = "Wallet balance insufficient"


def check_out(cart: Cart, user) -> float:
    """Charge ``user`` for everything in ``cart`` and empty it.

    Returns the amount debited.
    """
    if not cart.items:
        raise ValidationError({"cart": [CART_EMPTY]})

    if not user.has_set_non_default_address():
        raise ValidationError({"address": [ADDRESS_NOT_SET]})

    cart_total = cart.total()
    if cart_total > user.wallet_money:
        logger.info(
            "Checkout refused, wallet too low",
            email=user.email,
            cart_total=cart_total,
            wallet_money=user.wallet_money,
        )
        raise ValidationError({"wallet_money": [INSUFFICIENT_BALANCE]})

    cart.check_out()
    user.debit_wallet(cart_total)

    logger.info(
        "Checked out cart",
        email=user.email,
        cart_total=cart_total,
        balance=user.wallet_money,
    )
    return cart_total
