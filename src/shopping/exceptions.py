"""Errors raised by the shopping context that Protean does not already model.

Caller-correctable failures are ``protean.exceptions.ValidationError`` and
missing carts are ``protean.exceptions.ObjectNotFoundError``. Only failures
of the store itself get their own type here.
"""

from protean.exceptions import ProteanException


class CartCreationError(ProteanException):
    """The store refused to create a cart for a user."""
