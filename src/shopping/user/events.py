"""Domain events for the User aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from shopping.domain import shopping


@shopping.event(part_of="User")
class WalletDebited:
    """Money left the user's wallet to pay for a checkout."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    amount = Float(required=True)
    balance = Float(required=True)
    debited_at = DateTime(required=True)
