"""User aggregate as seen from the shopping context.

Accounts are registered and maintained by the identity service; this
context reads the email and the shipping address and is the only writer of
``wallet_money``, which it decrements at checkout.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Float, String

from shopping import config
from shopping.domain import shopping
from shopping.user.events import WalletDebited


@shopping.aggregate
class User:
    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254, unique=True)
    password: String(max_length=255)
    wallet_money: Float(min_value=0.0, default=lambda: config.DEFAULT_WALLET_MONEY)
    address: String(max_length=1024, default=lambda: config.DEFAULT_ADDRESS)

    @classmethod
    def register(cls, name, email, password=None, wallet_money=None, address=None):
        kwargs = {"name": name, "email": email, "password": password}
        if wallet_money is not None:
            kwargs["wallet_money"] = wallet_money
        if address is not None:
            kwargs["address"] = address
        return cls(**kwargs)

    def has_set_non_default_address(self):
        """True once the user has replaced the placeholder shipping address."""
        return bool(self.address) and self.address != config.DEFAULT_ADDRESS

    def debit_wallet(self, amount):
        if amount > self.wallet_money:
            raise ValidationError({"wallet_money": ["Wallet balance insufficient"]})

        self.wallet_money = self.wallet_money - amount
        self.raise_(
            WalletDebited(
                user_id=str(self.id),
                email=self.email,
                amount=amount,
                balance=self.wallet_money,
                debited_at=datetime.now(UTC),
            )
        )


@shopping.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=email).all().items
        return users[0] if users else None
