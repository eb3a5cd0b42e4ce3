"""Settings read from the environment.

Values are resolved once at import time. Tests that need different values
should patch the module attributes rather than the environment.
"""

import os

DEFAULT_PAYMENT_OPTION = os.getenv("DEFAULT_PAYMENT_OPTION", "PAYMENT_OPTION_DEFAULT")
DEFAULT_ADDRESS = os.getenv("DEFAULT_ADDRESS", "ADDRESS_NOT_SET")
DEFAULT_WALLET_MONEY = float(os.getenv("DEFAULT_WALLET_MONEY", "500"))
