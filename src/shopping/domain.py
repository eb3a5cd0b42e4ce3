"""Shopping bounded context: per-user carts and the wallet checkout."""

from protean.domain import Domain

from shopping.utils.logging import configure_logging, get_logger

configure_logging(log_dir="logs", log_file_prefix="qkart")

logger = get_logger(__name__)

# Domain Composition Root
shopping = Domain(name="shopping")
