"""Repository layer: record <-> model conversions."""

from .option_repository import OptionRepository
from .order_repository import OrderRepository

__all__ = ["OptionRepository", "OrderRepository"]
