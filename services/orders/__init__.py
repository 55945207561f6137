"""Order submission and listing."""

from .order_adapter import OrderAdapter
from .order_service import OrderService

__all__ = ["OrderAdapter", "OrderService"]
