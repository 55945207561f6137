"""Dashboard logic (no UI)."""

from .filters import days_until, filter_orders, is_paid, summarize, urgency

__all__ = ["days_until", "filter_orders", "is_paid", "summarize", "urgency"]
