"""Streamlit UI components for the order pages."""

from .dashboard import render_dashboard
from .order_form import render_order_form
from .session import get_filling_map, get_services, toast_notifier

__all__ = [
    "render_dashboard",
    "render_order_form",
    "get_filling_map",
    "get_services",
    "toast_notifier",
]
