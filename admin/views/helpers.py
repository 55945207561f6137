# admin/views/helpers.py
"""
Shared helpers for admin pages: category choices and UI blocks.
"""

from __future__ import annotations

from typing import Dict, List

import streamlit as st

from orders.models import Category, Option

CATEGORY_ICONS = {
    Category.PRODUCT: "🍫",
    Category.FILLING: "🍓",
    Category.DELIVERY: "🚚",
    Category.PAYMENT_STATUS: "💳",
}


# ---------------- Small helpers ----------------
def category_choices() -> List[Category]:
    """Categories in display order."""
    return list(Category)


def category_label(category: Category) -> str:
    return f"{CATEGORY_ICONS.get(category, '')} {category.value}".strip()


# ---------------- UI blocks ----------------
def options_block(grouped: Dict[Category, List[Option]]) -> None:
    """Render current options, one expander per category."""
    st.subheader("Opções Cadastradas")
    for category in category_choices():
        items = grouped.get(category, [])
        with st.expander(f"{category_label(category)} ({len(items)})", expanded=bool(items)):
            if not items:
                st.caption("Nenhuma opção cadastrada.")
                continue
            for option in sorted(items, key=lambda o: o.value.casefold()):
                st.markdown(f"- {option.value}")
