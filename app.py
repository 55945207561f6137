"""
Streamlit entrypoint for Thai Doces orders.
- Novo Pedido: order form
- Dashboard: filtered order list, summary cards, exports
- Gerenciar Opções: catalog values used by the form dropdowns

Run from project root:
    streamlit run app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from admin.views import admin_router
from orders.ui import get_services, render_dashboard, render_order_form

PAGES = ["Novo Pedido", "Dashboard", "Gerenciar Opções"]

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Thai Doces", page_icon="🍰", layout="wide")

st.sidebar.title("Thai Doces 🍰")
choice = st.sidebar.radio("Páginas", options=PAGES, index=0, key="page_choice")

services = get_services()
st.sidebar.caption(f"Fonte de dados: {services.store.describe()}")

if choice == "Novo Pedido":
    render_order_form(services)
elif choice == "Dashboard":
    render_dashboard(services)
else:
    admin_router(choice)
