# admin/app.py
"""
Streamlit entrypoint for the options screen only.

Run from project root:
    streamlit run admin/app.py --server.port 8502 --server.address 127.0.0.1
"""

# Add project root to sys.path so "admin", "orders" and "services" imports resolve
import os
import sys

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import streamlit as st

from admin.views import admin_router

st.set_page_config(page_title="Thai Doces • Opções", page_icon="⚙️", layout="wide")

admin_router("Gerenciar Opções")
