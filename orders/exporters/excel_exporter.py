"""Excel export functionality."""

from __future__ import annotations
from datetime import datetime
from io import BytesIO
from typing import Iterable

import pandas as pd
import streamlit as st

from orders.models import Order
from .table import orders_frame

SHEET = "Pedidos"


def orders_to_excel(orders: Iterable[Order]) -> bytes:
    """Workbook with one sheet listing the orders."""
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        orders_frame(orders).to_excel(xw, index=False, sheet_name=SHEET)
        ws = xw.sheets[SHEET]
        ws.set_column(0, 0, 10)
        ws.set_column(1, 2, 28)
        ws.set_column(3, 6, 16)
        ws.set_column(7, 7, 40)
    return buf.getvalue()


def export_to_excel(orders: Iterable[Order]) -> None:
    """Render Excel download button."""
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    st.download_button(
        "Exportar Excel",
        data=orders_to_excel(orders),
        file_name=f"pedidos-thai-doces_{stamp}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
