"""CSV export of the filtered order list."""

from __future__ import annotations
import csv
from typing import Iterable

import streamlit as st

from orders.models import Order
from .table import orders_frame

CSV_FILE_NAME = "pedidos-thai-doces.csv"


def orders_to_csv(orders: Iterable[Order]) -> str:
    """
    Comma separated document with a header row.

    Any field containing a comma, quote or newline is quoted.
    """
    return orders_frame(orders).to_csv(index=False, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")


def export_to_csv(orders: Iterable[Order]) -> None:
    """Render CSV download button."""
    st.download_button(
        "Exportar CSV",
        # BOM so spreadsheet apps pick up UTF-8 accents
        data=orders_to_csv(orders).encode("utf-8-sig"),
        file_name=CSV_FILE_NAME,
        mime="text/csv",
        use_container_width=True,
    )
