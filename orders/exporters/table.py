"""Tabular view of orders shared by the dashboard and the exporters."""

from __future__ import annotations
from typing import Iterable

import pandas as pd

from orders.models import Order

COLUMNS = [
    "ID",
    "Produto",
    "Recheio",
    "Quantidade",
    "Entrega",
    "Status Pagamento",
    "Data Entrega",
    "Observação",
]


def orders_frame(orders: Iterable[Order]) -> pd.DataFrame:
    """One row per order, columns as in the exported sheet."""
    rows = [
        {
            "ID": o.id,
            "Produto": o.product,
            "Recheio": ", ".join(o.fillings),
            "Quantidade": int(o.quantity),
            "Entrega": o.delivery,
            "Status Pagamento": o.payment_status,
            "Data Entrega": o.delivery_date.isoformat() if o.delivery_date else "",
            "Observação": o.note,
        }
        for o in orders
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
