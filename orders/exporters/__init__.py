"""Export modules for the order list."""

from .csv_exporter import export_to_csv, orders_to_csv
from .excel_exporter import export_to_excel, orders_to_excel
from .table import COLUMNS, orders_frame

__all__ = [
    "export_to_csv",
    "orders_to_csv",
    "export_to_excel",
    "orders_to_excel",
    "COLUMNS",
    "orders_frame",
]
