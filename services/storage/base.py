"""
Record store interface.

A store speaks one backend's dialect: where the two collections live, how a
record is wrapped on the wire, and which field names it uses. Adapters in
``services.catalog`` / ``services.orders`` only see flat dicts carrying an
``id`` key plus backend field names.
"""

from __future__ import annotations
from typing import Any, Dict, List

OPTIONS = "options"
ORDERS = "orders"
COLLECTIONS = (OPTIONS, ORDERS)

# Canonical field -> backend field name
CANONICAL_OPTION_FIELDS: Dict[str, str] = {
    "category": "category",
    "value": "value",
}

CANONICAL_ORDER_FIELDS: Dict[str, str] = {
    "client_name": "client_name",
    "product": "product",
    "quantity": "quantity",
    "fillings": "fillings",
    "note": "note",
    "delivery": "delivery",
    "address": "address",
    "payment_status": "payment_status",
    "order_date": "order_date",
    "delivery_date": "delivery_date",
    "delivery_time": "delivery_time",
    "value": "total_value",
}


class RecordStore:
    """Base class for backend strategies."""

    name = "base"
    option_fields: Dict[str, str] = CANONICAL_OPTION_FIELDS
    order_fields: Dict[str, str] = CANONICAL_ORDER_FIELDS
    # Field holding a server timestamp when no order date field is present
    created_field: str = ""

    @property
    def assigns_order_date(self) -> bool:
        """True when the store stamps the order date itself."""
        return True

    def describe(self) -> str:
        """Human readable location (for the UI caption)."""
        return self.name

    def list_records(self, collection: str) -> List[Dict[str, Any]]:
        """
        Return every record of ``collection`` as flat dicts.

        Raises:
            StoreError: network failure, non-2xx answer or malformed body
        """
        raise NotImplementedError

    def create_record(self, collection: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Append a record and return it as stored (flat dict with ``id``).

        Raises:
            StoreError: network failure, non-2xx answer or malformed body
        """
        raise NotImplementedError

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection!r}")
