"""
REST API storage implementation.
Talks to the order API: flat JSON arrays under /options and /orders.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

import requests

from ..errors import StoreError
from ..utils import get_logger
from .base import OPTIONS, ORDERS, RecordStore

log = get_logger("storage.rest")


class RestStore(RecordStore):
    """Handles the flat REST API (one JSON object per record)."""

    name = "rest"
    option_fields = {
        "category": "category",
        "value": "value",
    }
    order_fields = {
        "client_name": "cliente",
        "product": "produto",
        "quantity": "quantidade",
        "fillings": "recheio",
        "note": "observacao",
        "delivery": "entrega",
        "address": "endereco",
        "payment_status": "statusPagamento",
        "order_date": "dataPedido",
        "delivery_date": "dataEntrega",
        "delivery_time": "horaEntrega",
        "value": "valorTotal",
    }

    def __init__(
        self,
        options_base: str,
        orders_base: str,
        assigns_order_date: bool = True,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.urls = {
            OPTIONS: f"{options_base.rstrip('/')}/options",
            ORDERS: f"{orders_base.rstrip('/')}/orders",
        }
        self._assigns_order_date = assigns_order_date
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def assigns_order_date(self) -> bool:
        return self._assigns_order_date

    def describe(self) -> str:
        return f"REST {self.urls[OPTIONS]} | {self.urls[ORDERS]}"

    def _headers(self) -> Dict[str, str]:
        """Build headers for API requests."""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def list_records(self, collection: str) -> List[Dict[str, Any]]:
        """
        Fetch a collection.

        Returns:
            List of records as returned by the API

        Raises:
            StoreError: If fetch fails or the body is not a JSON array
        """
        self._check_collection(collection)
        url = self.urls[collection]

        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            log.error("GET %s failed: %s", url, e)
            raise StoreError(f"Fetch error ({collection}): {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise StoreError(f"Malformed {collection} response: not JSON") from e

        if not isinstance(data, list):
            raise StoreError(f"Malformed {collection} response: expected a list")

        log.info("Fetched %d %s from %s", len(data), collection, url)
        return [r for r in data if isinstance(r, dict)]

    def create_record(self, collection: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST one record.

        Args:
            collection: 'options' or 'orders'
            fields: Payload in the API's field names

        Returns:
            The created record (with server assigned id)

        Raises:
            StoreError: If the request fails
        """
        self._check_collection(collection)
        url = self.urls[collection]

        try:
            response = self.session.post(
                url,
                headers=self._headers(),
                json=fields,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            log.error("POST %s failed: %s", url, e)
            raise StoreError(f"Create error ({collection}): {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise StoreError(f"Malformed {collection} response: not JSON") from e

        if not isinstance(data, dict):
            raise StoreError(f"Malformed {collection} response: expected an object")

        return data
