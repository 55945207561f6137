"""
Airtable storage implementation.
Spreadsheet-backed API: each row is {"id", "createdTime", "fields": {...}}.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..errors import StoreError
from ..utils import get_logger
from .base import OPTIONS, ORDERS, RecordStore

log = get_logger("storage.airtable")

API_ROOT = "https://api.airtable.com/v0"


class AirtableStore(RecordStore):
    """Handles Airtable REST API operations."""

    name = "airtable"
    option_fields = {
        "category": "Categoria",
        "value": "Valor",
    }
    order_fields = {
        "client_name": "Cliente",
        "product": "Produto",
        "quantity": "Quantidade",
        "fillings": "Recheio",
        "note": "Observação",
        "delivery": "Entrega",
        "address": "Endereço",
        "payment_status": "Status Pagamento",
        "order_date": "Data Pedido",
        "delivery_date": "Data Entrega",
        "delivery_time": "Hora Entrega",
        "value": "Valor Total",
    }
    created_field = "createdTime"

    def __init__(
        self,
        api_key: str,
        base_id: str,
        options_table: str = "Opcoes",
        orders_table: str = "Pedidos",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_id = base_id
        self.tables = {OPTIONS: options_table, ORDERS: orders_table}
        self.timeout = timeout
        self.session = session or requests.Session()

    def describe(self) -> str:
        return f"Airtable {self.base_id} ({self.tables[OPTIONS]}, {self.tables[ORDERS]})"

    def _url(self, collection: str) -> str:
        return f"{API_ROOT}/{self.base_id}/{quote(self.tables[collection])}"

    def _headers(self) -> Dict[str, str]:
        """Build headers for Airtable requests."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def _flatten(record: Any) -> Optional[Dict[str, Any]]:
        """{"id", "createdTime", "fields": {...}} -> flat dict."""
        if not isinstance(record, dict):
            return None
        fields = record.get("fields")
        flat: Dict[str, Any] = dict(fields) if isinstance(fields, dict) else {}
        flat["id"] = record.get("id")
        if record.get("createdTime"):
            flat["createdTime"] = record["createdTime"]
        return flat

    def list_records(self, collection: str) -> List[Dict[str, Any]]:
        """
        Fetch all rows of a table, following ``offset`` pagination.

        Raises:
            StoreError: If any page fails or is malformed
        """
        self._check_collection(collection)
        url = self._url(collection)
        params: Dict[str, str] = {}
        out: List[Dict[str, Any]] = []

        while True:
            try:
                response = self.session.get(
                    url, headers=self._headers(), params=dict(params), timeout=self.timeout
                )
                if response.status_code in (401, 403, 404):
                    raise StoreError(
                        f"Airtable table unauthorized/unavailable (HTTP {response.status_code})"
                    )
                response.raise_for_status()
            except requests.RequestException as e:
                log.error("GET %s failed: %s", url, e)
                raise StoreError(f"Airtable fetch error: {e}") from e

            try:
                data = response.json()
            except ValueError as e:
                raise StoreError("Malformed Airtable response: not JSON") from e

            records = data.get("records") if isinstance(data, dict) else None
            if not isinstance(records, list):
                raise StoreError("Malformed Airtable response: missing 'records'")

            out.extend(r for r in map(self._flatten, records) if r is not None)

            offset = data.get("offset")
            if not offset:
                break
            params["offset"] = offset

        log.info("Fetched %d %s from Airtable", len(out), collection)
        return out

    def create_record(self, collection: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create one row.

        Raises:
            StoreError: If the request fails
        """
        self._check_collection(collection)
        url = self._url(collection)

        try:
            response = self.session.post(
                url,
                headers=self._headers(),
                json={"fields": fields, "typecast": True},
                timeout=self.timeout,
            )
            if response.status_code in (401, 403):
                raise StoreError(
                    f"Airtable create unauthorized (HTTP {response.status_code})"
                )
            response.raise_for_status()
        except requests.RequestException as e:
            log.error("POST %s failed: %s", url, e)
            raise StoreError(f"Airtable create error: {e}") from e

        try:
            flat = self._flatten(response.json())
        except ValueError as e:
            raise StoreError("Malformed Airtable response: not JSON") from e

        if not flat or not flat.get("id"):
            raise StoreError("Malformed Airtable response: missing record id")
        return flat
