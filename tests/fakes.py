"""Test doubles for the record store and the HTTP session."""

from __future__ import annotations
from typing import Any, Dict, List

import requests

from services.errors import StoreError
from services.storage.base import OPTIONS, ORDERS, RecordStore

NOT_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None):
        self.status_code = status_code
        self._payload = payload
        self.text = "" if payload is NOT_JSON else str(payload)

    def json(self):
        if self._payload is NOT_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)


class FakeSession:
    """Answers queued responses in order and records every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: List[tuple] = []

    def _next(self, method: str, url: str, **kwargs):
        self.calls.append((method, url, kwargs))
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)


class MemoryStore(RecordStore):
    """In-memory store using canonical field names."""

    name = "memory"

    def __init__(self, options=None, orders=None, assigns_order_date: bool = True):
        self.records: Dict[str, List[Dict[str, Any]]] = {
            OPTIONS: [dict(r) for r in (options or [])],
            ORDERS: [dict(r) for r in (orders or [])],
        }
        self.fail = set()
        self.list_calls = 0
        self.sent: List[tuple] = []
        self._assigns = assigns_order_date

    @property
    def assigns_order_date(self) -> bool:
        return self._assigns

    def list_records(self, collection):
        self.list_calls += 1
        if ("list", collection) in self.fail:
            raise StoreError(f"{collection} unavailable")
        return [dict(r) for r in self.records[collection]]

    def create_record(self, collection, fields):
        self.sent.append((collection, dict(fields)))
        if ("create", collection) in self.fail:
            raise StoreError(f"{collection} rejected")
        record = dict(fields)
        record["id"] = str(len(self.records[collection]) + 1)
        if collection == ORDERS and self._assigns:
            record["order_date"] = "2025-06-10"
        self.records[collection].append(record)
        return record
