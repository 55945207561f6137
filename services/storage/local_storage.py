"""
Local file storage implementation.
Keeps options and orders in one JSON file (development without a server).
"""

from __future__ import annotations
import json
import os
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

from ..errors import StoreError
from ..utils import generate_unique_id, get_logger, next_sequential_id
from .base import OPTIONS, ORDERS, RecordStore

log = get_logger("storage.local")


class LocalStore(RecordStore):
    """Handles local file operations for options and orders."""

    name = "local"

    def __init__(self, file_path: Path):
        """
        Initialize local storage.

        Args:
            file_path: Path to the store JSON file
        """
        self.file_path = Path(file_path)

    def describe(self) -> str:
        return f"Local {self.file_path}"

    def load(self) -> Dict[str, Any]:
        """
        Load the whole store.

        Returns:
            Dict with 'options' and 'orders' keys

        Raises:
            StoreError: If the file exists but is not valid JSON
        """
        if not self.file_path.exists():
            return {OPTIONS: [], ORDERS: []}

        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Could not read {self.file_path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Malformed store file {self.file_path}: expected an object")

        data.setdefault(OPTIONS, [])
        data.setdefault(ORDERS, [])
        return data

    def save(self, data: Dict[str, Any]) -> Path:
        """
        Save the store with atomic write.

        Raises:
            StoreError: If write fails
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)

            # Atomic write: write to temp file first
            tmp_path = self.file_path.with_suffix(".json.tmp")
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())

            os.replace(tmp_path, self.file_path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.file_path}: {e}") from e

        return self.file_path

    def list_records(self, collection: str) -> List[Dict[str, Any]]:
        self._check_collection(collection)
        records = self.load().get(collection, [])
        if not isinstance(records, list):
            raise StoreError(f"Malformed store file: '{collection}' is not a list")
        return [dict(r) for r in records if isinstance(r, dict)]

    def create_record(self, collection: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        self._check_collection(collection)
        data = self.load()
        records = data[collection]
        existing = {str(r.get("id")) for r in records if isinstance(r, dict)}

        record = dict(fields)
        if collection == OPTIONS:
            base = f"{record.get('category', '')} {record.get('value', '')}"
            record["id"] = generate_unique_id(base, existing)
        else:
            record["id"] = next_sequential_id(existing)
            # Server-side stamp, like the remote APIs
            record[self.order_fields["order_date"]] = date.today().isoformat()

        records.append(record)
        self.save(data)
        log.info("Stored %s record %s in %s", collection, record["id"], self.file_path)
        return record
