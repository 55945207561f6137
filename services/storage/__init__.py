"""Storage layer: interchangeable record store backends."""

from .airtable_storage import AirtableStore
from .base import OPTIONS, ORDERS, RecordStore
from .local_storage import LocalStore
from .rest_storage import RestStore
from .storage_manager import build_store

__all__ = [
    "AirtableStore",
    "LocalStore",
    "RestStore",
    "RecordStore",
    "OPTIONS",
    "ORDERS",
    "build_store",
]
