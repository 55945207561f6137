"""
Storage Manager - picks the record store for this deployment.
The backend is chosen once from settings; callers never branch on it.
"""

from __future__ import annotations
from typing import Optional

import requests

from ..settings import Settings
from ..utils import default_store_path, get_logger
from .airtable_storage import AirtableStore
from .base import RecordStore
from .local_storage import LocalStore
from .rest_storage import RestStore

log = get_logger("storage")


def build_store(settings: Settings, session: Optional[requests.Session] = None) -> RecordStore:
    """
    Create the configured backend.

    Args:
        settings: Deployment settings (already checked)
        session: Optional shared HTTP session

    Returns:
        RestStore, AirtableStore or LocalStore
    """
    settings.check()

    if settings.backend == "rest":
        store: RecordStore = RestStore(
            options_base=settings.options_api_base or "",
            orders_base=settings.orders_api_base or "",
            assigns_order_date=settings.orders_server_dates,
            timeout=settings.request_timeout,
            session=session,
        )
    elif settings.backend == "airtable":
        store = AirtableStore(
            api_key=settings.airtable_api_key or "",
            base_id=settings.airtable_base_id or "",
            options_table=settings.airtable_options_table,
            orders_table=settings.airtable_orders_table,
            timeout=settings.request_timeout,
            session=session,
        )
    else:
        store = LocalStore(settings.store_path or default_store_path())

    log.info("Using store: %s", store.describe())
    return store
