"""
Configuration manager - Facade wiring settings, store and services.
The UI builds one ``AppServices`` per session and keeps it in session state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import requests

from .catalog import CatalogAdapter, CatalogService
from .notifications import Notifier
from .orders import OrderAdapter, OrderService
from .settings import Settings
from .storage import RecordStore, build_store
from .utils import setup_logger


@dataclass
class AppServices:
    settings: Settings
    store: RecordStore
    catalog: CatalogService
    orders: OrderService


def build_services(
    settings: Optional[Settings] = None,
    notify: Optional[Notifier] = None,
    store: Optional[RecordStore] = None,
    session: Optional[requests.Session] = None,
) -> AppServices:
    """
    Create the catalog and order services for one session.

    Args:
        settings: Defaults to ``Settings.from_env()``
        notify: Notification sink (toast in the UI, log otherwise)
        store: Pre-built store (tests); built from settings when omitted
        session: Optional HTTP session shared by remote stores

    Raises:
        ConfigError: If settings are incomplete
    """
    settings = settings or Settings.from_env()
    setup_logger(settings.log_dir, settings.log_level)

    store = store or build_store(settings, session=session)
    return AppServices(
        settings=settings,
        store=store,
        catalog=CatalogService(CatalogAdapter(store), notify),
        orders=OrderService(OrderAdapter(store), notify),
    )
