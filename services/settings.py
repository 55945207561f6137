"""
Deployment settings.

Values are read from environment variables first and then from Streamlit
secrets (``.streamlit/secrets.toml``). Nothing here is user input.

Keys:
    STORE_BACKEND           rest | airtable | local (default: local)
    API_BASE                base URL shared by both REST collections
    OPTIONS_API_BASE        base URL for /options (falls back to API_BASE)
    ORDERS_API_BASE         base URL for /orders (falls back to API_BASE)
    ORDERS_SERVER_DATES     "0"/"false" when the REST API expects the
                            client to send the order date
    AIRTABLE_API_KEY        personal access token
    AIRTABLE_BASE_ID        base identifier (appXXXX)
    AIRTABLE_OPTIONS_TABLE  default: Opcoes
    AIRTABLE_ORDERS_TABLE   default: Pedidos
    STORE_PATH              JSON file for the local backend
    FILLINGS_MAP_PATH       optional JSON {product: [fillings]}
    REQUEST_TIMEOUT         seconds (default: 15)
    LOG_DIR / LOG_LEVEL     logging destination and level
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigError
from .utils import default_log_dir, default_store_path

BACKENDS = ("rest", "airtable", "local")


def get_secret(name: str) -> Optional[str]:
    """Get secret from environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    try:
        import streamlit as st
        value = st.secrets.get(name)
    except Exception:
        # No secrets.toml (tests, plain scripts)
        return None
    return str(value) if value not in (None, "") else None


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    backend: str = "local"
    options_api_base: Optional[str] = None
    orders_api_base: Optional[str] = None
    orders_server_dates: bool = True
    airtable_api_key: Optional[str] = None
    airtable_base_id: Optional[str] = None
    airtable_options_table: str = "Opcoes"
    airtable_orders_table: str = "Pedidos"
    store_path: Optional[Path] = None
    fillings_map_path: Optional[Path] = None
    request_timeout: float = 15.0
    log_dir: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment / Streamlit secrets."""
        backend = (get_secret("STORE_BACKEND") or "local").strip().lower()
        api_base = get_secret("API_BASE")
        store_path = get_secret("STORE_PATH")
        fillings_path = get_secret("FILLINGS_MAP_PATH")
        log_dir = get_secret("LOG_DIR")
        timeout = get_secret("REQUEST_TIMEOUT")

        try:
            request_timeout = float(timeout) if timeout else 15.0
        except ValueError:
            raise ConfigError(f"REQUEST_TIMEOUT must be a number, got {timeout!r}")

        settings = cls(
            backend=backend,
            options_api_base=get_secret("OPTIONS_API_BASE") or api_base,
            orders_api_base=get_secret("ORDERS_API_BASE") or api_base,
            orders_server_dates=_flag(get_secret("ORDERS_SERVER_DATES"), True),
            airtable_api_key=get_secret("AIRTABLE_API_KEY"),
            airtable_base_id=get_secret("AIRTABLE_BASE_ID"),
            airtable_options_table=get_secret("AIRTABLE_OPTIONS_TABLE") or "Opcoes",
            airtable_orders_table=get_secret("AIRTABLE_ORDERS_TABLE") or "Pedidos",
            store_path=Path(store_path).expanduser() if store_path else default_store_path(),
            fillings_map_path=Path(fillings_path).expanduser() if fillings_path else None,
            request_timeout=request_timeout,
            log_dir=Path(log_dir).expanduser() if log_dir else default_log_dir(),
            log_level=(get_secret("LOG_LEVEL") or "INFO").upper(),
        )
        settings.check()
        return settings

    def check(self) -> None:
        """Raise ConfigError when the selected backend lacks its settings."""
        if self.backend not in BACKENDS:
            raise ConfigError(
                f"Unknown STORE_BACKEND {self.backend!r}; expected one of {', '.join(BACKENDS)}"
            )
        if self.backend == "rest" and not (self.options_api_base and self.orders_api_base):
            raise ConfigError("REST backend needs API_BASE (or OPTIONS_API_BASE and ORDERS_API_BASE)")
        if self.backend == "airtable" and not (self.airtable_api_key and self.airtable_base_id):
            raise ConfigError("Airtable backend needs AIRTABLE_API_KEY and AIRTABLE_BASE_ID")
