"""Per-session service wiring for the Streamlit pages."""

from __future__ import annotations
from typing import Dict, Tuple

import streamlit as st

from orders.form import load_filling_map
from services.config_manager import AppServices, build_services
from services.errors import ConfigError
from services.notifications import ERROR

_ICONS = {ERROR: "❌"}


def toast_notifier(level: str, title: str, message: str) -> None:
    """Notifier that shows a transient toast."""
    st.toast(f"**{title}** {message}", icon=_ICONS.get(level, "✅"))


def get_services() -> AppServices:
    """
    Services for this browser session (built on first use).

    Stops the page with an error when settings are incomplete.
    """
    ss = st.session_state
    if "services" not in ss:
        try:
            ss.services = build_services(notify=toast_notifier)
        except ConfigError as e:
            st.error(f"Configuração inválida: {e}")
            st.stop()
    return ss.services


def get_filling_map() -> Dict[str, Tuple[str, ...]]:
    ss = st.session_state
    if "filling_map" not in ss:
        try:
            ss.filling_map = load_filling_map(get_services().settings.fillings_map_path)
        except ConfigError as e:
            st.warning(f"Mapa de recheios ignorado: {e}")
            ss.filling_map = {}
    return ss.filling_map
