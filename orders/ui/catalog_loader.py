"""Catalog loading for the pages (spinner on first fetch, retry on error)."""

from __future__ import annotations
from typing import Dict, List, Optional

import streamlit as st

from orders.models import Category
from services.catalog import CatalogService
from services.errors import FetchError


def load_choices(catalog: CatalogService, key: str) -> Optional[Dict[Category, List[str]]]:
    """
    Values per category, or None after showing the fetch error.

    Args:
        catalog: Session catalog service
        key: Widget key prefix for the retry button
    """
    try:
        # A rerun blocks on the fetch, so is_loading only holds inside it
        if not catalog.cache.has_value:
            with st.spinner("Carregando opções..."):
                catalog.all()
        return {c: catalog.values(c) for c in Category}
    except FetchError as e:
        st.error(f"Erro ao buscar opções: {e}")
        if st.button("Tentar novamente", key=f"{key}_retry"):
            catalog.invalidate()
            st.rerun()
        return None
