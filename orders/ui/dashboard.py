"""Dashboard UI: filters, summary cards, colored order table, exports."""

from __future__ import annotations
from datetime import date

import pandas as pd
import streamlit as st

from orders.dashboard import filter_orders, summarize, urgency
from orders.exporters import export_to_csv, export_to_excel, orders_frame
from orders.models import ALL, Category, DateBucket, FilterState, Urgency
from services.config_manager import AppServices
from services.errors import FetchError
from .catalog_loader import load_choices

DATE_LABELS = {
    DateBucket.ALL: "Todas as datas",
    DateBucket.THIS_WEEK: "Esta semana",
    DateBucket.THIS_MONTH: "Este mês",
}

ROW_COLORS = {
    Urgency.URGENT: "background-color: #e8f5e9",  # esta semana
    Urgency.SOON: "background-color: #fffde7",    # próxima semana
    Urgency.LATER: "background-color: #f5f5f5",
}


def _styled(df: pd.DataFrame, levels: list):
    return df.style.apply(lambda row: [ROW_COLORS[levels[row.name]]] * len(row), axis=1)


def render_dashboard(services: AppServices) -> None:
    """Render the order dashboard."""
    st.subheader("📊 Dashboard")
    st.caption("Gerencie seus pedidos de forma eficiente")

    if st.button("🔄 Atualizar pedidos"):
        services.orders.invalidate()
        st.rerun()

    try:
        # A rerun blocks on the fetch, so is_loading only holds inside it
        if not services.orders.cache.has_value:
            with st.spinner("Carregando pedidos..."):
                services.orders.all()
        orders = services.orders.all()
    except FetchError as e:
        st.error(f"Erro ao buscar pedidos: {e}")
        return

    choices = load_choices(services.catalog, "dashboard") or {}

    # ---------------- Filters ----------------
    c1, c2, c3 = st.columns(3)
    with c1:
        bucket = st.selectbox(
            "Data de entrega",
            list(DateBucket),
            format_func=lambda b: DATE_LABELS[b],
            key="flt_date",
        )
    with c2:
        status = st.selectbox(
            "Status pagamento",
            [ALL] + choices.get(Category.PAYMENT_STATUS, []),
            format_func=lambda s: "Todos os status" if s == ALL else s,
            key="flt_status",
        )
    with c3:
        product = st.selectbox(
            "Produto",
            [ALL] + choices.get(Category.PRODUCT, []),
            format_func=lambda p: "Todos os produtos" if p == ALL else p,
            key="flt_product",
        )

    today = date.today()
    state = FilterState(date_bucket=bucket, payment_status=status, product=product)
    filtered = filter_orders(orders, state, today)
    summary = summarize(filtered)

    # ---------------- Summary ----------------
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Total de Pedidos", summary.total)
    m2.metric("Quantidade Total", summary.total_quantity)
    m3.metric("Pedidos Pagos", summary.paid)
    m4.metric("Pedidos Pendentes", summary.pending)

    st.markdown("---")

    # ---------------- Table ----------------
    st.markdown(f"### Lista de Pedidos ({len(filtered)})")
    if not filtered:
        st.info("Nenhum pedido para os filtros selecionados.")
        return

    df = orders_frame(filtered)
    levels = [urgency(o, today) for o in filtered]
    st.dataframe(_styled(df, levels), hide_index=True, use_container_width=True)
    st.caption("🟩 até 7 dias • 🟨 até 14 dias • ⬜ mais tarde")

    e1, e2 = st.columns(2)
    with e1:
        export_to_csv(filtered)
    with e2:
        export_to_excel(filtered)
