"""
Order Form UI Component
=======================

New order entry. Field visibility and filling choices come from
``orders.form.resolve_fields`` on every rerun; nothing here decides them.

Workflow:
1. Load catalog options (products, fillings, delivery modes, payment statuses)
2. Build the draft from widget state, resolve visible fields
3. Drop fillings the selected product does not offer
4. On submit: validate, send, reset the draft

Related Files:
- orders/form/: resolver + validation
- services/orders/: submission
"""

from __future__ import annotations
from datetime import date
from typing import Dict, List

import streamlit as st

from orders.form import (
    ADDRESS,
    FILLINGS,
    reconcile_fillings,
    resolve_fields,
    validate_draft,
)
from orders.models import Category, FieldState, OrderDraft
from services.config_manager import AppServices
from services.errors import SubmitError, ValidationError
from .catalog_loader import load_choices
from .session import get_filling_map

PLACEHOLDER = "-- Selecione --"
PREFIX = "draft_"

DEFAULTS = {
    "client_name": "",
    "product": PLACEHOLDER,
    "fillings": [],
    "delivery": PLACEHOLDER,
    "payment_status": PLACEHOLDER,
    "quantity": 1,
    "value": 0.0,
    "note": "",
    "delivery_time": "14:00",
    "address": "",
}


def _key(name: str) -> str:
    return f"{PREFIX}{name}"


def _selected(name: str) -> str:
    value = st.session_state.get(_key(name), PLACEHOLDER)
    return "" if value == PLACEHOLDER else str(value)


def _draft_from_state() -> OrderDraft:
    ss = st.session_state
    return OrderDraft(
        client_name=ss.get(_key("client_name"), ""),
        product=_selected("product"),
        fillings=tuple(ss.get(_key("fillings"), [])),
        delivery=_selected("delivery"),
        payment_status=_selected("payment_status"),
        quantity=ss.get(_key("quantity"), 1),
        value=ss.get(_key("value"), 0.0),
        note=ss.get(_key("note"), ""),
        delivery_date=ss.get(_key("delivery_date")),
        delivery_time=ss.get(_key("delivery_time"), "14:00"),
        address=ss.get(_key("address"), ""),
    )


def _reset_draft() -> None:
    ss = st.session_state
    for k in list(ss.keys()):
        if str(k).startswith(PREFIX):
            del ss[k]
    ss.order_submitted = False


def _select(label: str, name: str, values: List[str]) -> None:
    options = [PLACEHOLDER] + values
    # A value removed from the catalog falls back to the placeholder
    if st.session_state.get(_key(name)) not in options:
        st.session_state[_key(name)] = PLACEHOLDER
    st.selectbox(label, options, key=_key(name))


def _show_error(errors: Dict[str, str], field: str) -> None:
    if field in errors:
        st.caption(f":red[{errors[field]}]")


def render_order_form(services: AppServices) -> None:
    """Render the new-order form."""
    st.subheader("🍰 Novo Pedido")
    st.caption("Preencha os dados do pedido")

    ss = st.session_state
    ss.setdefault("order_submitted", False)
    for name, default in DEFAULTS.items():
        ss.setdefault(_key(name), default)
    ss.setdefault(_key("delivery_date"), date.today())

    if ss.get("last_order_id"):
        st.success(f"✅ Pedido registrado (ID: {ss.last_order_id})")

    choices = load_choices(services.catalog, "order_form")
    if choices is None:
        return

    filling_map = get_filling_map()

    st.text_input("Nome do Cliente", key=_key("client_name"), placeholder="Digite o nome completo")
    _select("Produto", "product", choices[Category.PRODUCT])

    # Resolve after the product widget so its new value is used
    draft = _draft_from_state()
    state: FieldState = resolve_fields(draft, choices[Category.FILLING], filling_map)
    reconciled = reconcile_fillings(draft, state)
    if reconciled is not draft:
        ss[_key("fillings")] = list(reconciled.fillings)

    errors: Dict[str, str] = {}
    if ss.order_submitted:
        errors = validate_draft(_draft_from_state(), state)

    _show_error(errors, "client_name")
    _show_error(errors, "product")

    if FILLINGS in state.visible_fields:
        st.multiselect(state.filling_label, list(state.filling_choices), key=_key("fillings"))
        _show_error(errors, FILLINGS)

    c1, c2 = st.columns(2)
    with c1:
        _select("Entrega", "delivery", choices[Category.DELIVERY])
        _show_error(errors, "delivery")
    with c2:
        _select("Status Pagamento", "payment_status", choices[Category.PAYMENT_STATUS])
        _show_error(errors, "payment_status")

    # Delivery mode may have changed this run
    draft = _draft_from_state()
    state = resolve_fields(draft, choices[Category.FILLING], filling_map)
    if ss.order_submitted:
        errors = validate_draft(draft, state)

    if ADDRESS in state.visible_fields:
        st.text_input("Endereço", key=_key("address"), placeholder="Rua, número, bairro")
        _show_error(errors, ADDRESS)

    c3, c4 = st.columns(2)
    with c3:
        st.number_input("Quantidade", min_value=1, step=1, format="%d", key=_key("quantity"))
        _show_error(errors, "quantity")
    with c4:
        st.number_input("Valor do Pedido (R$)", min_value=0.0, step=0.5, format="%.2f", key=_key("value"))
        _show_error(errors, "value")

    c5, c6 = st.columns(2)
    with c5:
        st.date_input("Data de Entrega", min_value=date.today(), format="DD/MM/YYYY", key=_key("delivery_date"))
        _show_error(errors, "delivery_date")
    with c6:
        st.text_input("Hora de Entrega (HH:MM)", key=_key("delivery_time"))
        _show_error(errors, "delivery_time")

    st.text_area("Observação", key=_key("note"), placeholder="Observações especiais para o pedido", height=90)

    if st.button("Criar Pedido", type="primary", use_container_width=True):
        ss.order_submitted = True
        try:
            order = services.orders.submit(_draft_from_state(), state)
        except ValidationError:
            st.rerun()
        except SubmitError as e:
            st.error(f"Erro ao criar pedido: {e}")
        else:
            _reset_draft()
            ss.last_order_id = order.id
            st.rerun()
