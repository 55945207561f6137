# admin/views/manage_options.py
from __future__ import annotations

import streamlit as st

from orders.ui.session import get_services
from services.errors import CreateError, FetchError, ValidationError
from .helpers import category_choices, category_label, options_block


def _clear_form() -> None:
    ss = st.session_state
    for k in ("opt_value",):
        if k in ss:
            del ss[k]


# ----------------------------- UI -----------------------------
def page_manage_options():
    st.title("⚙️ Gerenciar Opções")
    st.caption("Adicione as opções usadas nos formulários de pedido")

    ss = st.session_state
    ss.setdefault("option_created", "")

    services = get_services()
    catalog = services.catalog

    col_form, col_list = st.columns([1, 1])

    # ------------------------- CREATE -------------------------
    with col_form:
        st.subheader("➕ Adicionar Nova Opção")
        with st.form("create_option_form", clear_on_submit=False):
            category = st.selectbox(
                "Categoria",
                category_choices(),
                format_func=category_label,
                key="opt_category",
            )
            value = st.text_input("Valor", key="opt_value", placeholder="Ex: Brigadeiro")
            submitted = st.form_submit_button("Adicionar Opção", type="primary")

        if submitted:
            try:
                option = catalog.add_option(category, value)
            except ValidationError as e:
                for message in e.errors.values():
                    st.error(message)
            except CreateError as e:
                st.error(f"Erro ao criar opção: {e}")
            else:
                ss.option_created = f"{option.category} • {option.value}"
                _clear_form()
                st.rerun()

        if ss.option_created:
            st.success(f"✅ Opção salva: {ss.option_created}")
            if st.button("Limpar mensagem"):
                ss.option_created = ""
                st.rerun()

    # ------------------------- LIST -------------------------
    with col_list:
        try:
            if not catalog.cache.has_value:
                with st.spinner("Carregando opções..."):
                    catalog.all()
            options_block(catalog.grouped())
        except FetchError as e:
            st.error(f"Erro ao buscar opções: {e}")
            if st.button("Tentar novamente", key="options_retry"):
                catalog.invalidate()
                st.rerun()

    st.caption(f"Fonte de dados: {services.store.describe()}")
