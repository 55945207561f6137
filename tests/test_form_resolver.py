from datetime import date, timedelta

from orders.form import (
    ADDRESS,
    FILLINGS,
    change_product,
    is_delivery,
    is_valid_delivery_date,
    reconcile_fillings,
    resolve_fields,
    validate_draft,
)
from orders.models import OrderDraft

TODAY = date(2025, 6, 10)
CATALOG_FILLINGS = ["Ninho", "Tradicional", "Branco"]
FILLING_MAP = {
    "Morango do Amor": ["Branco", "Ninho"],
    "Brigadeiro": ["Ninho", "Tradicional"],
}


def test_no_product_means_no_filling_field():
    state = resolve_fields(OrderDraft(), CATALOG_FILLINGS, FILLING_MAP)
    assert state.filling_choices == ()
    assert FILLINGS not in state.visible_fields
    assert FILLINGS not in state.required_fields


def test_filling_choices_follow_product():
    state = resolve_fields(OrderDraft(product="Morango do Amor"), CATALOG_FILLINGS, FILLING_MAP)
    assert state.filling_choices == ("Branco", "Ninho")
    assert FILLINGS in state.required_fields
    assert state.filling_label == "Opção"


def test_mapped_fillings_missing_from_catalog_are_not_offered():
    d = OrderDraft(product="Brigadeiro", fillings=("Tradicional",))
    state = resolve_fields(d, ["Ninho"], FILLING_MAP)
    assert state.filling_choices == ("Ninho",)
    assert FILLINGS in validate_draft(d, state, TODAY)


def test_unmapped_product_offers_every_catalog_filling():
    state = resolve_fields(OrderDraft(product="Bolo de Cenoura"), CATALOG_FILLINGS, FILLING_MAP)
    assert state.filling_choices == tuple(CATALOG_FILLINGS)
    assert state.filling_label == "Cobertura"


def test_changing_product_drops_fillings_it_does_not_offer():
    d = OrderDraft(product="Morango do Amor", fillings=("Branco", "Ninho"))
    changed = change_product(d, "Brigadeiro", CATALOG_FILLINGS, FILLING_MAP)
    assert changed.product == "Brigadeiro"
    assert changed.fillings == ("Ninho",)
    # original draft untouched
    assert d.fillings == ("Branco", "Ninho")


def test_clearing_product_clears_fillings():
    d = OrderDraft(product="Brigadeiro", fillings=("Ninho",))
    assert change_product(d, "", CATALOG_FILLINGS, FILLING_MAP).fillings == ()


def test_reconcile_returns_same_draft_when_consistent():
    d = OrderDraft(product="Brigadeiro", fillings=("Ninho",))
    state = resolve_fields(d, CATALOG_FILLINGS, FILLING_MAP)
    assert reconcile_fillings(d, state) is d


def test_address_visible_and_required_only_for_delivery():
    pickup = resolve_fields(OrderDraft(delivery="Retirar"), CATALOG_FILLINGS)
    deliver = resolve_fields(OrderDraft(delivery="Entregar"), CATALOG_FILLINGS)
    assert ADDRESS not in pickup.visible_fields and ADDRESS not in pickup.required_fields
    assert ADDRESS in deliver.visible_fields and ADDRESS in deliver.required_fields


def test_delivery_mode_detection():
    assert is_delivery("Entregar")
    assert is_delivery(" delivery ")
    assert is_delivery("Entrega em domicílio")
    assert not is_delivery("Retirar")
    assert not is_delivery("Retirada na loja")
    assert not is_delivery("")


def test_toggling_delivery_does_not_leak_address_error():
    d = OrderDraft(
        client_name="Maria", product="Brigadeiro", fillings=("Ninho",), delivery="Entregar",
        payment_status="Pago", quantity=1, value=10, delivery_date=TODAY,
    )
    state = resolve_fields(d, CATALOG_FILLINGS)
    assert ADDRESS in validate_draft(d, state, TODAY)

    back = d.with_changes(delivery="Retirar")
    assert validate_draft(back, resolve_fields(back, CATALOG_FILLINGS), TODAY) == {}


def test_delivery_date_today_allowed_yesterday_rejected():
    assert is_valid_delivery_date(TODAY, TODAY)
    assert is_valid_delivery_date(TODAY + timedelta(days=1), TODAY)
    assert not is_valid_delivery_date(TODAY - timedelta(days=1), TODAY)
    assert not is_valid_delivery_date(None, TODAY)


def test_resolver_is_referentially_transparent():
    d = OrderDraft(product="Brigadeiro", delivery="Entregar", fillings=("Ninho",))
    assert resolve_fields(d, CATALOG_FILLINGS, FILLING_MAP) == resolve_fields(d, CATALOG_FILLINGS, FILLING_MAP)
