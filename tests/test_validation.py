from datetime import date, timedelta

import pytest

from orders.form import ensure_valid, resolve_fields, validate_draft
from orders.models import OrderDraft
from services.errors import ValidationError

TODAY = date(2025, 6, 10)
FILLINGS = ["Ninho", "Tradicional"]


def valid_draft(**changes):
    d = OrderDraft(
        client_name="Maria",
        product="Brigadeiro",
        fillings=("Ninho",),
        delivery="Retirar",
        payment_status="Pago",
        quantity=1,
        value=0.01,
        delivery_date=TODAY,
        delivery_time="09:05",
    )
    return d.with_changes(**changes)


def errors_for(d):
    return validate_draft(d, resolve_fields(d, FILLINGS), TODAY)


def test_valid_draft_has_no_errors():
    assert errors_for(valid_draft()) == {}


@pytest.mark.parametrize("changes, field", [
    ({"client_name": "M"}, "client_name"),
    ({"quantity": 0}, "quantity"),
    ({"value": 0}, "value"),
    ({"value": float("nan")}, "value"),
    ({"value": float("inf")}, "value"),
    ({"delivery_date": TODAY - timedelta(days=1)}, "delivery_date"),
    ({"delivery_date": None}, "delivery_date"),
    ({"delivery_time": "24:00"}, "delivery_time"),
    ({"delivery_time": "9h30"}, "delivery_time"),
    ({"payment_status": ""}, "payment_status"),
    ({"delivery": ""}, "delivery"),
    ({"fillings": ("Nutella",)}, "fillings"),
    ({"delivery": "Entregar", "address": "Rua"}, "address"),
])
def test_field_scoped_errors(changes, field):
    assert set(errors_for(valid_draft(**changes))) == {field}


def test_missing_product_hides_filling_error():
    assert set(errors_for(valid_draft(product="", fillings=()))) == {"product"}


def test_ensure_valid_raises_with_errors():
    d = valid_draft(quantity=0)
    with pytest.raises(ValidationError) as exc:
        ensure_valid(d, resolve_fields(d, FILLINGS), TODAY)
    assert exc.value.errors == {"quantity": "Quantidade deve ser pelo menos 1"}
