"""Field-scoped validation of an order draft."""

from __future__ import annotations
import math
import re
from datetime import date
from typing import Dict, Optional

from orders.models import FieldState, OrderDraft
from services.errors import ValidationError
from services.utils import clean
from . import resolver as f

TIME_RE = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")

MIN_CLIENT_NAME = 2
MIN_ADDRESS = 5
MIN_VALUE = 0.01


def _number(value, cast):
    try:
        return cast(value)
    except (TypeError, ValueError):
        return None


def validate_draft(
    draft: OrderDraft,
    state: FieldState,
    today: Optional[date] = None,
) -> Dict[str, str]:
    """
    Errors keyed by field id; only visible fields are checked, so a hidden
    address never reports an error.
    """
    visible = state.visible_fields
    errors: Dict[str, str] = {}

    if f.CLIENT_NAME in visible and len(clean(draft.client_name)) < MIN_CLIENT_NAME:
        errors[f.CLIENT_NAME] = f"Nome deve ter pelo menos {MIN_CLIENT_NAME} caracteres"

    if f.PRODUCT in visible and not clean(draft.product):
        errors[f.PRODUCT] = "Selecione um produto"

    if f.FILLINGS in visible:
        if not draft.fillings:
            errors[f.FILLINGS] = "Selecione pelo menos um sabor/cobertura/recheio"
        elif any(x not in state.filling_choices for x in draft.fillings):
            errors[f.FILLINGS] = "Recheio indisponível para este produto"

    if f.DELIVERY in visible and not clean(draft.delivery):
        errors[f.DELIVERY] = "Selecione a forma de entrega"

    if f.PAYMENT_STATUS in visible and not clean(draft.payment_status):
        errors[f.PAYMENT_STATUS] = "Selecione o status do pagamento"

    if f.QUANTITY in visible:
        qty = _number(draft.quantity, int)
        if qty is None or qty < 1:
            errors[f.QUANTITY] = "Quantidade deve ser pelo menos 1"

    if f.VALUE in visible:
        amount = _number(draft.value, float)
        if amount is None or not math.isfinite(amount) or amount < MIN_VALUE:
            errors[f.VALUE] = "Valor deve ser maior que zero"

    if f.DELIVERY_DATE in visible:
        if draft.delivery_date is None:
            errors[f.DELIVERY_DATE] = "Selecione a data de entrega"
        elif not f.is_valid_delivery_date(draft.delivery_date, today):
            errors[f.DELIVERY_DATE] = "A data de entrega não pode estar no passado"

    if f.DELIVERY_TIME in visible and not TIME_RE.match(clean(draft.delivery_time)):
        errors[f.DELIVERY_TIME] = "Formato de hora inválido (HH:MM)"

    if f.ADDRESS in visible and len(clean(draft.address)) < MIN_ADDRESS:
        errors[f.ADDRESS] = f"Endereço deve ter pelo menos {MIN_ADDRESS} caracteres"

    return errors


def ensure_valid(draft: OrderDraft, state: FieldState, today: Optional[date] = None) -> None:
    """Raise ValidationError when ``validate_draft`` reports anything."""
    errors = validate_draft(draft, state, today)
    if errors:
        raise ValidationError(errors)
