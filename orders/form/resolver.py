"""
Form field dependency resolver.

Pure functions of the draft: which fields are shown, which are required and
which fillings may be picked. Called on every draft change.
"""

from __future__ import annotations
from datetime import date
from typing import Optional, Sequence

from orders.models import FieldState, OrderDraft
from services.utils import clean, fold, strip_accents
from .fillings import FillingMap, filling_label, lookup_fillings

CLIENT_NAME = "client_name"
PRODUCT = "product"
FILLINGS = "fillings"
DELIVERY = "delivery"
PAYMENT_STATUS = "payment_status"
QUANTITY = "quantity"
VALUE = "value"
NOTE = "note"
DELIVERY_DATE = "delivery_date"
DELIVERY_TIME = "delivery_time"
ADDRESS = "address"

ALWAYS_VISIBLE = frozenset({
    CLIENT_NAME, PRODUCT, DELIVERY, PAYMENT_STATUS, QUANTITY, VALUE,
    NOTE, DELIVERY_DATE, DELIVERY_TIME,
})
ALWAYS_REQUIRED = ALWAYS_VISIBLE - {NOTE}

# Delivery modes meaning "bring it to the customer" ("Entregar", "Delivery", ...)
DELIVERY_PREFIXES = ("entreg", "deliver")


def is_delivery(mode: str) -> bool:
    return fold(strip_accents(mode)).startswith(DELIVERY_PREFIXES)


def is_valid_delivery_date(day: Optional[date], today: Optional[date] = None) -> bool:
    """Today is the earliest accepted date."""
    if day is None:
        return False
    return day >= (today or date.today())


def resolve_fields(
    draft: OrderDraft,
    fillings: Sequence[str],
    filling_map: Optional[FillingMap] = None,
) -> FieldState:
    """
    Args:
        draft: Current form values
        fillings: Every filling value in the catalog
        filling_map: Optional product -> fillings restriction; products not in
            the map may use every catalog filling
    """
    visible = set(ALWAYS_VISIBLE)
    required = set(ALWAYS_REQUIRED)

    product = clean(draft.product)
    choices: tuple = ()
    if product:
        catalog = tuple(clean(f) for f in fillings if clean(f))
        mapped = lookup_fillings(filling_map, product)
        if mapped is None:
            choices = catalog
        else:
            # Mapped fillings must still exist in the catalog
            known = set(catalog)
            choices = tuple(f for f in mapped if f in known)
        visible.add(FILLINGS)
        required.add(FILLINGS)

    if is_delivery(draft.delivery):
        visible.add(ADDRESS)
        required.add(ADDRESS)

    return FieldState(
        visible_fields=frozenset(visible),
        required_fields=frozenset(required),
        filling_choices=tuple(dict.fromkeys(choices)),
        filling_label=filling_label(product),
    )


def reconcile_fillings(draft: OrderDraft, state: FieldState) -> OrderDraft:
    """Drop selected fillings that the active product does not offer."""
    allowed = set(state.filling_choices)
    kept = tuple(f for f in draft.fillings if f in allowed)
    if kept == tuple(draft.fillings):
        return draft
    return draft.with_changes(fillings=kept)


def change_product(
    draft: OrderDraft,
    product: str,
    fillings: Sequence[str],
    filling_map: Optional[FillingMap] = None,
) -> OrderDraft:
    """New draft with ``product`` selected and fillings kept consistent."""
    updated = draft.with_changes(product=product)
    return reconcile_fillings(updated, resolve_fields(updated, fillings, filling_map))
