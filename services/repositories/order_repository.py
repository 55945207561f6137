"""Order repository - maps drafts to payloads and records to ``Order``."""

from __future__ import annotations
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Tuple

from orders.form.resolver import is_delivery
from orders.models import Order, OrderDraft
from ..utils import clean
from .option_repository import pick


def to_int(value: Any) -> int:
    """Coerce to int; unparsable or missing -> 0."""
    if isinstance(value, bool):
        return int(value)
    try:
        return int(float(str(value).strip().replace(",", ".")))
    except (TypeError, ValueError):
        return 0


def to_amount(value: Any) -> float:
    """Coerce a money value to float with 2 decimals; unparsable -> 0."""
    try:
        return round(float(str(value).strip().replace(",", ".")), 2)
    except (TypeError, ValueError):
        return 0.0


def as_list(value: Any) -> Tuple[str, ...]:
    """A lone string becomes a one-element sequence."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (clean(value),) if clean(value) else ()
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(clean(v) for v in value if clean(v))
    return (clean(value),)


def parse_date(value: Any) -> Optional[date]:
    """Accept date objects and ISO strings ('2025-08-10', '2025-08-10T12:00:00.000Z')."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = clean(value)
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


class OrderRepository:
    """Manages order record conversions."""

    @staticmethod
    def to_payload(
        draft: OrderDraft,
        fields: Mapping[str, str],
        include_order_date: bool,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Outbound payload in the backend's field names.

        - quantity/value coerced to numbers (unparsable -> 0)
        - fillings always a list
        - address blank unless the delivery mode is a delivery
        - order date only when the backend does not stamp it
        """
        delivering = is_delivery(draft.delivery)
        canonical: Dict[str, Any] = {
            "client_name": clean(draft.client_name),
            "product": clean(draft.product),
            "quantity": to_int(draft.quantity),
            "fillings": list(as_list(draft.fillings)),
            "note": clean(draft.note),
            "delivery": clean(draft.delivery),
            "address": clean(draft.address) if delivering else "",
            "payment_status": clean(draft.payment_status),
            "delivery_date": draft.delivery_date.isoformat() if draft.delivery_date else "",
            "delivery_time": clean(draft.delivery_time),
            "value": to_amount(draft.value),
        }
        if include_order_date:
            canonical["order_date"] = (today or date.today()).isoformat()

        return {fields[key]: value for key, value in canonical.items() if key in fields}

    @staticmethod
    def from_record(
        record: Mapping[str, Any],
        fields: Mapping[str, str],
        created_field: str = "",
    ) -> Order:
        """
        Canonical Order from a backend record.

        Raises:
            ValueError: If the record has no id
        """
        order_id = clean(record.get("id"))
        if not order_id:
            raise ValueError("order record without id")

        def get(key: str) -> Any:
            return pick(record, fields.get(key, key), key)

        order_date = parse_date(get("order_date"))
        if order_date is None and created_field:
            order_date = parse_date(record.get(created_field))

        return Order(
            id=order_id,
            client_name=clean(get("client_name")),
            product=clean(get("product")),
            fillings=as_list(get("fillings")),
            delivery=clean(get("delivery")),
            payment_status=clean(get("payment_status")),
            quantity=to_int(get("quantity")),
            value=to_amount(get("value")),
            note=clean(get("note")),
            delivery_date=parse_date(get("delivery_date")),
            delivery_time=clean(get("delivery_time")),
            address=clean(get("address")),
            order_date=order_date,
        )
