"""Dashboard filtering, summary cards and delivery urgency."""

from __future__ import annotations
from datetime import date
from typing import Iterable, List, Optional

from orders.models import ALL, DateBucket, FilterState, Order, Summary, Urgency
from services.utils import fold

WEEK_DAYS = 7
SOON_DAYS = 14
PAID_STATUSES = frozenset({"pago", "paid"})


def days_until(order: Order, today: Optional[date] = None) -> Optional[int]:
    """Days from ``today`` to delivery (negative when overdue)."""
    if order.delivery_date is None:
        return None
    return (order.delivery_date - (today or date.today())).days


def _matches(order: Order, state: FilterState, today: date) -> bool:
    if state.product != ALL and order.product != state.product:
        return False
    if state.payment_status != ALL and order.payment_status != state.payment_status:
        return False

    if state.date_bucket == DateBucket.THIS_WEEK:
        days = days_until(order, today)
        # Overdue orders stay visible; only later ones are cut
        if days is None or days > WEEK_DAYS:
            return False
    elif state.date_bucket == DateBucket.THIS_MONTH:
        # Month number only: the year is not compared
        if order.delivery_date is None or order.delivery_date.month != today.month:
            return False

    return True


def filter_orders(
    orders: Iterable[Order],
    state: FilterState,
    today: Optional[date] = None,
) -> List[Order]:
    today = today or date.today()
    return [o for o in orders if _matches(o, state, today)]


def is_paid(order: Order) -> bool:
    return fold(order.payment_status) in PAID_STATUSES


def summarize(orders: Iterable[Order]) -> Summary:
    """Summary cards for the (already filtered) orders."""
    items = list(orders)
    total = len(items)
    paid = sum(1 for o in items if is_paid(o))
    return Summary(
        total=total,
        total_quantity=sum(o.quantity for o in items),
        paid=paid,
        pending=total - paid,
    )


def urgency(order: Order, today: Optional[date] = None) -> Urgency:
    """Display emphasis by days left: <=7 urgent, <=14 soon, else later."""
    days = days_until(order, today)
    if days is None:
        return Urgency.LATER
    if days <= WEEK_DAYS:
        return Urgency.URGENT
    if days <= SOON_DAYS:
        return Urgency.SOON
    return Urgency.LATER
