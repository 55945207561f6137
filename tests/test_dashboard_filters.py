from datetime import date, timedelta

from orders.dashboard import filter_orders, summarize, urgency
from orders.models import ALL, DateBucket, FilterState, Order, Summary, Urgency

TODAY = date(2025, 6, 10)


def order(oid, days, product="Brigadeiro", status="Pago", quantity=1):
    return Order(
        id=str(oid),
        client_name="Cliente",
        product=product,
        fillings=("Ninho",),
        delivery="Retirar",
        payment_status=status,
        quantity=quantity,
        value=10.0,
        delivery_date=TODAY + timedelta(days=days),
    )


ORDERS = [
    order(1, 0, quantity=50),
    order(2, 7, product="Beijinho", status="Pendente", quantity=30),
    order(3, 8, status="Pendente", quantity=25),
    order(4, 15),
    order(5, -2, product="Beijinho"),
]


def ids(orders):
    return [o.id for o in orders]


def test_all_filters_keep_everything():
    assert ids(filter_orders(ORDERS, FilterState(), TODAY)) == ["1", "2", "3", "4", "5"]


def test_this_week_boundary_is_inclusive_at_seven_days():
    week = filter_orders(ORDERS, FilterState(date_bucket=DateBucket.THIS_WEEK), TODAY)
    assert "2" in ids(week)
    assert "3" not in ids(week)


def test_this_week_keeps_overdue_orders():
    week = filter_orders(ORDERS, FilterState(date_bucket=DateBucket.THIS_WEEK), TODAY)
    assert ids(week) == ["1", "2", "5"]


def test_this_month_compares_month_number_only():
    same_month_next_year = order(9, 365)
    other_month = order(10, 25)
    result = filter_orders(
        [same_month_next_year, other_month, ORDERS[0]],
        FilterState(date_bucket=DateBucket.THIS_MONTH),
        TODAY,
    )
    assert ids(result) == ["9", "1"]


def test_product_and_status_filters_are_exact():
    state = FilterState(product="Beijinho", payment_status="Pendente")
    assert ids(filter_orders(ORDERS, state, TODAY)) == ["2"]
    assert filter_orders(ORDERS, FilterState(product="beijinho"), TODAY) == []
    assert len(filter_orders(ORDERS, FilterState(payment_status=ALL), TODAY)) == 5


def test_summarize_filtered_orders():
    week = filter_orders(ORDERS, FilterState(date_bucket=DateBucket.THIS_WEEK), TODAY)
    assert summarize(week) == Summary(total=3, total_quantity=81, paid=2, pending=1)


def test_summarize_empty():
    assert summarize([]) == Summary(total=0, total_quantity=0, paid=0, pending=0)


def test_urgency_buckets():
    assert urgency(order(1, 7), TODAY) == Urgency.URGENT
    assert urgency(order(1, -1), TODAY) == Urgency.URGENT
    assert urgency(order(1, 8), TODAY) == Urgency.SOON
    assert urgency(order(1, 14), TODAY) == Urgency.SOON
    assert urgency(order(1, 15), TODAY) == Urgency.LATER


def test_order_without_delivery_date():
    undated = Order(id="x", client_name="", product="Brigadeiro", fillings=(), delivery="",
                    payment_status="Pago", quantity=1, value=1.0)
    assert urgency(undated, TODAY) == Urgency.LATER
    assert filter_orders([undated], FilterState(date_bucket=DateBucket.THIS_WEEK), TODAY) == []
    assert filter_orders([undated], FilterState(), TODAY) == [undated]
