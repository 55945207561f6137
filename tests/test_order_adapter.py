from datetime import date, timedelta

import pytest

from fakes import FakeResponse, FakeSession, MemoryStore
from orders.models import OrderDraft
from services.errors import FetchError, SubmitError
from services.orders import OrderAdapter
from services.storage import AirtableStore, RestStore

TODAY = date(2025, 6, 10)


def draft(**changes):
    base = OrderDraft(
        client_name="Maria",
        product="Brigadeiro",
        fillings=("Ninho",),
        delivery="Retirar",
        payment_status="Pago",
        quantity=2,
        value=20.00,
        delivery_date=TODAY + timedelta(days=3),
        delivery_time="15:30",
    )
    return base.with_changes(**changes)


def test_payload_coerces_numbers_and_wraps_filling():
    session = FakeSession(FakeResponse(201, {"id": "77", "produto": "Brigadeiro", "dataPedido": "2025-06-10"}))
    adapter = OrderAdapter(RestStore("https://api", "https://api", session=session))

    adapter.submit(draft(quantity="2", value="20.00", fillings="Ninho"), today=TODAY)

    payload = session.calls[0][2]["json"]
    assert payload["quantidade"] == 2 and isinstance(payload["quantidade"], int)
    assert payload["valorTotal"] == 20.00
    assert payload["recheio"] == ["Ninho"]
    assert payload["dataEntrega"] == "2025-06-13"
    assert "dataPedido" not in payload


def test_unparsable_numbers_default_to_zero():
    payload = OrderAdapter(MemoryStore()).build_payload(draft(quantity="abc", value=None))
    assert payload["quantity"] == 0
    assert payload["total_value"] == 0


def test_order_date_sent_when_backend_does_not_stamp_it():
    adapter = OrderAdapter(MemoryStore(assigns_order_date=False))
    assert adapter.build_payload(draft(), today=TODAY)["order_date"] == "2025-06-10"


def test_address_blank_for_pickup_and_kept_for_delivery():
    adapter = OrderAdapter(MemoryStore())
    assert adapter.build_payload(draft(address="Rua A, 10"))["address"] == ""
    assert adapter.build_payload(draft(delivery="Entregar", address="Rua A, 10"))["address"] == "Rua A, 10"


def test_response_mapped_back_to_order():
    session = FakeSession(FakeResponse(201, {
        "id": 5, "cliente": "Maria", "produto": "Brigadeiro", "quantidade": "2",
        "recheio": "Ninho", "entrega": "Retirar", "statusPagamento": "Pago",
        "dataPedido": "2025-06-10T12:00:00.000Z", "dataEntrega": "2025-06-13",
        "valorTotal": "20.5", "observacao": "sem açúcar",
    }))
    order = OrderAdapter(RestStore("https://api", "https://api", session=session)).submit(draft())

    assert order.id == "5"
    assert order.quantity == 2
    assert order.fillings == ("Ninho",)
    assert order.value == 20.5
    assert order.order_date == date(2025, 6, 10)
    assert order.delivery_date == date(2025, 6, 13)
    assert order.note == "sem açúcar"


def test_airtable_order_date_from_created_time():
    session = FakeSession(FakeResponse(200, {
        "id": "recX",
        "createdTime": "2025-06-10T09:00:00.000Z",
        "fields": {"Cliente": "Ana", "Produto": "Brigadeiro", "Recheio": ["Ninho", "Tradicional"], "Quantidade": 3},
    }))
    adapter = OrderAdapter(AirtableStore("key", "appBase", session=session))

    order = adapter.submit(draft())

    sent = session.calls[0][2]["json"]["fields"]
    assert "Data Pedido" not in sent
    assert sent["Recheio"] == ["Ninho"]
    assert order.order_date == date(2025, 6, 10)
    assert order.fillings == ("Ninho", "Tradicional")


def test_submit_error_on_non_success():
    adapter = OrderAdapter(RestStore("https://api", "https://api", session=FakeSession(FakeResponse(500, {}))))
    with pytest.raises(SubmitError):
        adapter.submit(draft())


def test_fetch_all_skips_records_without_id():
    store = MemoryStore(orders=[
        {"id": "1", "product": "Brigadeiro", "quantity": 3, "fillings": ["Ninho"]},
        {"product": "Sem id"},
    ])
    orders = OrderAdapter(store).fetch_all()
    assert [o.id for o in orders] == ["1"]


def test_fetch_all_error():
    store = MemoryStore()
    store.fail.add(("list", "orders"))
    with pytest.raises(FetchError):
        OrderAdapter(store).fetch_all()
