from datetime import date

import pytest

from fakes import MemoryStore
from services.catalog import CatalogAdapter, CatalogService
from services.orders import OrderAdapter, OrderService

TODAY = date(2025, 6, 10)

CATALOG = [
    {"id": "1", "category": "Produto", "value": "Brigadeiro"},
    {"id": "2", "category": "Recheio", "value": "Ninho"},
    {"id": "3", "category": " produto ", "value": " Pão de Mel "},
    {"id": "4", "category": "Entrega", "value": "Retirar"},
    {"id": "5", "category": "Entrega", "value": "Entregar"},
    {"id": "6", "category": "STATUS PAGAMENTO", "value": "Pago"},
    {"id": "7", "category": "Status Pagamento", "value": "Pendente"},
    {"id": "8", "category": "Recheio", "value": "Tradicional"},
]


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def notes():
    """Collects (level, title, message) notifications."""
    return []


@pytest.fixture
def store():
    return MemoryStore(options=CATALOG)


@pytest.fixture
def catalog(store, notes):
    return CatalogService(CatalogAdapter(store), notify=lambda *n: notes.append(n))


@pytest.fixture
def order_service(store, notes):
    return OrderService(OrderAdapter(store), notify=lambda *n: notes.append(n))
