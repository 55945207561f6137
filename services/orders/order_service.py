"""Order service: cached order list and validated submission."""

from __future__ import annotations
from datetime import date
from typing import List, Optional

from orders.form.validation import ensure_valid
from orders.models import FieldState, Order, OrderDraft
from ..cache import SessionCache
from ..errors import StoreError
from ..notifications import ERROR, SUCCESS, Notifier, log_notifier
from .order_adapter import OrderAdapter


class OrderService:
    """Owns the session order cache."""

    def __init__(self, adapter: OrderAdapter, notify: Optional[Notifier] = None):
        self.adapter = adapter
        self.notify = notify or log_notifier
        self.cache: SessionCache[List[Order]] = SessionCache("orders")

    @property
    def is_loading(self) -> bool:
        return self.cache.is_loading

    def all(self) -> List[Order]:
        return list(self.cache.get(self.adapter.fetch_all))

    def invalidate(self) -> None:
        self.cache.invalidate()

    def submit(self, draft: OrderDraft, state: FieldState, today: Optional[date] = None) -> Order:
        """
        Validate, send, then mark the order list stale.

        Raises:
            ValidationError: Draft violates a form rule (nothing sent)
            SubmitError: Store failure (notified; cache untouched)
        """
        ensure_valid(draft, state, today)

        try:
            order = self.adapter.submit(draft, today)
        except StoreError:
            self.notify(ERROR, "Erro", "Não foi possível criar o pedido. Tente novamente.")
            raise

        self.cache.invalidate()
        self.notify(SUCCESS, "Pedido Criado! ✅", "Novo pedido foi registrado com sucesso!")
        return order
