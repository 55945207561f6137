"""Order submission adapter: draft -> backend payload, record -> Order."""

from __future__ import annotations
from datetime import date
from typing import List, Optional

from orders.models import Order, OrderDraft
from ..errors import FetchError, StoreError, SubmitError
from ..repositories import OrderRepository
from ..storage import ORDERS, RecordStore
from ..utils import get_logger

log = get_logger("orders")


class OrderAdapter:
    """Order access for one record store."""

    def __init__(self, store: RecordStore):
        self.store = store

    def build_payload(self, draft: OrderDraft, today: Optional[date] = None) -> dict:
        """Payload as it will be sent (order date left to the store when it stamps one)."""
        return OrderRepository.to_payload(
            draft,
            self.store.order_fields,
            include_order_date=not self.store.assigns_order_date,
            today=today,
        )

    def submit(self, draft: OrderDraft, today: Optional[date] = None) -> Order:
        """
        Send one order.

        Raises:
            SubmitError: If the store rejects the write or answers badly
        """
        payload = self.build_payload(draft, today)
        log.info("Submitting order: %s", payload)

        try:
            record = self.store.create_record(ORDERS, payload)
        except StoreError as e:
            raise SubmitError(str(e)) from e

        try:
            order = OrderRepository.from_record(record, self.store.order_fields, self.store.created_field)
        except ValueError as e:
            raise SubmitError(f"Store answered with an unusable order record: {e}") from e

        log.info("Order %s created", order.id)
        return order

    def fetch_all(self) -> List[Order]:
        """
        Fetch every order; records without an id are skipped.

        Raises:
            FetchError: If the store cannot be read
        """
        try:
            records = self.store.list_records(ORDERS)
        except StoreError as e:
            raise FetchError(str(e)) from e

        orders: List[Order] = []
        for record in records:
            try:
                orders.append(
                    OrderRepository.from_record(record, self.store.order_fields, self.store.created_field)
                )
            except ValueError as e:
                log.warning("Dropping order record: %s", e)
        return orders
