"""Domain models shared by the form, the dashboard and the services layer."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from services.utils.text_utils import fold


ALL = "all"


class Category(str, Enum):
    """Closed set of catalog categories (values are the backend strings)."""

    PRODUCT = "Produto"
    FILLING = "Recheio"
    DELIVERY = "Entrega"
    PAYMENT_STATUS = "Status Pagamento"

    @classmethod
    def parse(cls, text: str) -> "Category":
        """Resolve a category ignoring case and surrounding whitespace."""
        if isinstance(text, cls):
            return text
        wanted = fold(text)
        for member in cls:
            if fold(member.value) == wanted or fold(member.name) == wanted:
                return member
        raise ValueError(f"Unknown category: {text!r}")


@dataclass(frozen=True)
class Option:
    id: str
    category: str
    value: str


@dataclass
class OrderDraft:
    """In-progress order edited in the form."""

    client_name: str = ""
    product: str = ""
    fillings: Tuple[str, ...] = ()
    delivery: str = ""
    payment_status: str = ""
    quantity: int = 1
    value: float = 0.0
    note: str = ""
    delivery_date: Optional[date] = None
    delivery_time: str = "14:00"
    address: str = ""

    def with_changes(self, **changes) -> "OrderDraft":
        return replace(self, **changes)


@dataclass(frozen=True)
class Order:
    id: str
    client_name: str
    product: str
    fillings: Tuple[str, ...]
    delivery: str
    payment_status: str
    quantity: int
    value: float
    note: str = ""
    delivery_date: Optional[date] = None
    delivery_time: str = ""
    address: str = ""
    order_date: Optional[date] = None


class DateBucket(str, Enum):
    ALL = "all"
    THIS_WEEK = "week"
    THIS_MONTH = "month"


class Urgency(str, Enum):
    URGENT = "urgent"
    SOON = "soon"
    LATER = "later"


@dataclass(frozen=True)
class FilterState:
    """Dashboard filters; ``ALL`` disables a filter."""

    date_bucket: DateBucket = DateBucket.ALL
    payment_status: str = ALL
    product: str = ALL


@dataclass(frozen=True)
class Summary:
    total: int = 0
    total_quantity: int = 0
    paid: int = 0
    pending: int = 0


@dataclass(frozen=True)
class FieldState:
    """Visible/required fields and legal filling choices for a draft."""

    visible_fields: FrozenSet[str] = field(default_factory=frozenset)
    required_fields: FrozenSet[str] = field(default_factory=frozenset)
    filling_choices: Tuple[str, ...] = ()
    filling_label: str = "Recheio"
