"""Session-scoped read-through cache for a remote collection."""

from __future__ import annotations
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SessionCache(Generic[T]):
    """
    Holds one fetched value until invalidated.

    Only ``get`` (on a miss) and ``invalidate`` mutate the cache. A failed
    load leaves it empty so the next ``get`` fetches again.
    """

    def __init__(self, name: str = "cache"):
        self.name = name
        self._value: Optional[T] = None
        self._has_value = False
        self._loading = False

    @property
    def is_loading(self) -> bool:
        """True only while an uncached fetch is running."""
        return self._loading

    @property
    def has_value(self) -> bool:
        return self._has_value

    def get(self, loader: Callable[[], T]) -> T:
        """Return the cached value, calling ``loader`` on a miss."""
        if self._has_value:
            return self._value  # type: ignore[return-value]

        self._loading = True
        try:
            value = loader()
        finally:
            self._loading = False

        self._value = value
        self._has_value = True
        return value

    def invalidate(self) -> None:
        """Drop the cached value; the next ``get`` refetches."""
        self._value = None
        self._has_value = False
