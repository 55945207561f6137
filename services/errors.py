"""Error taxonomy for the order and catalog services."""

from __future__ import annotations
from typing import Dict, Optional


class OrderAppError(Exception):
    """Base class for errors surfaced to the user."""
    pass


class ConfigError(OrderAppError):
    """Raised when deployment settings are missing or inconsistent."""
    pass


class ValidationError(OrderAppError):
    """Client-side validation failure; never reaches the network."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or "; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class StoreError(OrderAppError):
    """Raised when the record store cannot be reached or answers badly."""
    pass


class FetchError(StoreError):
    """Read from the store failed."""
    pass


class CreateError(StoreError):
    """Creating a catalog option failed."""
    pass


class SubmitError(StoreError):
    """Submitting an order failed."""
    pass
