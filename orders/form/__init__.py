"""Order form logic (no UI): dependency resolution and validation."""

from .fillings import filling_label, load_filling_map, lookup_fillings
from .resolver import (
    ADDRESS,
    FILLINGS,
    change_product,
    is_delivery,
    is_valid_delivery_date,
    reconcile_fillings,
    resolve_fields,
)
from .validation import ensure_valid, validate_draft

__all__ = [
    "filling_label",
    "load_filling_map",
    "lookup_fillings",
    "ADDRESS",
    "FILLINGS",
    "change_product",
    "is_delivery",
    "is_valid_delivery_date",
    "reconcile_fillings",
    "resolve_fields",
    "ensure_valid",
    "validate_draft",
]
