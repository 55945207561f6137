"""Text helpers for comparing backend strings."""

from __future__ import annotations
import unicodedata
from typing import Any


def clean(value: Any) -> str:
    """Return ``value`` as a stripped string ('' for None)."""
    if value is None:
        return ""
    return str(value).strip()


def fold(value: Any) -> str:
    """
    Comparison key: trimmed and case-folded.

    Examples:
        ' Produto ' -> 'produto'
        'STATUS PAGAMENTO' -> 'status pagamento'
    """
    return clean(value).casefold()


def strip_accents(value: Any) -> str:
    """'Observação' -> 'Observacao'."""
    text = unicodedata.normalize("NFKD", clean(value))
    return "".join(ch for ch in text if not unicodedata.combining(ch))
