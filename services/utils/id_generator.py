"""ID generation utilities."""

from __future__ import annotations
import re
from typing import Iterable

from .text_utils import strip_accents


def slugify(text: str) -> str:
    """
    Convert text to URL-safe slug.
    
    Examples:
        'Status Pagamento Pago' -> 'status_pagamento_pago'
        'Pão de Mel' -> 'pao_de_mel'
    """
    text = strip_accents(text or "").lower()
    text = re.sub(r"[^a-z0-9]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("_")
    return text or "item"


def generate_unique_id(base: str, existing_ids: Iterable[str]) -> str:
    """
    Slug of ``base`` that is not in ``existing_ids``.

    A clash gets a numeric suffix: 'produto_brigadeiro', then
    'produto_brigadeiro_2', 'produto_brigadeiro_3' and so on.
    """
    taken = set(existing_ids)
    slug = slugify(base)
    candidate, n = slug, 1
    while candidate in taken:
        n += 1
        candidate = f"{slug}_{n}"
    return candidate


def next_sequential_id(existing_ids: Iterable[str]) -> str:
    """Next integer id after the largest numeric one ('1' for none)."""
    numbers = [int(i) for i in existing_ids if str(i).isdigit()]
    return str(max(numbers, default=0) + 1)
