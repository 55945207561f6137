"""Option repository - maps backend option records to ``Option``."""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from orders.models import Category, Option
from ..utils import clean, fold, slugify

# Spellings seen across backends, tried after the backend's own field name
CATEGORY_KEYS = ("category", "categoria")
VALUE_KEYS = ("value", "valor")

MIN_VALUE_LENGTH = 2


def pick(record: Mapping[str, Any], *names: str) -> Any:
    """
    Return the first present field among ``names``.

    Keys are compared trimmed and case-insensitively, so 'Categoria',
    ' categoria' and 'CATEGORIA' all match.
    """
    folded = {fold(k): v for k, v in record.items()}
    for name in names:
        value = folded.get(fold(name))
        if value is not None:
            return value
    return None


class OptionRepository:
    """Manages option record conversions."""

    @staticmethod
    def from_record(record: Mapping[str, Any], fields: Mapping[str, str]) -> Optional[Option]:
        """Build an Option, or None when category or value is missing."""
        category = clean(pick(record, fields.get("category", "category"), *CATEGORY_KEYS))
        value = clean(pick(record, fields.get("value", "value"), *VALUE_KEYS))
        if not category or not value:
            return None

        option_id = clean(record.get("id")) or slugify(f"{category} {value}")
        return Option(id=option_id, category=category, value=value)

    @staticmethod
    def to_record(category: Category, value: str, fields: Mapping[str, str]) -> Dict[str, Any]:
        """Payload for creating an option in the backend's field names."""
        return {
            fields.get("category", "category"): category.value,
            fields.get("value", "value"): clean(value),
        }

    @staticmethod
    def validate(category: Union[Category, str], value: str) -> Dict[str, str]:
        """Field-scoped errors for a new option (empty dict when valid)."""
        errors: Dict[str, str] = {}
        try:
            Category.parse(category)
        except ValueError:
            errors["category"] = "Selecione uma categoria"
        if len(clean(value)) < MIN_VALUE_LENGTH:
            errors["value"] = f"Valor deve ter pelo menos {MIN_VALUE_LENGTH} caracteres"
        return errors

    @staticmethod
    def filter_by_category(options: Iterable[Option], category: Union[Category, str]) -> List[Option]:
        """Options whose category equals ``category`` ignoring case/whitespace."""
        wanted = fold(category.value if isinstance(category, Category) else category)
        return [o for o in options if fold(o.category) == wanted]

    @staticmethod
    def group_by_category(options: Iterable[Option]) -> Dict[Category, List[Option]]:
        """Bucket options per known category (unknown categories are skipped)."""
        items = list(options)
        return {c: OptionRepository.filter_by_category(items, c) for c in Category}

    @staticmethod
    def values(options: Iterable[Option]) -> List[str]:
        """Distinct option values, first occurrence wins."""
        seen: Dict[str, None] = {}
        for o in options:
            seen.setdefault(o.value, None)
        return list(seen)
