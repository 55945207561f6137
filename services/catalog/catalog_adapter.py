"""
Catalog Adapter
===============

Reads and creates catalog options through the configured record store and
normalizes every backend shape to ``Option(id, category, value)``.

- strings are trimmed
- backend field names (``category``/``value``, ``Categoria``/``Valor``, nested
  ``fields`` flattened by the store) are mapped onto the canonical ones
- records missing category or value are dropped with a warning

Related Files:
- services/storage/: backend strategies
- services/repositories/option_repository.py: field mapping
"""

from __future__ import annotations
from typing import List, Union

from orders.models import Category, Option
from ..errors import CreateError, FetchError, StoreError, ValidationError
from ..repositories import OptionRepository
from ..storage import OPTIONS, RecordStore
from ..utils import get_logger

log = get_logger("catalog")


class CatalogAdapter:
    """Catalog access for one record store."""

    def __init__(self, store: RecordStore):
        self.store = store

    def fetch_all(self) -> List[Option]:
        """
        Fetch and normalize every option.

        Raises:
            FetchError: If the store cannot be read
        """
        try:
            records = self.store.list_records(OPTIONS)
        except StoreError as e:
            raise FetchError(str(e)) from e

        options: List[Option] = []
        for record in records:
            option = OptionRepository.from_record(record, self.store.option_fields)
            if option is None:
                log.warning("Dropping incomplete catalog record %r", record.get("id", record))
                continue
            options.append(option)

        log.info("Catalog loaded: %d options (%d dropped)", len(options), len(records) - len(options))
        return options

    def create(self, category: Union[Category, str], value: str) -> Option:
        """
        Append one option.

        Raises:
            ValidationError: If category/value are invalid (no network call)
            CreateError: If the store rejects the write or answers badly
        """
        errors = OptionRepository.validate(category, value)
        if errors:
            raise ValidationError(errors)

        cat = Category.parse(category)
        payload = OptionRepository.to_record(cat, value, self.store.option_fields)

        try:
            record = self.store.create_record(OPTIONS, payload)
        except StoreError as e:
            raise CreateError(str(e)) from e

        option = OptionRepository.from_record(record, self.store.option_fields)
        if option is None:
            raise CreateError("Store answered with an incomplete option record")

        log.info("Created option %s: %s / %s", option.id, option.category, option.value)
        return option
