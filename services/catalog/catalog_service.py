"""Catalog query layer: cached, category-scoped views over the catalog."""

from __future__ import annotations
from typing import Dict, List, Optional, Union

from orders.models import Category, Option
from ..cache import SessionCache
from ..errors import StoreError
from ..notifications import ERROR, SUCCESS, Notifier, log_notifier
from ..repositories import OptionRepository
from .catalog_adapter import CatalogAdapter


class CatalogService:
    """Owns the session catalog cache."""

    def __init__(self, adapter: CatalogAdapter, notify: Optional[Notifier] = None):
        self.adapter = adapter
        self.notify = notify or log_notifier
        self.cache: SessionCache[List[Option]] = SessionCache("options")

    @property
    def is_loading(self) -> bool:
        return self.cache.is_loading

    def all(self) -> List[Option]:
        """Every option; the first call fetches, later calls hit the cache."""
        return list(self.cache.get(self.adapter.fetch_all))

    def by_category(self, category: Union[Category, str]) -> List[Option]:
        """Options of one category (case/whitespace-insensitive match)."""
        return OptionRepository.filter_by_category(self.all(), category)

    def values(self, category: Union[Category, str]) -> List[str]:
        """Distinct values of one category, for select boxes."""
        return OptionRepository.values(self.by_category(category))

    def grouped(self) -> Dict[Category, List[Option]]:
        return OptionRepository.group_by_category(self.all())

    def invalidate(self) -> None:
        self.cache.invalidate()

    def add_option(self, category: Union[Category, str], value: str) -> Option:
        """
        Create an option and invalidate the cache.

        Store failures are notified and re-raised; the cache is left as is.
        Validation errors are raised without notification (the form shows them).
        """
        try:
            option = self.adapter.create(category, value)
        except StoreError:
            self.notify(ERROR, "Erro", "Não foi possível adicionar a opção. Tente novamente.")
            raise

        self.cache.invalidate()
        self.notify(SUCCESS, "Opção Adicionada! ✅", "Nova opção foi criada com sucesso!")
        return option
