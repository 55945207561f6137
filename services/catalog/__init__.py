"""
Catalog Module
==============

Exports:
- CatalogAdapter: fetch/create options on the record store
- CatalogService: cached, category-scoped queries + add_option

Usage:
    from services.catalog import CatalogAdapter, CatalogService
"""

from .catalog_adapter import CatalogAdapter
from .catalog_service import CatalogService

__all__ = ["CatalogAdapter", "CatalogService"]
