# services/__init__.py
"""Services package: settings, record stores, catalog and order services."""
