"""Admin pages (catalog options management)."""
