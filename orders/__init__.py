"""Order domain: models, form rules, dashboard logic, exporters and UI."""
