"""Default locations under the project's data/ directory."""

from __future__ import annotations
from pathlib import Path

# services/utils/path_utils.py -> project root (where app.py lives)
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_data_dir() -> Path:
    return PROJECT_ROOT / "data"


def default_store_path() -> Path:
    """JSON file used by the local backend when STORE_PATH is unset."""
    return get_data_dir() / "store.json"


def default_log_dir() -> Path:
    return get_data_dir() / "logs"
