"""Utility functions."""

from .id_generator import generate_unique_id, next_sequential_id, slugify
from .logger import get_logger, setup_logger
from .path_utils import default_log_dir, default_store_path, get_data_dir
from .text_utils import clean, fold, strip_accents

__all__ = [
    "generate_unique_id",
    "next_sequential_id",
    "slugify",
    "get_logger",
    "setup_logger",
    "get_data_dir",
    "default_log_dir",
    "default_store_path",
    "clean",
    "fold",
    "strip_accents",
]
