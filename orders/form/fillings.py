"""Product -> filling choices and the label shown above them."""

from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, Tuple

from services.errors import ConfigError
from services.utils import clean, fold

FillingMap = Mapping[str, Sequence[str]]

DEFAULT_FILLING_LABEL = "Cobertura"

# Label per product, as the printed order sheet names them
FILLING_LABELS: Dict[str, str] = {
    "brigadeiro": "Sabor",
    "coxinha de morango": "Recheio/Cobertura",
    "bombom de morango": "Recheio/Cobertura",
    "morango do amor": "Opção",
}


def filling_label(product: str) -> str:
    if not clean(product):
        return "Recheio"
    return FILLING_LABELS.get(fold(product), DEFAULT_FILLING_LABEL)


def lookup_fillings(filling_map: Optional[FillingMap], product: str) -> Optional[Tuple[str, ...]]:
    """Fillings configured for ``product`` (None when the product is not mapped)."""
    if not filling_map:
        return None
    wanted = fold(product)
    for name, fillings in filling_map.items():
        if fold(name) == wanted:
            return tuple(clean(f) for f in fillings if clean(f))
    return None


def load_filling_map(path: Optional[Path]) -> Dict[str, Tuple[str, ...]]:
    """
    Read a JSON object {product: [filling, ...]}.

    Returns an empty map when no path is configured or the file is absent.

    Raises:
        ConfigError: If the file is not a JSON object of string lists
    """
    if not path or not Path(path).exists():
        return {}

    try:
        with Path(path).open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read fillings map {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Fillings map {path} must be a JSON object")

    out: Dict[str, Tuple[str, ...]] = {}
    for product, fillings in raw.items():
        if isinstance(fillings, str):
            fillings = [fillings]
        if not isinstance(fillings, list):
            raise ConfigError(f"Fillings for {product!r} must be a list")
        out[clean(product)] = tuple(clean(f) for f in fillings if clean(f))
    return out
