from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Optional


@lru_cache
def _packaged_menu() -> dict[str, Any]:
    resource = resources.files("patternlab.resources").joinpath("menu.json")
    with resource.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_menu_data(path: Optional[str] = None) -> dict[str, Any]:
    """
    Load the raw StarBuzz menu.

    Args:
        path: Optional JSON file to read instead of the packaged ``menu.json``.

    Returns:
        The decoded JSON object. A file holding anything other than an
        object yields an empty dict.
    """
    if path is None:
        return _packaged_menu()
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, dict) else {}
