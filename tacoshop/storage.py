"""Saving resources to JSON files and loading them back."""

from __future__ import annotations

import json
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Union

from tacoshop.models import Catalog

PathType = Union[str, "PathLike[str]"]


def save_to_file(resources: Mapping[str, Any], path: PathType) -> None:
    """Write the resources as a compact JSON array, ordered by id."""
    items = [resources[key].to_json() for key in sorted(resources)]
    Path(path).write_text(json.dumps(items, separators=(",", ":")), encoding="utf-8")


def load_from_file(
    resource_type: Any, path: PathType, catalog: Optional[Catalog] = None
) -> dict[str, Any]:
    """Read resources of one type from a JSON array file, keyed and ordered by id.

    A file that does not exist yields no resources. When two entries share an
    id, the later one wins.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    document = json.loads(text)
    if not isinstance(document, list):
        raise ValueError(f"{path}: expected a JSON array")
    loaded = {}
    for item in document:
        resource = resource_type.from_json(item, catalog)
        loaded[resource.id] = resource
    return dict(sorted(loaded.items()))