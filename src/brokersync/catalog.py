"""Load the broker catalog from JSON on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from brokersync.contracts.catalog import Service
from brokersync.contracts.exceptions import CatalogLoadError

_SERVICES = TypeAdapter(list[Service])


def load_catalog(path: str | Path) -> list[Service]:
    """Load and validate a catalog file.

    The file holds either a list of services or an object with a
    ``services`` list. Catalog order is preserved; it decides match
    precedence during classification.

    Raises:
        CatalogLoadError: If the file is missing, unreadable, contains invalid
                          JSON, or doesn't match the schema.
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise CatalogLoadError(f"missing catalog file: {catalog_path}")
    try:
        raw: Any = json.loads(catalog_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"invalid JSON input: {exc}") from exc
    except OSError as exc:
        raise CatalogLoadError(f"failed to read catalog file: {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("services")
    if not isinstance(raw, list):
        raise CatalogLoadError("catalog must be a list of services or an object with a 'services' list")

    try:
        return _SERVICES.validate_python(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"catalog validation failed: {exc}") from exc
