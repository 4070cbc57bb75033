from __future__ import annotations

import json
import logging
from pathlib import Path

from app.application.exceptions import CatalogUnavailableError
from app.application.ports.category_catalog import CategoryCatalogPort
from app.domain.entities.category import Category
from app.infrastructure.catalog.documents import categories_from_payload


class JsonCategoryCatalog(CategoryCatalogPort):
    def __init__(self, path: str = "./data/categories.json") -> None:
        self._path = Path(path)
        self._logger = logging.getLogger(__name__)

    def fetch(self) -> list[Category]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            return categories_from_payload(payload)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            self._logger.error("Failed to read category file", extra={"path": str(self._path), "error": str(e)})
            raise CatalogUnavailableError(f"Cannot read categories from {self._path}: {e}") from e
