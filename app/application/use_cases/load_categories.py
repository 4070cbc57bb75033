from __future__ import annotations

import logging

from app.application.exceptions import CatalogUnavailableError
from app.application.ports.category_catalog import CategoryCatalogPort
from app.domain.entities.category import Category


class LoadCategoriesUseCase:
    """Fetch the category catalog, falling back to the fixed default catalog."""

    def __init__(self, catalog: CategoryCatalogPort, fallback: CategoryCatalogPort) -> None:
        self._catalog = catalog
        self._fallback = fallback
        self._logger = logging.getLogger(__name__)

    def execute(self) -> list[Category]:
        try:
            categories = self._catalog.fetch()
        except CatalogUnavailableError as e:
            self._logger.warning("Category catalog unavailable, using defaults", extra={"reason": str(e)})
            return self._fallback.fetch()

        if not categories:
            self._logger.warning("Category catalog empty, using defaults", extra={"reason": "empty"})
            return self._fallback.fetch()
        return categories

    def find(self, category_id: str) -> Category | None:
        for category in self.execute():
            if category.id == category_id:
                return category
        return None
