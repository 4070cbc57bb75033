from __future__ import annotations

from app.application.ports.category_catalog import CategoryCatalogPort
from app.domain.entities.category import Category
from app.infrastructure.catalog.default_categories import DEFAULT_CATEGORIES


class StaticCategoryCatalog(CategoryCatalogPort):
    def __init__(self, categories: list[Category] | tuple[Category, ...] | None = None) -> None:
        self._categories = tuple(categories) if categories is not None else DEFAULT_CATEGORIES

    def fetch(self) -> list[Category]:
        return [category for category in self._categories if category.is_active]
