from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.category import Category


class CategoryCatalogPort(ABC):
    @abstractmethod
    def fetch(self) -> list[Category]:
        """
        Return the active categories in display order.
        Raises CatalogUnavailableError when the source cannot be read.
        """
        raise NotImplementedError
