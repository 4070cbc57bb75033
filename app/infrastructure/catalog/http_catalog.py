from __future__ import annotations

import logging

import httpx

from app.application.exceptions import CatalogUnavailableError
from app.application.ports.category_catalog import CategoryCatalogPort
from app.core.config import settings
from app.domain.entities.category import Category
from app.infrastructure.catalog.documents import categories_from_payload


class HttpCategoryCatalog(CategoryCatalogPort):
    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url or settings.CATALOG_URL
        if not self._url:
            raise ValueError("CATALOG_URL is required for the HTTP category catalog")

        self._client = client or httpx.Client(timeout=timeout or settings.CATALOG_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    def fetch(self) -> list[Category]:
        try:
            response = self._client.get(self._url)
            response.raise_for_status()
            categories = categories_from_payload(response.json())
        except httpx.HTTPError as e:
            self._logger.error("Category catalog request failed", extra={"error": str(e)})
            raise CatalogUnavailableError(str(e)) from e
        except ValueError as e:
            self._logger.error("Category catalog returned an invalid payload", extra={"error": str(e)})
            raise CatalogUnavailableError(str(e)) from e

        self._logger.info("Category catalog fetched", extra={"count": len(categories)})
        return categories
