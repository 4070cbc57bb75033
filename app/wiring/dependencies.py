from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.category_catalog import CategoryCatalogPort
from app.application.ports.registration_store import RegistrationStorePort
from app.application.ports.selection_session_store import SelectionSessionStorePort
from app.application.use_cases.category_details import CategoryDetailsUseCase
from app.application.use_cases.category_selection import CategorySelectionUseCase
from app.application.use_cases.confirm_selection import ConfirmCategorySelectionUseCase
from app.application.use_cases.load_categories import LoadCategoriesUseCase
from app.application.use_cases.manage_registration import ManageRegistrationUseCase
from app.infrastructure.catalog.http_catalog import HttpCategoryCatalog
from app.infrastructure.catalog.json_catalog import JsonCategoryCatalog
from app.infrastructure.catalog.static_catalog import StaticCategoryCatalog
from app.infrastructure.store.json_store import JsonRegistrationStore
from app.infrastructure.store.memory_store import MemoryRegistrationStore, MemorySelectionSessionStore


_registration_store: RegistrationStorePort | None = None
_selection_store: SelectionSessionStorePort | None = None


@lru_cache
def get_category_catalog() -> CategoryCatalogPort:
    logger = logging.getLogger(__name__)
    provider = settings.CATALOG_PROVIDER.lower()
    if provider == "http":
        if not settings.CATALOG_URL:
            logger.warning("CATALOG_URL missing, using static category catalog")
            return StaticCategoryCatalog()
        return HttpCategoryCatalog()
    if provider == "json":
        return JsonCategoryCatalog(path=settings.CATALOG_JSON_PATH)
    return StaticCategoryCatalog()


def get_load_categories_use_case() -> LoadCategoriesUseCase:
    return LoadCategoriesUseCase(catalog=get_category_catalog(), fallback=StaticCategoryCatalog())


def get_registration_store() -> RegistrationStorePort:
    global _registration_store
    if _registration_store is None:
        if settings.REGISTRATION_STORE.lower() == "json":
            _registration_store = JsonRegistrationStore(data_dir=settings.REGISTRATION_DATA_DIR)
        else:
            _registration_store = MemoryRegistrationStore()
    return _registration_store


def get_selection_store() -> SelectionSessionStorePort:
    global _selection_store
    if _selection_store is None:
        _selection_store = MemorySelectionSessionStore()
    return _selection_store


def get_category_selection_use_case() -> CategorySelectionUseCase:
    return CategorySelectionUseCase()


def get_confirm_selection_use_case() -> ConfirmCategorySelectionUseCase:
    return ConfirmCategorySelectionUseCase(store=get_registration_store())


def get_manage_registration_use_case() -> ManageRegistrationUseCase:
    return ManageRegistrationUseCase(store=get_registration_store())


def get_category_details_use_case() -> CategoryDetailsUseCase:
    return CategoryDetailsUseCase(categories=get_load_categories_use_case())
