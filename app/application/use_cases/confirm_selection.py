from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.ports.registration_store import RegistrationStorePort
from app.application.use_cases.category_selection import confirm_selection
from app.application.utils.registration_rules import RegistrationValidationResult, validate_service_type
from app.domain.entities.category_selection import CategorySelectionState, SelectionSnapshot
from app.domain.entities.supplier_registration import SupplierRegistration


@dataclass(frozen=True)
class ConfirmationResult:
    snapshot: SelectionSnapshot
    registration: SupplierRegistration
    validation: RegistrationValidationResult


class ConfirmCategorySelectionUseCase:
    """Export a confirmed selection and hand it to the registration store."""

    def __init__(self, store: RegistrationStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, state: CategorySelectionState, registration_id: str) -> ConfirmationResult:
        # Raises InvalidSelectionStateError before anything reaches the store.
        snapshot = confirm_selection(state)
        category_id = state.locked_category.id if state.locked_category else None
        validation = validate_service_type(
            snapshot.category_name,
            snapshot.subcategories,
            category_id=category_id,
        )
        if not validation.is_valid:
            # Categories outside the known industry groups are still accepted.
            self._logger.warning(
                "Service type step has validation errors",
                extra={"registration_id": registration_id, "reason": validation.error_summary},
            )

        registration = self._store.update_service_type(
            registration_id,
            category_name=snapshot.category_name,
            subcategories=list(snapshot.subcategories),
        )
        self._logger.info(
            "Category selection confirmed",
            extra={
                "registration_id": registration_id,
                "category": category_id,
                "subcategories": len(snapshot.subcategories),
            },
        )
        return ConfirmationResult(snapshot=snapshot, registration=registration, validation=validation)
