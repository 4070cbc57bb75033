from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from app.application.ports.registration_store import RegistrationStorePort
from app.application.utils.registration_rules import (
    RegistrationValidationResult,
    validate_complete_registration,
    validate_registration_steps,
)
from app.domain.entities.supplier_registration import SupplierRegistration

# Steps other than the service type; that one is only written by a confirmed selection.
EDITABLE_FIELDS = (
    "name",
    "business_name",
    "phone",
    "province",
    "city",
    "description",
    "portfolio_image_count",
    "min_price",
    "max_price",
)


@dataclass(frozen=True)
class RegistrationReport:
    overall: RegistrationValidationResult
    steps: list[RegistrationValidationResult]
    is_complete: bool
    completion_percentage: float


class ManageRegistrationUseCase:
    """Fill, reset and validate the multi-step supplier registration draft."""

    def __init__(self, store: RegistrationStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def update_details(self, registration_id: str, changes: dict[str, Any]) -> SupplierRegistration:
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields cannot be edited here: {', '.join(sorted(unknown))}")

        updated = replace(
            self._store.get(registration_id),
            **changes,
            updated_at=datetime.now().timestamp(),
        )
        self._store.save(updated)
        self._logger.info(
            "Registration draft updated",
            extra={"registration_id": registration_id, "count": len(changes)},
        )
        return updated

    def reset(self, registration_id: str) -> SupplierRegistration:
        self._store.reset(registration_id)
        self._logger.info("Registration draft reset", extra={"registration_id": registration_id})
        return self._store.get(registration_id)

    def validate(self, registration_id: str, price_on_request: bool = False) -> RegistrationReport:
        registration = self._store.get(registration_id)
        return RegistrationReport(
            overall=validate_complete_registration(registration, price_on_request=price_on_request),
            steps=validate_registration_steps(registration, price_on_request=price_on_request),
            is_complete=registration.is_complete,
            completion_percentage=registration.completion_percentage,
        )
