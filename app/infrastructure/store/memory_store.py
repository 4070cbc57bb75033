from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime

from app.application.exceptions import RegistrationNotFoundError, SelectionSessionNotFoundError
from app.application.ports.registration_store import RegistrationStorePort
from app.application.ports.selection_session_store import SelectionSessionStorePort
from app.domain.entities.category_selection import CategorySelectionState
from app.domain.entities.supplier_registration import SupplierRegistration


class MemoryRegistrationStore(RegistrationStorePort):
    def __init__(self) -> None:
        self._registrations: dict[str, SupplierRegistration] = {}

    def create(self) -> str:
        registration_id = uuid.uuid4().hex
        self._registrations[registration_id] = SupplierRegistration(
            registration_id=registration_id,
            updated_at=datetime.now().timestamp(),
        )
        return registration_id

    def get(self, registration_id: str) -> SupplierRegistration:
        registration = self._registrations.get(registration_id)
        if registration is None:
            raise RegistrationNotFoundError(registration_id)
        return registration

    def save(self, registration: SupplierRegistration) -> None:
        self._registrations[registration.registration_id] = registration

    def update_service_type(
        self,
        registration_id: str,
        category_name: str,
        subcategories: list[str],
    ) -> SupplierRegistration:
        updated = replace(
            self.get(registration_id),
            service_type=category_name,
            event_types=tuple(subcategories),
            updated_at=datetime.now().timestamp(),
        )
        self._registrations[registration_id] = updated
        return updated

    def reset(self, registration_id: str) -> None:
        self.get(registration_id)
        self._registrations[registration_id] = SupplierRegistration(
            registration_id=registration_id,
            updated_at=datetime.now().timestamp(),
        )


class MemorySelectionSessionStore(SelectionSessionStorePort):
    def __init__(self) -> None:
        self._states: dict[str, CategorySelectionState] = {}

    def create(self) -> str:
        session_id = uuid.uuid4().hex
        self._states[session_id] = CategorySelectionState()
        return session_id

    def get_state(self, session_id: str) -> CategorySelectionState:
        state = self._states.get(session_id)
        if state is None:
            raise SelectionSessionNotFoundError(session_id)
        return state

    def set_state(self, session_id: str, state: CategorySelectionState) -> None:
        if session_id not in self._states:
            raise SelectionSessionNotFoundError(session_id)
        self._states[session_id] = state

    def discard(self, session_id: str) -> None:
        self._states.pop(session_id, None)
