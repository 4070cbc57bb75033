from abc import ABC, abstractmethod

from app.domain.entities.supplier_registration import SupplierRegistration


class RegistrationStorePort(ABC):
    @abstractmethod
    def create(self) -> str:
        """Start an empty registration draft. Returns registration_id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, registration_id: str) -> SupplierRegistration:
        """Raises RegistrationNotFoundError for unknown ids."""
        raise NotImplementedError

    @abstractmethod
    def save(self, registration: SupplierRegistration) -> None:
        raise NotImplementedError

    @abstractmethod
    def update_service_type(
        self,
        registration_id: str,
        category_name: str,
        subcategories: list[str],
    ) -> SupplierRegistration:
        """Store the confirmed category selection on the draft."""
        raise NotImplementedError

    @abstractmethod
    def reset(self, registration_id: str) -> None:
        """Clear every step of the draft, keeping its id."""
        raise NotImplementedError
