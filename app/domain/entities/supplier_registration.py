from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SupplierRegistration:
    registration_id: str
    # Step 1: basic data
    name: str | None = None
    business_name: str | None = None
    phone: str | None = None
    province: str | None = None
    city: str | None = None
    # Step 2: service type (category display name + chosen subcategories)
    service_type: str | None = None
    event_types: tuple[str, ...] = ()
    # Step 3: description
    description: str | None = None
    # Step 4: content
    portfolio_image_count: int = 0
    # Step 5: pricing
    min_price: str | None = None
    max_price: str | None = None
    updated_at: float | None = None

    @property
    def is_basic_data_complete(self) -> bool:
        return all(
            value is not None
            for value in (self.name, self.business_name, self.phone, self.province, self.city)
        )

    @property
    def is_service_type_complete(self) -> bool:
        return self.service_type is not None

    @property
    def is_description_complete(self) -> bool:
        return bool(self.description)

    @property
    def is_upload_complete(self) -> bool:
        return self.portfolio_image_count > 0

    @property
    def is_pricing_complete(self) -> bool:
        return self.min_price is not None

    @property
    def completion_percentage(self) -> float:
        steps = (
            self.is_basic_data_complete,
            self.is_service_type_complete,
            self.is_description_complete,
            self.is_upload_complete,
            self.is_pricing_complete,
        )
        return sum(1 for done in steps if done) / len(steps)

    @property
    def is_complete(self) -> bool:
        return self.completion_percentage == 1.0
