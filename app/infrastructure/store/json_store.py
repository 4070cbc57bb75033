from __future__ import annotations

import json
import logging
import re
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any

from app.application.exceptions import RegistrationNotFoundError
from app.application.ports.registration_store import RegistrationStorePort
from app.domain.entities.supplier_registration import SupplierRegistration


_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


class JsonRegistrationStore(RegistrationStorePort):
    def __init__(self, data_dir: str = "./data/registrations") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, registration_id: str) -> threading.Lock:
        """Get or create a lock for a registration_id."""
        # Unknown-format ids never get a lock entry.
        if not _ID_PATTERN.fullmatch(registration_id):
            raise RegistrationNotFoundError(registration_id)
        with self._lock_lock:
            if registration_id not in self._locks:
                self._locks[registration_id] = threading.Lock()
            return self._locks[registration_id]

    def _get_existing_lock(self, registration_id: str) -> threading.Lock:
        """Lock for a draft that is already on disk; raises before creating a lock entry."""
        if not self._get_file_path(registration_id).exists():
            raise RegistrationNotFoundError(registration_id)
        return self._get_lock(registration_id)

    def _get_file_path(self, registration_id: str) -> Path:
        if not _ID_PATTERN.fullmatch(registration_id):
            raise RegistrationNotFoundError(registration_id)
        return self._data_dir / f"{registration_id}.json"

    def _load(self, registration_id: str) -> SupplierRegistration:
        file_path = self._get_file_path(registration_id)
        if not file_path.exists():
            raise RegistrationNotFoundError(registration_id)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            # A corrupted draft is treated as missing; the supplier restarts the flow.
            self._logger.error(
                "Corrupted registration file",
                extra={"registration_id": registration_id, "error": str(e)},
            )
            raise RegistrationNotFoundError(registration_id) from e
        return self._deserialize(data.get("registration", {}), registration_id)

    def _save(self, registration: SupplierRegistration) -> None:
        """Save registration to JSON file atomically."""
        file_path = self._get_file_path(registration.registration_id)
        temp_path = file_path.with_suffix(".json.tmp")
        data = {"registration": self._serialize(registration), "version": 1}

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    def _serialize(self, registration: SupplierRegistration) -> dict[str, Any]:
        return {
            "registration_id": registration.registration_id,
            "name": registration.name,
            "business_name": registration.business_name,
            "phone": registration.phone,
            "province": registration.province,
            "city": registration.city,
            "service_type": registration.service_type,
            "event_types": list(registration.event_types),
            "description": registration.description,
            "portfolio_image_count": registration.portfolio_image_count,
            "min_price": registration.min_price,
            "max_price": registration.max_price,
            "updated_at": registration.updated_at,
        }

    def _deserialize(self, data: dict[str, Any], registration_id: str) -> SupplierRegistration:
        return SupplierRegistration(
            registration_id=data.get("registration_id") or registration_id,
            name=data.get("name"),
            business_name=data.get("business_name"),
            phone=data.get("phone"),
            province=data.get("province"),
            city=data.get("city"),
            service_type=data.get("service_type"),
            event_types=tuple(data.get("event_types") or ()),
            description=data.get("description"),
            portfolio_image_count=data.get("portfolio_image_count", 0),
            min_price=data.get("min_price"),
            max_price=data.get("max_price"),
            updated_at=data.get("updated_at"),
        )

    def create(self) -> str:
        registration_id = uuid.uuid4().hex
        with self._get_lock(registration_id):
            self._save(
                SupplierRegistration(
                    registration_id=registration_id,
                    updated_at=datetime.now().timestamp(),
                )
            )
        return registration_id

    def get(self, registration_id: str) -> SupplierRegistration:
        with self._get_existing_lock(registration_id):
            return self._load(registration_id)

    def save(self, registration: SupplierRegistration) -> None:
        with self._get_lock(registration.registration_id):
            self._save(registration)

    def update_service_type(
        self,
        registration_id: str,
        category_name: str,
        subcategories: list[str],
    ) -> SupplierRegistration:
        with self._get_existing_lock(registration_id):
            updated = replace(
                self._load(registration_id),
                service_type=category_name,
                event_types=tuple(subcategories),
                updated_at=datetime.now().timestamp(),
            )
            self._save(updated)
            return updated

    def reset(self, registration_id: str) -> None:
        with self._get_existing_lock(registration_id):
            self._load(registration_id)
            self._save(
                SupplierRegistration(
                    registration_id=registration_id,
                    updated_at=datetime.now().timestamp(),
                )
            )
