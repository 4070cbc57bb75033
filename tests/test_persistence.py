"""
Tests for registration and selection session stores.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from app.application.exceptions import RegistrationNotFoundError, SelectionSessionNotFoundError
from app.application.use_cases.category_selection import select_category, toggle_subcategory
from app.application.use_cases.confirm_selection import ConfirmCategorySelectionUseCase
from app.domain.entities.category import Category
from app.domain.entities.category_selection import CategorySelectionState
from app.infrastructure.store.json_store import JsonRegistrationStore
from app.infrastructure.store.memory_store import MemoryRegistrationStore, MemorySelectionSessionStore

PHOTOGRAPHY = Category(id="photography", name="Fotografia", subcategories=("Fotógrafos", "Drone"))


def test_json_store_persistence():
    """Test that JSON store persists the confirmed service type across instances."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRegistrationStore(data_dir=tmpdir)
        registration_id = store.create()

        updated = store.update_service_type(registration_id, "Fotografia", ["Drone", "Fotógrafos"])
        assert updated.service_type == "Fotografia"
        assert updated.event_types == ("Drone", "Fotógrafos")

        # Fresh instance reads from disk
        retrieved = JsonRegistrationStore(data_dir=tmpdir).get(registration_id)
        assert retrieved.service_type == "Fotografia"
        assert retrieved.event_types == ("Drone", "Fotógrafos")
        assert retrieved.updated_at is not None


def test_json_store_reset_keeps_id():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRegistrationStore(data_dir=tmpdir)
        registration_id = store.create()
        store.update_service_type(registration_id, "Catering", ["Bolos"])

        store.reset(registration_id)
        registration = store.get(registration_id)
        assert registration.registration_id == registration_id
        assert registration.service_type is None
        assert registration.event_types == ()


def test_json_store_unknown_and_unsafe_ids():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRegistrationStore(data_dir=tmpdir)
        with pytest.raises(RegistrationNotFoundError):
            store.get("0" * 32)
        with pytest.raises(RegistrationNotFoundError):
            store.get("../../etc/passwd")
        with pytest.raises(RegistrationNotFoundError):
            store.update_service_type("missing", "Catering", ["Bolos"])


def test_json_store_corrupted_file_is_not_found():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRegistrationStore(data_dir=tmpdir)
        registration_id = store.create()
        (Path(tmpdir) / f"{registration_id}.json").write_text("{broken", encoding="utf-8")
        with pytest.raises(RegistrationNotFoundError):
            store.get(registration_id)


def test_json_store_file_layout():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRegistrationStore(data_dir=tmpdir)
        registration_id = store.create()
        store.update_service_type(registration_id, "Fotografia", ["Drone"])

        data = json.loads((Path(tmpdir) / f"{registration_id}.json").read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert data["registration"]["event_types"] == ["Drone"]
        assert not list(Path(tmpdir).glob("*.tmp"))


def test_memory_registration_store():
    store = MemoryRegistrationStore()
    registration_id = store.create()
    assert store.get(registration_id).service_type is None

    store.update_service_type(registration_id, "Fotografia", ["Drone"])
    assert store.get(registration_id).event_types == ("Drone",)

    store.reset(registration_id)
    assert store.get(registration_id).event_types == ()

    with pytest.raises(RegistrationNotFoundError):
        store.reset("missing")


def test_memory_selection_session_store():
    store = MemorySelectionSessionStore()
    session_id = store.create()
    assert store.get_state(session_id) == CategorySelectionState()

    locked = select_category(store.get_state(session_id), PHOTOGRAPHY)
    store.set_state(session_id, locked)
    assert store.get_state(session_id).locked_category == PHOTOGRAPHY

    store.discard(session_id)
    with pytest.raises(SelectionSessionNotFoundError):
        store.get_state(session_id)
    with pytest.raises(SelectionSessionNotFoundError):
        store.set_state(session_id, locked)


def test_confirm_hands_snapshot_to_store():
    store = MemoryRegistrationStore()
    registration_id = store.create()
    state = toggle_subcategory(select_category(CategorySelectionState(), PHOTOGRAPHY), "Drone")

    result = ConfirmCategorySelectionUseCase(store=store).execute(state, registration_id)
    assert result.snapshot.category_name == "Fotografia"
    assert result.validation.is_valid
    assert store.get(registration_id).service_type == "Fotografia"
    assert store.get(registration_id).event_types == ("Drone",)


def test_confirm_with_unknown_industry_still_stores():
    store = MemoryRegistrationStore()
    registration_id = store.create()
    yachts = Category(id="yachts", name="Iates", subcategories=("Festas",))
    state = toggle_subcategory(select_category(CategorySelectionState(), yachts), "Festas")

    result = ConfirmCategorySelectionUseCase(store=store).execute(state, registration_id)
    assert not result.validation.is_valid
    assert store.get(registration_id).service_type == "Iates"


def test_save_replaces_whole_draft():
    from dataclasses import replace

    with tempfile.TemporaryDirectory() as tmpdir:
        for store in (MemoryRegistrationStore(), JsonRegistrationStore(data_dir=tmpdir)):
            registration_id = store.create()
            draft = replace(store.get(registration_id), name="Ana", city="Luanda", portfolio_image_count=3)
            store.save(draft)

            saved = store.get(registration_id)
            assert saved.name == "Ana"
            assert saved.city == "Luanda"
            assert saved.portfolio_image_count == 3


def test_json_store_lookups_of_unknown_ids_leave_no_locks():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRegistrationStore(data_dir=tmpdir)
        registration_id = store.create()

        for i in range(1000):
            with pytest.raises(RegistrationNotFoundError):
                store.get(f"bogus-{i}")

        missing = "a" * 32
        with pytest.raises(RegistrationNotFoundError):
            store.get(missing)
        with pytest.raises(RegistrationNotFoundError):
            store.update_service_type(missing, "Catering", ["Bolos"])
        with pytest.raises(RegistrationNotFoundError):
            store.reset(missing)

        assert set(store._locks) == {registration_id}
