"""
Tests for industry group compatibility rules.
"""

from __future__ import annotations

from app.application.utils.category_rules import (
    are_categories_compatible,
    categories_for_industry,
    incompatible_categories,
    industry_group_display_name,
    industry_group_for,
    validate_categories,
)


def test_industry_group_lookup():
    assert industry_group_for("photography") == "media"
    assert industry_group_for("music_dj") == "media"
    assert industry_group_for("beauty") == "creative"
    assert industry_group_for("unknown") is None


def test_display_names():
    assert industry_group_display_name("media") == "Mídia"
    assert industry_group_display_name("venues") == "Espaços"
    assert industry_group_display_name("other") == "other"


def test_compatibility():
    assert are_categories_compatible("photography", "music_dj")
    assert are_categories_compatible("decoration", "beauty")
    assert not are_categories_compatible("photography", "catering")
    assert not are_categories_compatible("unknown", "unknown")


def test_validate_categories():
    empty = validate_categories([])
    assert not empty.is_valid
    assert empty.error_message == "Selecione pelo menos uma categoria."

    unknown = validate_categories(["unknown"])
    assert not unknown.is_valid
    assert "unknown" in (unknown.error_message or "")

    ok = validate_categories(["photography", "music_dj"])
    assert ok.is_valid
    assert ok.industry_group == "media"

    mixed = validate_categories(["photography", "catering"])
    assert not mixed.is_valid
    assert mixed.conflicting_categories == ("photography", "catering")
    assert "Mídia" in (mixed.error_message or "")
    assert "Hospitalidade" in (mixed.error_message or "")


def test_mixed_with_unknown_reports_unknown_group():
    result = validate_categories(["catering", "yachts"])
    assert not result.is_valid
    assert "Desconhecido" in (result.error_message or "")


def test_categories_for_industry_and_incompatible():
    assert categories_for_industry("creative") == ["decoration", "beauty"]
    assert categories_for_industry("nope") == []

    incompatible = incompatible_categories("photography")
    assert "catering" in incompatible
    assert "photography" not in incompatible
    assert "music_dj" not in incompatible
    assert incompatible_categories("unknown") == []
