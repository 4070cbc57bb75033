from __future__ import annotations

from typing import Any

from app.domain.entities.category import Category


def _field(data: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass; a flag is never a count and vice versa.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ValueError(f"Category field {key!r} must be {expected.__name__}, got {type(value).__name__}")
    return value


def category_from_document(data: dict[str, Any], doc_id: str) -> Category:
    """
    Build a Category from a stored category document (camelCase keys).
    Raises ValueError when a field has the wrong type.
    """
    labels = _field(data, "subcategories", list, [])
    subcategories: list[str] = []
    for label in labels:
        if not isinstance(label, str):
            raise ValueError(f"Subcategory labels must be strings, got {type(label).__name__}")
        # Labels are unique within a category; keep the first occurrence.
        if label not in subcategories:
            subcategories.append(label)

    return Category(
        id=doc_id,
        name=_field(data, "name", str, ""),
        subcategories=tuple(subcategories),
        icon=_field(data, "icon", str, "") or "📋",
        supplier_count=_field(data, "supplierCount", int, 0),
        is_active=_field(data, "isActive", bool, True),
    )


def categories_from_payload(payload: Any) -> list[Category]:
    """
    Accepts either a bare list of documents or {"documents": [...]}.
    Each document carries its id under "id".
    """
    if isinstance(payload, dict):
        payload = payload.get("documents", [])
    if not isinstance(payload, list):
        raise ValueError("Category payload must be a list of documents")

    categories: list[Category] = []
    for doc in payload:
        if not isinstance(doc, dict) or not doc.get("id"):
            raise ValueError("Category document is missing an id")
        category = category_from_document(doc, str(doc["id"]))
        if category.is_active:
            categories.append(category)
    return categories
