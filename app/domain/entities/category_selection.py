from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.category import Category


@dataclass(frozen=True)
class CategorySelectionState:
    locked_category: Category | None = None  # None means "unlocked"
    chosen_subcategories: tuple[str, ...] = ()  # set semantics, insertion order kept

    @property
    def is_locked(self) -> bool:
        return self.locked_category is not None


@dataclass(frozen=True)
class SelectionSnapshot:
    category_name: str
    subcategories: tuple[str, ...]
