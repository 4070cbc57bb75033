from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: str
    name: str  # display name shown to suppliers
    subcategories: tuple[str, ...] = ()
    icon: str = "📋"
    supplier_count: int = 0
    is_active: bool = True

    def has_subcategory(self, label: str) -> bool:
        return label in self.subcategories
