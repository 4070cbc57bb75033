from __future__ import annotations

from dataclasses import dataclass

from app.application.use_cases.load_categories import LoadCategoriesUseCase
from app.application.utils.category_rules import (
    are_categories_compatible,
    categories_for_industry,
    incompatible_categories,
    industry_group_display_name,
    industry_group_for,
)
from app.domain.entities.category import Category


@dataclass(frozen=True)
class CategoryDetails:
    category: Category
    industry_group: str | None
    industry_group_name: str | None
    industry_members: list[str]  # every category id of the industry group, known or not to the catalog
    compatible_categories: list[str]  # other catalog categories in the same industry
    incompatible_categories: list[str]


class CategoryDetailsUseCase:
    """Describe a catalog category together with its industry group constraints."""

    def __init__(self, categories: LoadCategoriesUseCase) -> None:
        self._categories = categories

    def execute(self, category_id: str) -> CategoryDetails | None:
        catalog = self._categories.execute()
        category = next((c for c in catalog if c.id == category_id), None)
        if category is None:
            return None

        group = industry_group_for(category_id)
        return CategoryDetails(
            category=category,
            industry_group=group,
            industry_group_name=industry_group_display_name(group) if group else None,
            industry_members=categories_for_industry(group) if group else [],
            compatible_categories=[
                other.id
                for other in catalog
                if other.id != category_id and are_categories_compatible(category_id, other.id)
            ],
            incompatible_categories=incompatible_categories(category_id),
        )
