from __future__ import annotations

from dataclasses import dataclass

# Categories inside a group can be combined; categories from different groups cannot.
INDUSTRY_GROUPS: dict[str, tuple[str, ...]] = {
    "media": ("photography", "music_dj"),
    "hospitality": ("catering",),
    "creative": ("decoration", "beauty"),
    "venues": ("venue",),
    "logistics": ("transportation",),
    "entertainment": ("entertainment",),
}

INDUSTRY_GROUP_DISPLAY_NAMES: dict[str, str] = {
    "media": "Mídia",
    "hospitality": "Hospitalidade",
    "creative": "Criativo",
    "venues": "Espaços",
    "logistics": "Logística",
    "entertainment": "Entretenimento",
}


@dataclass(frozen=True)
class CategoryValidationResult:
    is_valid: bool
    error_message: str | None = None
    industry_group: str | None = None
    conflicting_categories: tuple[str, ...] | None = None


def industry_group_for(category_id: str) -> str | None:
    for group, members in INDUSTRY_GROUPS.items():
        if category_id in members:
            return group
    return None


def industry_group_display_name(group_id: str) -> str:
    return INDUSTRY_GROUP_DISPLAY_NAMES.get(group_id, group_id)


def are_categories_compatible(first_id: str, second_id: str) -> bool:
    """Unknown categories are never compatible, not even with themselves."""
    first_group = industry_group_for(first_id)
    second_group = industry_group_for(second_id)
    if first_group is None or second_group is None:
        return False
    return first_group == second_group


def validate_categories(category_ids: list[str]) -> CategoryValidationResult:
    if not category_ids:
        return CategoryValidationResult(
            is_valid=False,
            error_message="Selecione pelo menos uma categoria.",
        )

    first = category_ids[0]
    group = industry_group_for(first)
    if group is None:
        return CategoryValidationResult(
            is_valid=False,
            error_message=f"Categoria desconhecida: {first}",
        )

    for category_id in category_ids[1:]:
        other_group = industry_group_for(category_id)
        if other_group != group:
            first_name = industry_group_display_name(group)
            other_name = industry_group_display_name(other_group) if other_group else "Desconhecido"
            return CategoryValidationResult(
                is_valid=False,
                error_message=(
                    "Especialidades Incompatíveis: Não pode selecionar serviços "
                    f"de grupos diferentes ({first_name} e {other_name}). "
                    "Selecione apenas serviços dentro do mesmo grupo de categoria."
                ),
                conflicting_categories=(first, category_id),
            )

    return CategoryValidationResult(is_valid=True, industry_group=group)


def categories_for_industry(group_id: str) -> list[str]:
    return list(INDUSTRY_GROUPS.get(group_id, ()))


def incompatible_categories(category_id: str) -> list[str]:
    group = industry_group_for(category_id)
    if group is None:
        return []
    incompatible: list[str] = []
    for other_group, members in INDUSTRY_GROUPS.items():
        if other_group != group:
            incompatible.extend(members)
    return incompatible
