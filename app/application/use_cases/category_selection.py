from __future__ import annotations

import logging

from app.application.exceptions import InvalidSelectionStateError, InvalidSubcategoryError
from app.domain.entities.category import Category
from app.domain.entities.category_selection import CategorySelectionState, SelectionSnapshot


def select_category(state: CategorySelectionState, category: Category) -> CategorySelectionState:
    """
    Lock the selection to a single industry.
    Tapping the already locked category unlocks it. Any other category replaces
    the lock and discards the subcategories chosen under the previous one.
    """
    if state.locked_category is not None and state.locked_category.id == category.id:
        return CategorySelectionState()
    return CategorySelectionState(locked_category=category, chosen_subcategories=())


def toggle_subcategory(state: CategorySelectionState, label: str) -> CategorySelectionState:
    """
    Add or remove a subcategory of the locked category.
    No-op while unlocked. Raises InvalidSubcategoryError for labels outside the lock.
    """
    locked = state.locked_category
    if locked is None:
        return state
    if not locked.has_subcategory(label):
        raise InvalidSubcategoryError(label, locked.id)

    if label in state.chosen_subcategories:
        chosen = tuple(s for s in state.chosen_subcategories if s != label)
    else:
        chosen = state.chosen_subcategories + (label,)
    return CategorySelectionState(locked_category=locked, chosen_subcategories=chosen)


def can_confirm(state: CategorySelectionState) -> bool:
    return state.locked_category is not None and len(state.chosen_subcategories) > 0


def confirm_selection(state: CategorySelectionState) -> SelectionSnapshot:
    locked = state.locked_category
    if locked is None or not state.chosen_subcategories:
        raise InvalidSelectionStateError("Select a category and at least one subcategory before confirming")
    return SelectionSnapshot(
        category_name=locked.name,
        subcategories=tuple(state.chosen_subcategories),
    )


class CategorySelectionUseCase:
    """Industry-locked category selection for the supplier onboarding step."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def start(self) -> CategorySelectionState:
        return CategorySelectionState()

    def select_category(self, state: CategorySelectionState, category: Category) -> CategorySelectionState:
        updated = select_category(state, category)
        if updated.locked_category is None:
            self._logger.debug("Category unlocked", extra={"category": category.id})
        else:
            if state.chosen_subcategories and state.locked_category is not None:
                # Switching industries drops prior choices without asking the supplier.
                self._logger.info(
                    "Category lock switched, subcategories discarded",
                    extra={
                        "category": category.id,
                        "previous_category": state.locked_category.id,
                        "discarded": len(state.chosen_subcategories),
                    },
                )
            self._logger.debug("Category locked", extra={"category": category.id})
        return updated

    def toggle_subcategory(self, state: CategorySelectionState, label: str) -> CategorySelectionState:
        if state.locked_category is None:
            self._logger.debug("Subcategory toggle ignored, no category locked", extra={"subcategory": label})
        return toggle_subcategory(state, label)

    def can_confirm(self, state: CategorySelectionState) -> bool:
        return can_confirm(state)

    def confirm(self, state: CategorySelectionState) -> SelectionSnapshot:
        return confirm_selection(state)
