#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local harness for the category selection step (no HTTP).

Usage:
  python3 scripts/select_local.py

What it does:
- Loads the configured category catalog (falls back to the default catalog)
- Lets you lock a category by number, toggle subcategories by number
- Confirms into an in-memory registration draft and prints the result
- Lists the registration steps still missing
"""

from app.application.exceptions import InvalidSelectionStateError, InvalidSubcategoryError
from app.application.use_cases.category_selection import CategorySelectionUseCase
from app.application.use_cases.confirm_selection import ConfirmCategorySelectionUseCase
from app.application.use_cases.manage_registration import ManageRegistrationUseCase
from app.domain.entities.category_selection import CategorySelectionState
from app.infrastructure.store.memory_store import MemoryRegistrationStore
from app.wiring.dependencies import get_load_categories_use_case


def _print_state(state: CategorySelectionState, can_confirm: bool) -> None:
    print("-" * 60)
    if state.locked_category is None:
        print("Industry: (none)")
    else:
        print(f"Industry: {state.locked_category.name} [locked]")
        print(f"Chosen:   {', '.join(state.chosen_subcategories) or '(none)'}")
    print(f"Can confirm: {can_confirm}")
    print("-" * 60)


def _print_help() -> None:
    print("Commands:")
    print("  c <n>   -> select category n (select the locked one again to unlock)")
    print("  s <n>   -> toggle subcategory n of the locked category")
    print("  /ok     -> confirm selection")
    print("  /quit   -> exit")


def main() -> None:
    categories = get_load_categories_use_case().execute()
    selection = CategorySelectionUseCase()
    store = MemoryRegistrationStore()
    confirm = ConfirmCategorySelectionUseCase(store=store)
    registration_id = store.create()
    state = selection.start()

    print("\nLocal Category Selection Harness")
    for i, category in enumerate(categories, 1):
        print(f"  {i}. {category.icon} {category.name} ({len(category.subcategories)} tipos de serviço)")
    _print_help()

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue
        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            _print_help()
            continue
        if cmd == "/ok":
            try:
                result = confirm.execute(state, registration_id)
            except InvalidSelectionStateError as e:
                print(f"Cannot confirm: {e}")
                continue
            print(f"Saved: {result.snapshot.category_name}: {', '.join(result.snapshot.subcategories)}")
            if not result.validation.is_valid:
                print(result.validation.step_error_message)
            report = ManageRegistrationUseCase(store=store).validate(registration_id)
            print(f"Draft {report.completion_percentage:.0%} complete")
            for step in report.steps:
                if not step.is_valid:
                    print(f"  {step.step_error_message}")
            return

        parts = cmd.split()
        if len(parts) != 2 or parts[0] not in ("c", "s") or not parts[1].isdigit():
            print("Unknown command, try /help")
            continue
        index = int(parts[1]) - 1

        if parts[0] == "c":
            if not 0 <= index < len(categories):
                print("No such category")
                continue
            state = selection.select_category(state, categories[index])
        else:
            options = state.locked_category.subcategories if state.locked_category else ()
            label = options[index] if 0 <= index < len(options) else parts[1]
            try:
                state = selection.toggle_subcategory(state, label)
            except InvalidSubcategoryError as e:
                print(e)
                continue
            if state.locked_category:
                for i, sub in enumerate(state.locked_category.subcategories, 1):
                    mark = "x" if sub in state.chosen_subcategories else " "
                    print(f"  [{mark}] {i}. {sub}")

        _print_state(state, selection.can_confirm(state))


if __name__ == "__main__":
    main()
