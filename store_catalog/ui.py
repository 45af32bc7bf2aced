"""
Design (ui.py)
- Purpose: Run the numbered console menu and dispatch each choice to the catalog.
- Inputs: Catalog (session state), save callback, input/output functions (injectable for tests).
- Outputs: None (prints to the console, mutates the Catalog).
- Side effects: Blocking reads from input_func; writes via output_func; save_callback on exit.
- Thread-safety: Single-threaded by design; the shell owns the catalog for the session.
"""

from enum import IntEnum
from typing import Callable, Dict, Iterable, Optional, Tuple

from .config import MENU_OPTIONS
from .models import Store
from .queries import (
    compare_by_city,
    compare_by_name,
    compare_by_specialization,
    find_specific_stores,
    search_by_keyword,
)
from .repository import Catalog, Comparator
from .utils import is_yes


class MenuOption(IntEnum):
    ADD = 1
    VIEW = 2
    DELETE = 3
    SEARCH = 4
    SORT_BY_NAME = 5
    SORT_BY_CITY = 6
    SORT_BY_SPECIALIZATION = 7
    SPECIFIC = 8
    EXIT = 9


SORT_ORDERS: Dict[MenuOption, Tuple[Comparator, str]] = {
    MenuOption.SORT_BY_NAME: (compare_by_name, "Stores sorted by name:"),
    MenuOption.SORT_BY_CITY: (compare_by_city, "Stores sorted by city in address:"),
    MenuOption.SORT_BY_SPECIALIZATION: (compare_by_specialization, "Stores sorted by specialization:"),
}

INVALID_CHOICE_MESSAGE = "Invalid choice. Try again."
TERMINATED_MESSAGE = "Program terminated."


def parse_menu_choice(text: str | None) -> MenuOption | None:
    """
    Purpose: Turn a raw menu line into a MenuOption.
    Outputs: MenuOption, or None for non-numeric / out-of-range input (caller re-prompts).
    """
    if text is None:
        return None
    try:
        return MenuOption(int(text.strip()))
    except ValueError:
        return None


class ConsoleUI:
    """
    Design (ConsoleUI)
    - Purpose: Encapsulate the menu loop and the per-option handlers.
    - Public methods:
        run(): loop until Exit (or end of input), then save
        handle(option): perform one menu action; returns False when the loop should stop
    """

    def __init__(
        self,
        catalog: Catalog,
        save_callback: Callable[[], bool],
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.catalog = catalog
        self.save_callback = save_callback
        self.input_func = input_func or input
        self.output_func = output_func or print
        self._eof = False

        self._handlers: Dict[MenuOption, Callable[[], None]] = {
            MenuOption.ADD: self.add_store,
            MenuOption.VIEW: self.show_stores,
            MenuOption.DELETE: self.delete_store,
            MenuOption.SEARCH: self.search_stores,
            MenuOption.SPECIFIC: self.show_specific_stores,
        }

    # ---------- Main loop ----------

    def run(self) -> None:
        while True:
            self.print_menu()
            raw = self._ask("Select an option: ")
            if self._eof:
                self.exit_program()
                return
            option = parse_menu_choice(raw)
            if option is None:
                self.output_func(INVALID_CHOICE_MESSAGE)
                continue
            if not self.handle(option):
                return

    def handle(self, option: MenuOption) -> bool:
        if option == MenuOption.EXIT:
            self.exit_program()
            return False
        if option in SORT_ORDERS:
            self.sort_stores(option)
        else:
            self._handlers[option]()
        # a handler may have hit end of input mid-prompt
        if self._eof:
            self.exit_program()
            return False
        return True

    def print_menu(self) -> None:
        self.output_func("Menu:")
        for number, label in MENU_OPTIONS:
            self.output_func(f"{number}. {label}")

    # ---------- Handlers ----------

    def add_store(self) -> None:
        """
        Purpose: Prompt for the four text fields, then loop "Add phone (Y/N)".
        Side effects: Appends to the catalog only once the store is complete.
        """
        self.output_func("Enter store details:")
        fields = []
        for prompt in ("Name: ", "Address: ", "Specialization: ", "Working Hours: "):
            value = self._ask(prompt)
            if value is None:
                return
            fields.append(value)
        name, address, specialization, working_hours = fields
        store = Store(
            name=name,
            address=address,
            specialization=specialization,
            working_hours=working_hours,
        )
        while is_yes(self._ask("Add phone (Y/N): ")):
            phone = self._ask("Phone number: ")
            if phone is None:
                return
            store.add_phone(phone)
        if self._eof:
            return
        self.catalog.add(store)
        self.output_func("Store added.")

    def show_stores(self) -> None:
        self._print_stores(self.catalog)

    def delete_store(self) -> None:
        name = self._ask("Enter the store name to delete: ")
        if name is None:
            return
        self.catalog.remove_by_name(name)
        self.output_func(f"Store with the name {name} deleted (if it was found).")

    def search_stores(self) -> None:
        keyword = self._ask("Enter keyword to search: ")
        if keyword is None:
            return
        self._print_stores(search_by_keyword(self.catalog, keyword))

    def sort_stores(self, option: MenuOption) -> None:
        comparator, heading = SORT_ORDERS[option]
        self.catalog.sort_by(comparator)
        self.output_func(heading)
        self.show_stores()

    def show_specific_stores(self) -> None:
        self._print_stores(find_specific_stores(self.catalog))

    def exit_program(self) -> None:
        if not self.save_callback():
            self.output_func("Warning: the catalog could not be saved.")
        self.output_func(TERMINATED_MESSAGE)

    # ---------- Helpers ----------

    def _ask(self, prompt: str) -> str | None:
        """Read one line; None (and the EOF flag) once input is exhausted."""
        try:
            return self.input_func(prompt)
        except EOFError:
            self._eof = True
            return None

    def _print_stores(self, stores: Iterable[Store]) -> None:
        for store in stores:
            self.output_func(str(store))
