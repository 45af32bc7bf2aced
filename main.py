"""
Design (main.py)
- Purpose: Entry point. Wire config, storage, catalog and the console shell together.
- Inputs: Command-line arguments (only "-auto", case-insensitive, is recognized).
- Outputs: Process exit code (0 normally, 1 if the stores file cannot be read).
- Side effects: Reads stores.json at startup, writes it on exit.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from store_catalog.config import AUTO_FLAG, AUTO_STORE, LOG_FORMAT, LOG_LEVEL, NOTIFY_ON_AUTO
from store_catalog.models import Store
from store_catalog.repository import Catalog
from store_catalog.storage import (
    LoadStatus,
    StorageError,
    get_stores_path,
    load_stores,
    preserve_corrupt_file,
    save_stores,
)
from store_catalog.ui import TERMINATED_MESSAGE, ConsoleUI
from store_catalog.utils import notify_desktop

LOGGER = logging.getLogger("store_catalog")


def resolve_log_level(name: str) -> int:
    """Map a level name such as "INFO" to its number; anything unknown means WARNING."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    logging.basicConfig(level=resolve_log_level(LOG_LEVEL), format=LOG_FORMAT)


class CatalogSession:
    """
    Design (CatalogSession)
    - Purpose: Own the catalog for one run: load at startup, persist on save().
    - State:
        catalog: the in-memory Catalog
        path: where stores.json lives
        _preserve_on_save: True when the file on disk was malformed and must be
                           moved aside before it is overwritten for the first time
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.catalog = Catalog()
        self._preserve_on_save = False

    def load(self) -> str:
        """Populate the catalog; returns the startup message for the console."""
        result = load_stores(self.path)
        self.catalog.extend(result.stores)
        if result.status == LoadStatus.NOT_FOUND:
            return f"{self.path.name} not found. Starting with an empty list."
        if result.status == LoadStatus.PARSE_ERROR:
            self._preserve_on_save = True
            return f"Error loading data from {self.path.name}: {result.detail}. Starting with an empty list."
        return f"Data loaded successfully from {self.path.name}"

    def save(self) -> bool:
        if self._preserve_on_save:
            preserve_corrupt_file(self.path)
            self._preserve_on_save = False
        return save_stores(self.catalog, self.path)


def run_auto(session: CatalogSession) -> None:
    """Scripted smoke run: add one fixed store, show everything, save."""
    session.catalog.add(Store(**AUTO_STORE))
    for store in session.catalog:
        print(store)
    if not session.save():
        print("Warning: the catalog could not be saved.")
    if NOTIFY_ON_AUTO:
        notify_desktop("Store Catalog", f"Auto run saved {len(session.catalog)} store(s) to {session.path}")
    print(TERMINATED_MESSAGE)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging()

    session = CatalogSession(get_stores_path())
    try:
        print(session.load())
    except StorageError as exc:
        LOGGER.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args and args[0].lower() == AUTO_FLAG:
        run_auto(session)
        return 0

    ConsoleUI(session.catalog, session.save).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
