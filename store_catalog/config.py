"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: Environment variables (read once at import).
- Outputs: Constants (file names, menu labels, predicate thresholds, logging/notification settings).
- Side effects: None.
"""

import os

# Persistence: filename for the saved catalog (path resolved in storage module)
STORES_FILENAME = "stores.json"
STORES_PATH_ENV = "STORE_CATALOG_FILE"
JSON_INDENT = 2

# Non-interactive smoke run
AUTO_FLAG = "-auto"
AUTO_STORE = {
    "name": "AutoStore",
    "address": "AutoAddress",
    "specialization": "AutoSpecialization",
    "working_hours": "24/7",
}

# Heuristics behind the "specific stores" filter
ROUND_THE_CLOCK = "24/7"
SHORT_PHONE_MAX_LEN = 5   # phones strictly shorter than this count as short
UKRAINIAN_MOBILE_PREFIX = "380"

PHONES_SEPARATOR = ", "

MENU_OPTIONS = [
    (1, "Add a new store"),
    (2, "View list of stores"),
    (3, "Delete a store by name"),
    (4, "Search stores by keyword"),
    (5, "Sort by Name"),
    (6, "Sort by City in Address"),
    (7, "Sort by Specialization"),
    (8, "Find specific stores"),
    (9, "Exit program"),
]

LOG_LEVEL = os.environ.get("STORE_CATALOG_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Desktop notification after an -auto run (off unless STORE_CATALOG_NOTIFY=1)
NOTIFY_ON_AUTO = os.environ.get("STORE_CATALOG_NOTIFY", "").strip().lower() in ("1", "true", "yes")
NOTIFY_TIMEOUT_SEC = 5
