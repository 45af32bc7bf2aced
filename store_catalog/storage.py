"""
Design (storage.py)
- Purpose: Load and save the catalog to/from disk (JSON).
- Inputs: Path (from get_stores_path()), list of Store for save.
- Outputs: LoadResult on load; bool (saved or not) on save.
- Side effects: Reads/writes file. Missing or malformed file degrades to an empty list;
                an unreadable file raises StorageError. Save failures are logged, not raised.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List

from .config import JSON_INDENT, STORES_FILENAME, STORES_PATH_ENV
from .models import Store

LOGGER = logging.getLogger(__name__)

CORRUPT_SUFFIX = ".corrupt"


class StorageError(Exception):
    """The stores file exists but cannot be read at all."""


class LoadStatus(Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


@dataclass
class LoadResult:
    stores: List[Store] = field(default_factory=list)
    status: LoadStatus = LoadStatus.LOADED
    detail: str = ""


def get_stores_path() -> Path:
    """
    Resolve path for stores.json: STORE_CATALOG_FILE if set, otherwise relative
    to the current working directory.
    """
    override = os.environ.get(STORES_PATH_ENV, "").strip()
    if override:
        return Path(override)
    return Path(STORES_FILENAME)


def parse_stores(text: str) -> List[Store]:
    """
    Decode a JSON array of store objects. All-or-nothing: any bad element fails the
    whole document with ValueError (json.JSONDecodeError is a ValueError too).
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("top-level JSON value must be an array")
    stores: List[Store] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"element {index} is not an object")
        try:
            stores.append(Store.from_dict(item))
        except ValueError as exc:
            raise ValueError(f"element {index}: {exc}") from exc
    return stores


def load_stores(path: Path) -> LoadResult:
    """
    Load stores from JSON file. Missing file and parse errors return an empty list
    with the matching status; the malformed file is left untouched.
    """
    if not path.exists():
        LOGGER.info("%s not found; starting with an empty catalog", path)
        return LoadResult(status=LoadStatus.NOT_FOUND)
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        LOGGER.warning("Could not decode %s: %s", path, exc)
        return LoadResult(status=LoadStatus.PARSE_ERROR, detail=str(exc))
    except OSError as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc
    try:
        stores = parse_stores(text)
    except (ValueError, RecursionError) as exc:
        LOGGER.warning("Malformed data in %s: %s", path, exc)
        return LoadResult(status=LoadStatus.PARSE_ERROR, detail=str(exc))
    LOGGER.info("Loaded %d store(s) from %s", len(stores), path)
    return LoadResult(stores=stores, status=LoadStatus.LOADED)


def dump_stores(stores: Iterable[Store], ensure_ascii: bool = False) -> str:
    return json.dumps([s.to_dict() for s in stores], indent=JSON_INDENT, ensure_ascii=ensure_ascii)


def encode_stores(stores: Iterable[Store]) -> bytes:
    """
    UTF-8 bytes of the JSON document. Text that UTF-8 cannot carry (lone surrogates)
    is written as \\u escapes instead, which json.loads reads back unchanged.
    """
    stores = list(stores)
    try:
        return dump_stores(stores).encode("utf-8")
    except UnicodeEncodeError:
        return dump_stores(stores, ensure_ascii=True).encode("ascii")


def preserve_corrupt_file(path: Path) -> Path | None:
    """
    Move a malformed stores file aside to <name>.corrupt so the next save
    does not destroy it. Returns the new path, or None if nothing was moved.
    """
    if not path.exists():
        return None
    target = path.with_name(path.name + CORRUPT_SUFFIX)
    try:
        os.replace(path, target)
    except OSError as exc:
        LOGGER.error("Could not preserve malformed %s: %s", path, exc)
        return None
    LOGGER.warning("Malformed %s preserved as %s", path, target)
    return target


def save_stores(stores: Iterable[Store], path: Path) -> bool:
    """
    Save the catalog as a pretty-printed JSON array, overwriting in place.
    Returns False (and logs) on OSError, e.g. a read-only location.
    The payload is encoded before the file is opened, so a failure never truncates it.
    """
    payload = encode_stores(stores)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(payload)
    except OSError as exc:
        LOGGER.error("Could not save %s: %s", path, exc)
        return False
    LOGGER.info("Saved catalog to %s", path)
    return True
