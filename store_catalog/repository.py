"""
Design (repository.py)
- Purpose: Encapsulate the in-memory catalog behind a tiny API, so the shell and the
           query helpers don't touch a global list directly.
- Inputs: Store objects, predicates, comparators.
- Outputs: Iteration in current order; snapshots (copies) of the current stores.
- Side effects: Mutates the internal list in place (add / remove / sort).
- Thread-safety: None needed; one thread owns the catalog for the whole session.
"""

import logging
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, List

from .models import Store
from .utils import fold

LOGGER = logging.getLogger(__name__)

Comparator = Callable[[Store, Store], int]


class Catalog:
    """
    Design (Catalog)
    - State:
        _stores: list of Store in display order (insertion order until sorted)
    """

    def __init__(self, stores: Iterable[Store] = ()) -> None:
        self._stores: List[Store] = list(stores)

    def __iter__(self) -> Iterator[Store]:
        # iterate a copy so callers may mutate while looping
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._stores)

    # -------- Mutations --------

    def add(self, store: Store) -> None:
        """Append a fully built store to the end of the catalog."""
        self._stores.append(store)

    def extend(self, stores: Iterable[Store]) -> None:
        self._stores.extend(stores)

    def remove_where(self, predicate: Callable[[Store], bool]) -> None:
        """
        Purpose: Drop every store matching predicate, keeping survivors in order.
        Outputs: None (no matches is not an error).
        """
        kept = [s for s in self._stores if not predicate(s)]
        LOGGER.debug("remove_where dropped %d store(s)", len(self._stores) - len(kept))
        self._stores[:] = kept

    def remove_by_name(self, name: str) -> None:
        """Remove all stores whose name equals `name`, ignoring case."""
        target = fold(name)
        self.remove_where(lambda s: fold(s.name) == target)

    def sort_by(self, comparator: Comparator) -> None:
        """Reorder in place using a two-argument comparator (negative / zero / positive)."""
        self._stores.sort(key=cmp_to_key(comparator))

    # -------- Snapshots for safe reading --------

    def snapshot(self) -> List[Store]:
        return list(self._stores)
