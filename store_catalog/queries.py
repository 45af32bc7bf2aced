"""
Design (queries.py)
- Purpose: Read-only queries (keyword search, "specific stores" filter) and the
           comparators the catalog sorts with.
- Inputs: Iterables of Store, keyword text.
- Outputs: New lists (queries) or ints (comparators).
- Side effects: None; sorting itself happens in Catalog.sort_by.
"""

from typing import Iterable, List

from .models import Store
from .utils import fold


def search_by_keyword(stores: Iterable[Store], keyword: str) -> List[Store]:
    """
    Stores whose name, address or specialization contains `keyword`, ignoring case.
    An empty keyword matches everything. Catalog order is kept.
    """
    needle = fold(keyword)
    return [
        s for s in stores
        if needle in fold(s.name)
        or needle in fold(s.address)
        or needle in fold(s.specialization)
    ]


def is_specific_store(store: Store) -> bool:
    return (
        store.works_everyday_without_break()
        and store.has_short_phone_number()
        and store.has_ukrainian_mobile_number()
    )


def find_specific_stores(stores: Iterable[Store]) -> List[Store]:
    """Round-the-clock stores that list both a short number and a 380-prefixed one."""
    return [s for s in stores if is_specific_store(s)]


def city_from_address(address: str) -> str:
    # "Kyiv Khreshchatyk 1" -> "Kyiv"; no space -> whole address
    return address.split(" ", 1)[0]


def _compare(a: str, b: str) -> int:
    # ordinal, code-point order
    return (a > b) - (a < b)


def compare_by_name(s1: Store, s2: Store) -> int:
    return _compare(s1.name, s2.name)


def compare_by_city(s1: Store, s2: Store) -> int:
    return _compare(city_from_address(s1.address), city_from_address(s2.address))


def compare_by_specialization(s1: Store, s2: Store) -> int:
    return _compare(s1.specialization, s2.specialization)

