from __future__ import annotations

from store_catalog.models import Store
from store_catalog.queries import (
    city_from_address,
    compare_by_city,
    compare_by_name,
    compare_by_specialization,
    find_specific_stores,
    search_by_keyword,
)
from store_catalog.repository import Catalog


def _sample() -> list[Store]:
    return [
        Store(name="Rozetka", address="Kyiv Khreshchatyk 1", specialization="Electronics"),
        Store(name="Silpo", address="Lviv Rynok 3", specialization="Grocery"),
        Store(name="Foxtrot", address="Dnipro", specialization="Electronics"),
    ]


def test_search_matches_name_address_or_specialization() -> None:
    stores = _sample()
    assert [s.name for s in search_by_keyword(stores, "ROZ")] == ["Rozetka"]
    assert [s.name for s in search_by_keyword(stores, "rynok")] == ["Silpo"]
    assert [s.name for s in search_by_keyword(stores, "electr")] == ["Rozetka", "Foxtrot"]
    assert search_by_keyword(stores, "nothing-here") == []


def test_empty_keyword_returns_everything_in_order() -> None:
    stores = _sample()
    assert search_by_keyword(stores, "") == stores


def test_specific_stores_needs_all_three_conditions() -> None:
    store = Store(name="Kiosk", phones=["380991112233", "1234"], working_hours="24/7")
    assert find_specific_stores([store]) == [store]

    store.working_hours = "9-18"
    assert find_specific_stores([store]) == []

    only_short = Store(phones=["1234"], working_hours="24/7")
    only_mobile = Store(phones=["380991112233"], working_hours="24/7")
    assert find_specific_stores([only_short, only_mobile]) == []


def test_city_from_address() -> None:
    assert city_from_address("Kyiv Khreshchatyk 1") == "Kyiv"
    assert city_from_address("Dnipro") == "Dnipro"
    assert city_from_address("") == ""


def test_comparators_are_ordinal() -> None:
    assert compare_by_name(Store(name="B"), Store(name="a")) < 0
    assert compare_by_name(Store(name="a"), Store(name="a")) == 0
    assert compare_by_specialization(Store(specialization="Z"), Store(specialization="A")) > 0
    assert compare_by_city(Store(address="Odesa Derybasivska"), Store(address="Kyiv")) > 0


def test_sort_by_city_uses_first_token() -> None:
    catalog = Catalog(_sample())
    catalog.sort_by(compare_by_city)
    assert [city_from_address(s.address) for s in catalog] == ["Dnipro", "Kyiv", "Lviv"]


def test_sorting_twice_matches_sorting_once() -> None:
    for comparator in (compare_by_name, compare_by_city, compare_by_specialization):
        catalog = Catalog(_sample())
        catalog.sort_by(comparator)
        once = catalog.snapshot()
        catalog.sort_by(comparator)
        assert catalog.snapshot() == once
