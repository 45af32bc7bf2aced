from __future__ import annotations

import pytest

from store_catalog.models import Store


def test_round_the_clock_is_case_insensitive_without_trimming() -> None:
    assert Store(working_hours="24/7").works_everyday_without_break()
    assert not Store(working_hours="24/7 ").works_everyday_without_break()
    assert not Store(working_hours="Mon-Fri").works_everyday_without_break()


def test_short_phone_threshold() -> None:
    assert Store(phones=["123"]).has_short_phone_number()
    assert Store(phones=["1234"]).has_short_phone_number()
    assert not Store(phones=["12345"]).has_short_phone_number()
    assert not Store(phones=[]).has_short_phone_number()


def test_ukrainian_mobile_prefix() -> None:
    assert Store(phones=["380501234567"]).has_ukrainian_mobile_number()
    assert Store(phones=["0501234567", "380"]).has_ukrainian_mobile_number()
    assert not Store(phones=["0501234567"]).has_ukrainian_mobile_number()
    assert not Store().has_ukrainian_mobile_number()


def test_add_phone_keeps_insertion_order() -> None:
    store = Store(name="Silpo")
    store.add_phone("2")
    store.add_phone("1")
    assert store.phones == ["2", "1"]


def test_default_phone_lists_are_not_shared() -> None:
    first, second = Store(), Store()
    first.add_phone("1234")
    assert second.phones == []


def test_str_lists_every_field() -> None:
    store = Store(
        name="ATB",
        address="Lviv Shevchenka 5",
        phones=["380671112233", "1234"],
        specialization="Grocery",
        working_hours="24/7",
    )
    assert str(store) == (
        "Store(Name='ATB', Address='Lviv Shevchenka 5', Phones=380671112233, 1234, "
        "Specialization='Grocery', WorkingHours='24/7')"
    )


def test_to_dict_uses_persisted_key_order() -> None:
    data = Store(name="A", address="B", specialization="C", working_hours="D").to_dict()
    assert list(data) == ["name", "address", "phones", "specialization", "workingHours"]
    assert data["phones"] == []


def test_from_dict_defaults_missing_and_null_fields() -> None:
    store = Store.from_dict({"name": "Only name", "phones": None, "address": None})
    assert store == Store(name="Only name")


def test_from_dict_rejects_wrong_types() -> None:
    with pytest.raises(ValueError):
        Store.from_dict({"name": 42})
    with pytest.raises(ValueError):
        Store.from_dict({"phones": "380501234567"})
    with pytest.raises(ValueError):
        Store.from_dict({"phones": [380501234567]})


def test_from_dict_ignores_key_case() -> None:
    store = Store.from_dict({"NAME": "Eva", "workinghours": "24/7", "Phones": ["380"]})
    assert store == Store(name="Eva", phones=["380"], working_hours="24/7")
