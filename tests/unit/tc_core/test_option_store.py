"""Tests for OptionStore."""

from __future__ import annotations

import pytest

from tc_common.errors import DuplicateName, InvalidOptionName, NotFound
from tc_core.models import SelectOption, SelectOptionColor
from tc_core.option_store import OptionStore
from tc_core.selection_set import SelectionSet


pytestmark = pytest.mark.unit_core


@pytest.fixture
def store(counter_ids) -> OptionStore:
    return OptionStore(
        [SelectOption(id="1", name="Red", color=SelectOptionColor.PINK)],
        id_factory=counter_ids,
    )


def test_add_appends_with_fresh_id(store: OptionStore) -> None:
    option = store.add("  Blue ")

    assert option.id == "n1"
    assert option.name == "Blue"
    assert [o.name for o in store.options()] == ["Red", "Blue"]
    assert store.lookup("n1") == option


def test_add_cycles_palette_by_position(store: OptionStore) -> None:
    option = store.add("Blue")
    assert option.color is SelectOptionColor.for_index(1)
    assert store.add("Green", SelectOptionColor.LIME).color is SelectOptionColor.LIME


def test_add_rejects_case_insensitive_duplicate(store: OptionStore) -> None:
    with pytest.raises(DuplicateName) as excinfo:
        store.add(" red")
    assert excinfo.value.context["existing_id"] == "1"
    assert len(store) == 1


def test_add_rejects_blank_name(store: OptionStore) -> None:
    with pytest.raises(InvalidOptionName):
        store.add("   ")


def test_add_skips_ids_already_in_use() -> None:
    ids = iter(["1", "1", "2"])
    store = OptionStore([SelectOption(id="1", name="Red")], id_factory=lambda: next(ids))
    assert store.add("Blue").id == "2"


def test_rename_preserves_position(store: OptionStore) -> None:
    store.add("Blue")
    store.rename("1", "Crimson")
    assert [o.name for o in store.options()] == ["Crimson", "Blue"]
    assert store.lookup("1").color is SelectOptionColor.PINK


def test_rename_to_own_name_in_other_case_is_allowed(store: OptionStore) -> None:
    assert store.rename("1", "RED").name == "RED"


def test_rename_collision_raises_and_keeps_state(store: OptionStore) -> None:
    blue = store.add("Blue")
    with pytest.raises(DuplicateName):
        store.rename(blue.id, "red")
    assert store.lookup(blue.id).name == "Blue"


def test_rename_unknown_id_raises(store: OptionStore) -> None:
    with pytest.raises(NotFound):
        store.rename("missing", "Anything")


def test_update_applies_color(store: OptionStore) -> None:
    updated = store.update(SelectOption(id="1", name="Red", color=SelectOptionColor.AQUA))
    assert updated.color is SelectOptionColor.AQUA
    assert store.lookup("1") == updated


def test_remove_cascades_into_selections(store: OptionStore) -> None:
    blue = store.add("Blue")
    first = SelectionSet(store, ["1", blue.id])
    second = SelectionSet(store, [blue.id])

    store.remove(blue.id)

    assert first.ordered() == ("1",)
    assert second.ordered() == ()
    assert store.lookup(blue.id) is None


def test_remove_unknown_id_raises(store: OptionStore) -> None:
    with pytest.raises(NotFound):
        store.remove("missing")


def test_lookup_missing_returns_none(store: OptionStore) -> None:
    assert store.lookup("missing") is None


def test_seed_skips_duplicate_ids_and_names() -> None:
    store = OptionStore(
        [
            SelectOption(id="1", name="Red"),
            SelectOption(id="1", name="Blue"),
            SelectOption(id="2", name="RED"),
            SelectOption(id="3", name="Green"),
        ]
    )
    assert [(o.id, o.name) for o in store] == [("1", "Red"), ("3", "Green")]


def test_name_index_follows_rename_and_remove(store: OptionStore) -> None:
    store.rename("1", "Crimson")
    assert store.find_by_name("red") is None
    assert store.find_by_name(" CRIMSON ").id == "1"

    red = store.add("Red")
    store.remove(red.id)
    assert store.find_by_name("red") is None
    assert store.add("red").name == "red"


def test_seeding_large_option_list_keeps_order() -> None:
    options = [SelectOption(id=str(i), name=f"tag-{i}") for i in range(2000)]
    store = OptionStore(options + [SelectOption(id="x", name="TAG-7")])
    assert len(store) == 2000
    assert store.find_by_name("tag-1999").id == "1999"
