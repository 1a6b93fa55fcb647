import random

import pytest

from delve import ConfigurationError, LevelScaleTable, WeightedChoice, value_at
from delve.models import ItemKind
from delve.models.catalog import ITEMS, MAX_ITEMS_PER_ROOM, MAX_MONSTERS_PER_ROOM, MONSTERS
from delve.services.loot_service import item_table
from delve.services.spawn_service import monster_table

TABLE = [(1, 2), (4, 3), (6, 5)]


def test_value_at_step_function():
    t = LevelScaleTable(TABLE)
    assert t.value_at(0) == 0
    assert t.value_at(1) == 2
    assert t.value_at(3) == 2
    assert t.value_at(4) == 3
    assert t.value_at(5) == 3
    assert t.value_at(6) == 5
    assert t.value_at(10) == 5


def test_value_at_baseline_below_first_threshold():
    assert value_at(TABLE, 0, default=2) == 2
    assert LevelScaleTable([(4, 25)]).value_at(3) == 0
    assert value_at(LevelScaleTable(TABLE), 4) == 3


def test_value_at_default_overrides_table_baseline():
    t = LevelScaleTable([(4, 25)], default=10)
    assert value_at(t, 2) == 10
    assert value_at(t, 2, default=1) == 1
    assert value_at(t, 5, default=1) == 25
    assert t.value_at(2) == 10


def test_value_at_monotonic_for_increasing_tables():
    t = LevelScaleTable(TABLE)
    values = [t.value_at(d) for d in range(0, 20)]
    assert values == sorted(values)


@pytest.mark.parametrize("bad", [[(4, 1), (2, 3)], [(3, 1), (3, 2)]])
def test_thresholds_must_strictly_increase(bad):
    with pytest.raises(ConfigurationError) as exc:
        LevelScaleTable(bad)
    assert exc.value.code == "scale_order"


def test_catalog_tables():
    assert [MAX_MONSTERS_PER_ROOM.value_at(d) for d in (1, 4, 6)] == [2, 3, 5]
    assert [MAX_ITEMS_PER_ROOM.value_at(d) for d in (1, 3, 4)] == [1, 1, 2]
    troll = MONSTERS["troll"].weight
    assert [troll.value_at(d) for d in (1, 3, 5, 7)] == [0, 15, 30, 60]
    # healing potion weight does not depend on depth
    assert {ITEMS[ItemKind.HEAL].weight.value_at(d) for d in range(1, 15)} == {35}


def test_zero_weight_never_chosen():
    choice = WeightedChoice([(ItemKind.HEAL, 35), (ItemKind.LIGHTNING, 0)])
    rng = random.Random(5)
    assert {choice.choose(rng) for _ in range(500)} == {ItemKind.HEAL}


@pytest.mark.parametrize(
    "pairs,code",
    [
        ([], "weights_empty"),
        ([("a", 0), ("b", 0)], "weights_zero"),
        ([("a", 5), ("b", -1)], "weights_negative"),
        ([("a", 1.5)], "weights_type"),
    ],
)
def test_invalid_tables_rejected(pairs, code):
    with pytest.raises(ConfigurationError) as exc:
        WeightedChoice(pairs)
    assert exc.value.code == code


def test_choice_is_proportional():
    choice = WeightedChoice([("a", 1), ("b", 3)])
    rng = random.Random(99)
    draws = [choice.choose(rng) for _ in range(4000)]
    frac_b = draws.count("b") / len(draws)
    assert 0.7 < frac_b < 0.8


def test_shallow_depth_tables_only_offer_baseline_entries():
    rng = random.Random(3)
    monsters = monster_table(1)
    items = item_table(1)
    assert {monsters.choose(rng).slug for _ in range(200)} == {"orc"}
    assert {items.choose(rng).kind for _ in range(200)} == {ItemKind.HEAL}
