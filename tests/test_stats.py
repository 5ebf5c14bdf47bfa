"""Tests for per-slot and per-player stat aggregation."""

import pytest

from models import Item, Player, Slot, StatsPerLevel, TotalStats
from utils.build_code import decode
from utils.stats import aggregate_player, aggregate_slot, format_total_stats


def empty_slots():
    accessories = [Slot("AAA", "AAD", "AAE", [], 10) for _ in range(3)]
    return accessories, Slot("AAB", "AAD", "AAE", [], 10), Slot("AAC", "AAD", "AAE", [], 10)


class StubCatalog:
    """Lookup over a handful of hand-built items"""

    def __init__(self, *items):
        self.items = {item.id: item for item in items}

    def find_item_by_id(self, item_id):
        return self.items.get(item_id) or Item.unknown(item_id)


ATLANTEAN = Item(id="ATL", name="Atlantean Essence", main_type="Modifier")


def atlantean_total(level=140, **flat):
    item = Item(id="FLT", name="Flat Item", **flat)
    return aggregate_slot(Slot("FLT", "AAD", "ATL", [], level), StubCatalog(item, ATLANTEAN))


# --- empty slots ---

def test_empty_item_ids_contribute_nothing(catalog):
    for item_id in ("AAA", "AAB", "AAC"):
        total = aggregate_slot(Slot(item_id, "ENA", "MDB", ["GMA"], 140), catalog)
        assert total.is_empty()


def test_empty_build_has_no_stats(catalog):
    player = decode(
        "140,40,40,40,40|0,5|1|AAA,AAD,AAE,10|AAA,AAD,AAE,10|AAA,AAD,AAE,10|AAB,AAD,AAE,10|AAC,AAD,AAE,10"
    )
    total = aggregate_player(player, catalog)
    assert total.is_empty()
    assert format_total_stats(total) == "No stats"


# --- level table ---

def test_matching_level_row_plus_flat_stats(catalog):
    total = aggregate_slot(Slot("ACC", "AAD", "AAE", [], 140), catalog)
    # Row 140 power 10 plus the item's flat power 2
    assert total.power == 12
    assert total.defense == 50


def test_level_is_bucketed_down(catalog):
    total = aggregate_slot(Slot("ACC", "AAD", "AAE", [], 19), catalog)
    assert total.power == 1 + 2
    assert total.defense == 0


def test_missing_bucket_falls_back_to_last_row(catalog):
    total = aggregate_slot(Slot("ACC", "AAD", "AAE", [], 50), catalog)
    assert total.power == 12
    assert total.defense == 50


def test_item_without_level_table_uses_flat_stats(catalog):
    total = aggregate_slot(Slot("RNG", "AAD", "AAE", [], 140), catalog)
    assert total.power == 5


# --- enchant, gems, modifier ---

def test_enchant_modifier_and_gem(catalog):
    total = aggregate_slot(Slot("ACC", "ENA", "MDA", ["GMA"], 140), catalog)
    # 10 + 2 flat + floor(0.5 * 14) enchant + 2 gem
    assert total.power == 21
    # 50 + floor(2.5 * 14) modifier
    assert total.defense == 85
    assert total.drawback == 1


def test_increments_are_floored(catalog):
    total = aggregate_slot(Slot("ACC", "ENA", "MDA", [], 130), catalog)
    # multiplier 13: floor(6.5) and floor(32.5)
    assert total.power == 12 + 6
    assert total.defense == 50 + 32


def test_enchant_adds_flat_warding(catalog):
    total = aggregate_slot(Slot("ACC", "ENB", "AAE", [], 140), catalog)
    assert total.warding == 3


def test_empty_gem_ids_are_skipped(catalog):
    total = aggregate_slot(Slot("ACC", "AAD", "AAE", ["AAF", "", "GMA"], 140), catalog)
    assert total.power == 14
    assert total.drawback == 1


def test_unknown_ids_contribute_zero(catalog):
    total = aggregate_slot(Slot("ACC", "ZZ1", "ZZ2", ["ZZ3"], 140), catalog)
    assert total.power == 12
    assert total.defense == 50
    assert aggregate_slot(Slot("ZZZ", "AAD", "AAE", [], 140), catalog).is_empty()


# --- Atlantean Essence ---

def test_atlantean_fills_first_zero_stat(catalog):
    # Amulet already has power and defense, so attack size gets 3 per multiplier
    total = aggregate_slot(Slot("ACC", "AAD", "MDB", [], 140), catalog)
    assert total.insanity == 1
    assert total.attack_size == 42
    assert total.power == 12
    assert total.defense == 50


def test_atlantean_power_comes_first(catalog):
    total = aggregate_slot(Slot("CHT", "AAD", "MDB", [], 140), catalog)
    assert total.power == 14
    assert total.defense == 100
    assert total.insanity == 1


def test_atlantean_defense_bonus_is_floored(catalog):
    total = aggregate_slot(Slot("RNG", "AAD", "MDB", [], 140), catalog)
    assert total.defense == 126
    total = aggregate_slot(Slot("RNG", "AAD", "MDB", [], 135), catalog)
    assert total.defense == 117


def test_atlantean_checks_slot_total_not_build_total(catalog):
    accessories, chestplate, boots = empty_slots()
    accessories[0] = Slot("ACC", "AAD", "AAE", [], 140)
    accessories[1] = Slot("CHT", "AAD", "MDB", [], 140)
    player = Player(140, 0, 0, 0, 0, [], [], accessories, chestplate, boots)

    total = aggregate_player(player, catalog)
    # The second slot had no power of its own, so it still gets the power bonus
    assert total.power == 12 + 14
    assert total.insanity == 1


def test_atlantean_on_unknown_item(catalog):
    total = aggregate_slot(Slot("ZZZ", "AAD", "MDB", [], 140), catalog)
    assert total.power == 14
    assert total.insanity == 1


@pytest.mark.parametrize("flat,stat", [
    (dict(power=1, defense=1, attack_size=1), "attack_speed"),
    (dict(power=1, defense=1, attack_size=1, attack_speed=1), "agility"),
    (dict(power=1, defense=1, attack_size=1, attack_speed=1, agility=1), "intensity"),
])
def test_atlantean_later_stats_in_order(flat, stat):
    total = atlantean_total(**flat)
    assert getattr(total, stat) == 42
    for name, value in flat.items():
        assert getattr(total, name) == value
    assert total.insanity == 1


def test_atlantean_skips_stats_that_come_later_in_order():
    # Intensity is zero but attack speed is checked first
    total = atlantean_total(power=1, defense=1, attack_size=1, agility=1)
    assert total.attack_speed == 42
    assert total.intensity == 0


def test_atlantean_falls_back_to_power_when_all_stats_are_set():
    total = atlantean_total(
        power=1, defense=1, attack_size=1, attack_speed=1, agility=1, intensity=1,
    )
    assert total.power == 1 + 14
    assert (total.defense, total.attack_size, total.attack_speed, total.agility, total.intensity) == (1, 1, 1, 1, 1)
    assert total.insanity == 1


def test_atlantean_bonus_uses_whole_multiplier():
    total = atlantean_total(level=139, power=1, defense=1)
    assert total.attack_size == 3 * 13


# --- totals and formatting ---

def test_player_total_sums_all_slots(catalog):
    _, _, boots = empty_slots()
    accessories = [Slot("ACC", "AAD", "AAE", [], 140)] * 3
    chestplate = Slot("CHT", "AAD", "AAE", [], 140)
    player = Player(140, 0, 0, 0, 0, [], [], accessories, chestplate, boots)

    total = aggregate_player(player, catalog)
    assert total.power == 36
    assert total.defense == 250
    assert total.agility == 5


def test_format_total_stats_order_and_skip_zero():
    stats = TotalStats(power=3, drawback=2, defense=1)
    lines = format_total_stats(stats).split("\n")
    assert len(lines) == 3
    assert lines[0].endswith(" 3") and "power" in lines[0]
    assert "defense" in lines[1]
    assert "drawback" in lines[2]


def test_total_stats_add():
    total = TotalStats(power=1)
    total.add(TotalStats(power=2, warding=4))
    assert total.power == 3
    assert total.warding == 4
    assert not total.is_empty()


# --- bucket edge cases ---

def test_last_row_is_used_even_when_an_earlier_row_is_closer():
    item = Item(
        id="TBL", name="Table Item",
        stats_per_level=[StatsPerLevel(level=10, power=1), StatsPerLevel(level=100, power=100)],
    )
    total = aggregate_slot(Slot("TBL", "AAD", "AAE", [], 50), StubCatalog(item))
    assert total.power == 100


def test_levels_140_to_149_share_a_bucket(catalog):
    at_140 = aggregate_slot(Slot("ACC", "ENA", "MDA", [], 140), catalog)
    at_149 = aggregate_slot(Slot("ACC", "ENA", "MDA", [], 149), catalog)
    assert at_140 == at_149
