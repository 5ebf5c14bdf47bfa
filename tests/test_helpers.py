"""Tests for embed text helpers, pagination and item editor slot mutations."""

import pytest

from config import ENCHANT_ICONS, FIGHTING_STYLE_ICONS, GEM_ICONS, MAGIC_ICONS, MODIFIER_ICONS
from models import FightingStyle, Item, Magic, Player, Slot
from utils.helpers import (
    build_slot_field_text,
    create_weapon_stat_bar,
    enchant_choices,
    gem_choices,
    gems_field_text,
    get_rarity_color,
    get_stat_display_name,
    get_type_filter,
    item_to_stats,
    max_slot_level,
    modifier_choices,
    page_slice,
    set_slot_enchant,
    set_slot_gem,
    set_slot_modifier,
    shift_slot_level,
    style_icons_text,
    total_pages,
    validate_ping_name,
)


# --- slot text ---

def test_build_slot_field_text(catalog):
    slot = Slot("ACC", "ENA", "MDA", ["GMA"], 140)
    assert build_slot_field_text(slot, catalog) == (
        f"Test Amulet\n{ENCHANT_ICONS['Strong']} {MODIFIER_ICONS['Abyssal']}"
        f"\n{GEM_ICONS['Power Gem']}\n**Level:** 140"
    )


def test_build_slot_field_text_empty_slot(catalog):
    slot = Slot("AAA", "AAD", "AAE", [], 10)
    assert build_slot_field_text(slot, catalog) == "None\n**Level:** 10"


def test_item_to_stats(catalog):
    slot = Slot("ACC", "ENA", "MDA", ["GMA", "AAF"], 120)
    assert item_to_stats(slot, catalog) == (
        "Item: Test Amulet\nLevel: 120\nEnchantment: Strong\nModifier: Abyssal\nGems: Power Gem"
    )
    assert item_to_stats(Slot("ACC", "AAD", "AAE", [], 140), catalog) == "Item: Test Amulet\nLevel: 140"


def test_gems_field_text(catalog):
    item = catalog.find_item_by_id("ACC")
    assert gems_field_text(Slot("ACC", "AAD", "AAE", [], 140), item, catalog) == "Empty Slot"
    assert gems_field_text(Slot("ACC", "AAD", "AAE", ["GMA"], 140), item, catalog) == (
        f"{GEM_ICONS['Power Gem']} Power Gem"
    )


def test_style_icons_text():
    slot = Slot("AAA", "AAD", "AAE", [], 10)
    player = Player(140, 0, 0, 0, 0, [Magic.ACID], [FightingStyle.BOXING], [slot] * 3, slot, slot)
    assert style_icons_text(player) == f"{FIGHTING_STYLE_ICONS['Boxing']} {MAGIC_ICONS['Acid']}"


def test_rarity_color_falls_back_to_default():
    assert get_rarity_color("Exotic") == 0xea3323
    assert get_rarity_color("Mythic") == 0x93b1e3


# --- weapons ---

@pytest.mark.parametrize("value,expected", [
    (0.0, 1),
    (-5.0, 1),
    (0.5, 6),
    (1.0, 10),
    (7.0, 10),
])
def test_weapon_stat_bar(value, expected):
    assert create_weapon_stat_bar(value, 0.0, 1.0, "x") == "x" * expected


# --- sorting and pagination ---

def test_stat_display_names():
    assert get_stat_display_name("attackspeed") == "Attack Speed"
    assert get_stat_display_name("armorpiercing") == "Armor Piercing"
    assert get_stat_display_name("mystery") == "mystery"


def test_type_filter():
    assert get_type_filter("Accessory") == " for accessory items"
    assert get_type_filter(None) == ""
    assert get_type_filter("") == ""


def test_pagination():
    assert total_pages(0, 10) == 1
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2
    assert page_slice(list(range(25)), 2, 10) == [20, 21, 22, 23, 24]
    assert page_slice(list(range(25)), 3, 10) == []


# --- item editor mutations ---

def test_shift_slot_level_clamps(catalog):
    item = catalog.find_item_by_id("ACC")
    slot = Slot("ACC", "AAD", "AAE", [], 140)

    assert shift_slot_level(slot, item, 10).level == 140
    assert shift_slot_level(slot, item, -10).level == 130
    assert shift_slot_level(Slot("ACC", "AAD", "AAE", [], 10), item, -10).level == 10
    assert slot.level == 140


def test_shift_slot_level_respects_item_minimum():
    item = Item(id="X", name="High Ring", min_level=60)
    assert shift_slot_level(Slot("X", "AAD", "AAE", [], 60), item, -10).level == 60
    # Items without a minimum fall back to level 10
    assert shift_slot_level(Slot("X", "AAD", "AAE", [], 10), Item(id="Y", name="Y"), -10).level == 10


def test_max_slot_level():
    assert max_slot_level(Slot("ACC", "AAD", "AAE", [], 20)).level == 140


def test_slot_mutations_do_not_touch_original():
    slot = Slot("ACC", "AAD", "AAE", ["GMA"], 140)

    updated = set_slot_gem(set_slot_modifier(set_slot_enchant(slot, "ENA"), "MDA"), 0, "AAF")
    assert (updated.enchant, updated.modifier, updated.gems) == ("ENA", "MDA", ["AAF"])
    assert (slot.enchant, slot.modifier, slot.gems) == ("AAD", "AAE", ["GMA"])


def test_set_slot_gem_pads_with_empty_gems():
    slot = set_slot_gem(Slot("ACC", "AAD", "AAE", [], 140), 2, "GMA")
    assert slot.gems == ["AAF", "AAF", "GMA"]


# --- select options ---

def test_enchant_and_gem_choices(catalog):
    assert enchant_choices(catalog) == [("None", "AAD"), ("Strong", "ENA"), ("Virtuous", "ENB")]
    assert gem_choices(catalog) == [("None", "AAF"), ("Power Gem", "GMA")]


def test_modifier_choices_follow_valid_modifiers(catalog):
    item = catalog.find_item_by_id("ACC")
    assert modifier_choices(item, catalog) == [
        ("None", "AAE"), ("Abyssal", "MDA"), ("Atlantean Essence", "MDB"),
    ]
    assert modifier_choices(catalog.find_item_by_id("CHT"), catalog) == [("None", "AAE")]


def test_choices_fit_in_one_select(catalog):
    catalog.load_items([
        {"id": f"G{i:02d}", "name": f"Gem {i}", "mainType": "Gem"} for i in range(40)
    ])
    assert len(gem_choices(catalog)) == 25


# --- pings ---

@pytest.mark.parametrize("name", ["raid", "raid-ping_1", "a" * 50])
def test_valid_ping_names(name):
    assert validate_ping_name(name) is None


@pytest.mark.parametrize("name", ["", "raid ping", "raid!", "a" * 51])
def test_invalid_ping_names(name):
    assert validate_ping_name(name).startswith("❌")
