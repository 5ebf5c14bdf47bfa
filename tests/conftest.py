"""Shared fixtures: a small in-memory game catalog."""

import pytest

from utils.catalog import GameData


def sentinel(item_id, main_type):
    return {"id": item_id, "name": "None", "mainType": main_type, "rarity": "Common"}


ITEMS = [
    sentinel("AAA", "Accessory"),
    sentinel("AAB", "Chestplate"),
    sentinel("AAC", "Boots"),
    sentinel("AAD", "Enchant"),
    sentinel("AAE", "Modifier"),
    sentinel("AAF", "Gem"),
    {
        "id": "ACC",
        "name": "Test Amulet",
        "legend": "A test accessory.",
        "mainType": "Accessory",
        "subType": "Amulet",
        "rarity": "Rare",
        "gemNo": 1,
        "minLevel": 10,
        "maxLevel": 140,
        "validModifiers": ["Abyssal", "Atlantean Essence"],
        "statsPerLevel": [
            {"level": 10, "power": 1},
            {"level": 140, "power": 10, "defense": 50},
        ],
        "power": 2,
    },
    {
        "id": "CHT",
        "name": "Test Chestplate",
        "mainType": "Chestplate",
        "rarity": "Exotic",
        "gemNo": 0,
        "statsPerLevel": [{"level": 140, "defense": 100, "agility": 5}],
    },
    {
        "id": "RNG",
        "name": "Plain Ring",
        "mainType": "Accessory",
        "rarity": "Common",
        "power": 5,
    },
    {
        "id": "OLD",
        "name": "Old Ring",
        "mainType": "Accessory",
        "rarity": "Common",
        "deleted": True,
        "statsPerLevel": [{"level": 140, "power": 99}],
    },
    {"id": "ENA", "name": "Strong", "mainType": "Enchant", "powerIncrement": 0.5},
    {"id": "ENB", "name": "Virtuous", "mainType": "Enchant", "warding": 3},
    {"id": "MDA", "name": "Abyssal", "mainType": "Modifier", "defenseIncrement": 2.5},
    {"id": "MDB", "name": "Atlantean Essence", "mainType": "Modifier"},
    {"id": "GMA", "name": "Power Gem", "mainType": "Gem", "power": 2, "drawback": 1},
]

WEAPONS = [
    {
        "name": "Cutlass",
        "legend": "A curved blade.",
        "rarity": "Common",
        "damage": 1.0,
        "speed": 1.1,
        "size": 0.9,
        "specialEffect": "",
        "efficiency": 1.0,
        "durability": 500,
    },
]

MAGICS = [
    {
        "name": "Fire",
        "legend": "Burns.",
        "specialEffect": "Burn",
        "unimbued": {"damage": 1.1, "speed": 1.0, "size": 1.0},
        "imbued": {"damage": 1.05, "speed": 1.0, "size": {"conjurer": 1.0, "warlock": 1.1}},
        "clash": {"over": ["Ice"], "neutral": ["Fire"], "under": ["Water"]},
    },
]


@pytest.fixture
def datasets():
    return {"items": ITEMS, "weapons": WEAPONS, "magics": MAGICS}


@pytest.fixture
def catalog(tmp_path):
    data = GameData(tmp_path)
    data.load_items(ITEMS)
    data.load_weapons(WEAPONS)
    data.load_magics(MAGICS)
    return data
