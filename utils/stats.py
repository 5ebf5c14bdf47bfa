"""
Stat aggregation for decoded builds.

Every slot is summed into its own scratch TotalStats before being merged
into the caller's total; the Atlantean Essence bonus inspects that scratch
total, never the running grand total.
"""

import math

from config import (
    ATLANTEAN_ESSENCE,
    EMPTY_ENCHANTMENT_ID,
    EMPTY_GEM_ID,
    EMPTY_ITEM_IDS,
    EMPTY_MODIFIER_ID,
    STAT_EMOJIS,
)
from models import GEM_STATS, INCREMENT_STATS, ITEM_STATS, LEVEL_STATS, Player, Slot, TotalStats

# (stat, bonus per multiplier) checked in order; first stat still at zero wins
ATLANTEAN_BONUS_ORDER = (
    ("power", 1),
    ("defense", 9.07),
    ("attack_size", 3),
    ("attack_speed", 3),
    ("agility", 3),
    ("intensity", 3),
)


def _add_fields(total: TotalStats, source, names) -> None:
    for name in names:
        setattr(total, name, getattr(total, name) + (getattr(source, name) or 0))


def _add_increments(total: TotalStats, source, multiplier: float) -> None:
    for name in INCREMENT_STATS:
        setattr(total, name, getattr(total, name) + math.floor(source.increment(name) * multiplier))


def _apply_atlantean_bonus(total: TotalStats, multiplier: float) -> None:
    total.insanity += 1
    mult_int = int(multiplier)

    for stat, bonus in ATLANTEAN_BONUS_ORDER:
        if getattr(total, stat) != 0:
            continue
        if stat == "defense":
            total.defense += math.floor(bonus * multiplier)
        else:
            setattr(total, stat, getattr(total, stat) + bonus * mult_int)
        return

    total.power += mult_int


def aggregate_slot(slot: Slot, catalog) -> TotalStats:
    """Compute the stats contributed by a single equipped slot.

    ``catalog`` needs only ``find_item_by_id``; unknown ids resolve to a
    zero-valued stand-in so aggregation never fails.
    """
    total = TotalStats()

    if slot.item in EMPTY_ITEM_IDS:
        return total

    bucket = (slot.level // 10) * 10
    multiplier = float(slot.level // 10)

    item = catalog.find_item_by_id(slot.item)

    if item.stats_per_level:
        row = next((r for r in item.stats_per_level if r.level == bucket), item.stats_per_level[-1])
        _add_fields(total, row, LEVEL_STATS)

    # Flat stats are added whether or not a level table matched
    _add_fields(total, item, ITEM_STATS)

    if slot.enchant and slot.enchant != EMPTY_ENCHANTMENT_ID:
        enchant = catalog.find_item_by_id(slot.enchant)
        _add_increments(total, enchant, multiplier)
        total.warding += enchant.warding or 0

    for gem_id in slot.gems:
        if not gem_id or gem_id == EMPTY_GEM_ID:
            continue
        _add_fields(total, catalog.find_item_by_id(gem_id), GEM_STATS)

    if slot.modifier:
        modifier = catalog.find_item_by_id(slot.modifier)
        if modifier.name == ATLANTEAN_ESSENCE:
            _apply_atlantean_bonus(total, multiplier)
        elif slot.modifier != EMPTY_MODIFIER_ID:
            _add_increments(total, modifier, multiplier)

    return total


def aggregate_player(player: Player, catalog) -> TotalStats:
    """Sum the three accessories, chestplate and boots."""
    total = TotalStats()
    for slot in player.slots:
        total.add(aggregate_slot(slot, catalog))
    return total


def format_total_stats(stats: TotalStats) -> str:
    lines = [
        f"{emoji} {getattr(stats, name)}"
        for name, emoji in STAT_EMOJIS.items()
        if getattr(stats, name) != 0
    ]
    return "\n".join(lines) if lines else "No stats"
