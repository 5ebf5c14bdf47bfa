"""
Helper utility functions for the Discord bot.
Includes embed text formatting, emoji lookups, pagination and the slot
mutations used by the interactive item editor.
"""

import math
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from config import (
    EMPTY_ENCHANTMENT_ID,
    EMPTY_GEM_ID,
    EMPTY_MODIFIER_ID,
    ENCHANT_ICONS,
    FIGHTING_STYLE_ICONS,
    GEM_ICONS,
    MAGIC_ICONS,
    MAX_LEVEL,
    MIN_ITEM_LEVEL,
    MODIFIER_ICONS,
    DEFAULT_COLOR,
    RARITY_COLORS,
    SELECT_OPTION_LIMIT,
    SORT_STATS,
)
from models import Item, Player, Slot

PING_NAME_MAX_LENGTH = 50


def _is_set(value: str, empty_id: str) -> bool:
    return bool(value) and value != empty_id


# ==================== EMOJIS ====================

def enchant_emoji(item: Item) -> Optional[str]:
    return ENCHANT_ICONS.get(item.name)


def modifier_emoji(item: Item) -> Optional[str]:
    return MODIFIER_ICONS.get(item.name)


def gem_emoji(item: Item) -> Optional[str]:
    return GEM_ICONS.get(item.name)


def get_rarity_color(rarity: str) -> int:
    return RARITY_COLORS.get(rarity, DEFAULT_COLOR)


def style_icons_text(player: Player) -> str:
    """Fighting style icons followed by magic icons, space separated"""
    icons = [FIGHTING_STYLE_ICONS.get(style.display_name) for style in player.fighting_styles]
    icons += [MAGIC_ICONS.get(magic.display_name) for magic in player.magics]
    return " ".join(icon for icon in icons if icon)


# ==================== SLOT TEXT ====================

def build_slot_field_text(slot: Slot, catalog) -> str:
    """Field text for one slot of a /build embed: name, emojis and level."""
    item = catalog.find_item_by_id(slot.item)
    text = item.name

    if _is_set(slot.enchant, EMPTY_ENCHANTMENT_ID):
        emoji = enchant_emoji(catalog.find_item_by_id(slot.enchant))
        if emoji:
            text += f"\n{emoji}"

    if _is_set(slot.modifier, EMPTY_MODIFIER_ID):
        emoji = modifier_emoji(catalog.find_item_by_id(slot.modifier))
        if emoji:
            text += f" {emoji}"

    gems = [
        gem_emoji(catalog.find_item_by_id(gem_id))
        for gem_id in slot.gems
        if _is_set(gem_id, EMPTY_GEM_ID)
    ]
    gems = [emoji for emoji in gems if emoji]
    if gems:
        text += "\n" + " ".join(gems)

    text += f"\n**Level:** {slot.level}"
    return text


def item_to_stats(slot: Slot, catalog) -> str:
    """Plain-text summary shown when the item editor is finished"""
    item = catalog.find_item_by_id(slot.item)
    lines = [f"Item: {item.name}", f"Level: {slot.level}"]

    if _is_set(slot.enchant, EMPTY_ENCHANTMENT_ID):
        lines.append(f"Enchantment: {catalog.find_item_by_id(slot.enchant).name}")

    if _is_set(slot.modifier, EMPTY_MODIFIER_ID):
        lines.append(f"Modifier: {catalog.find_item_by_id(slot.modifier).name}")

    gems = [
        catalog.find_item_by_id(gem_id).name
        for gem_id in slot.gems
        if _is_set(gem_id, EMPTY_GEM_ID)
    ]
    if gems:
        lines.append(f"Gems: {', '.join(gems)}")

    return "\n".join(lines)


def gems_field_text(slot: Slot, item: Item, catalog) -> str:
    lines = []
    for index in range(item.gem_no or 0):
        gem_id = slot.gems[index] if index < len(slot.gems) else ""
        if _is_set(gem_id, EMPTY_GEM_ID):
            gem = catalog.find_item_by_id(gem_id)
            lines.append(f"{gem_emoji(gem) or ''} {gem.name}".strip())
        else:
            lines.append("Empty Slot")
    return "\n".join(lines)


# ==================== WEAPONS ====================

def create_weapon_stat_bar(value: float, minimum: float, maximum: float, emoji: str) -> str:
    """
    Render a weapon multiplier as a bar of 1-10 emojis.

    Args:
        value: The weapon's multiplier
        minimum: Value rendered as a single emoji
        maximum: Value rendered as ten emojis
        emoji: Emoji repeated to form the bar
    """
    normalized = min(max((value - minimum) / (maximum - minimum), 0.0), 1.0)
    # Half-up rounding, so 0.5 of a step fills the next cell
    filled = min(max(math.floor(normalized * 9 + 0.5) + 1, 1), 10)
    return emoji * filled


# ==================== SORTING ====================

def get_stat_display_name(stat: str) -> str:
    return SORT_STATS[stat][0] if stat in SORT_STATS else stat


def get_type_filter(item_type: Optional[str]) -> str:
    return f" for {item_type.lower()} items" if item_type else ""


def total_pages(count: int, per_page: int) -> int:
    return max(1, -(-count // per_page))


def page_slice(items: Sequence, page: int, per_page: int) -> List:
    """Items on a zero-based page"""
    start = page * per_page
    return list(items[start:start + per_page])


# ==================== ITEM EDITOR ====================
# Each mutation returns a new Slot; the slot passed in is left untouched.

def shift_slot_level(slot: Slot, item: Item, delta: int) -> Slot:
    minimum = item.min_level or MIN_ITEM_LEVEL
    level = min(max(slot.level + delta, minimum), MAX_LEVEL)
    return replace(slot, gems=list(slot.gems), level=level)


def max_slot_level(slot: Slot) -> Slot:
    return replace(slot, gems=list(slot.gems), level=MAX_LEVEL)


def set_slot_enchant(slot: Slot, enchant_id: str) -> Slot:
    return replace(slot, gems=list(slot.gems), enchant=enchant_id)


def set_slot_modifier(slot: Slot, modifier_id: str) -> Slot:
    return replace(slot, gems=list(slot.gems), modifier=modifier_id)


def set_slot_gem(slot: Slot, index: int, gem_id: str) -> Slot:
    gems = list(slot.gems)
    while len(gems) <= index:
        gems.append(EMPTY_GEM_ID)
    gems[index] = gem_id
    return replace(slot, gems=gems)


# ==================== PINGS ====================

def validate_ping_name(name: str) -> Optional[str]:
    """Return an error message for an invalid ping name, or None"""
    if not name or not all(c.isalnum() or c in "_-" for c in name):
        return "❌ Ping name can only contain alphanumeric characters, underscores, and hyphens!"
    if len(name) > PING_NAME_MAX_LENGTH:
        return f"❌ Ping name must be {PING_NAME_MAX_LENGTH} characters or less!"
    return None


# ==================== SELECT OPTIONS ====================
# (label, value) pairs; "None" first, then at most SELECT_OPTION_LIMIT - 1 entries

def enchant_choices(catalog) -> List[Tuple[str, str]]:
    choices = [("None", EMPTY_ENCHANTMENT_ID)]
    for enchant_id in catalog.enchant_ids[:SELECT_OPTION_LIMIT - 1]:
        choices.append((catalog.find_item_by_id(enchant_id).name, enchant_id))
    return choices


def modifier_choices(item: Item, catalog) -> List[Tuple[str, str]]:
    """Modifiers the item accepts, resolved by name"""
    choices = [("None", EMPTY_MODIFIER_ID)]
    for name in (item.valid_modifiers or [])[:SELECT_OPTION_LIMIT - 1]:
        modifier = catalog.find_item_by_name(name)
        if modifier is not None:
            choices.append((modifier.name, modifier.id))
    return choices


def gem_choices(catalog) -> List[Tuple[str, str]]:
    choices = [("None", EMPTY_GEM_ID)]
    for gem_id in catalog.gem_ids[:SELECT_OPTION_LIMIT - 1]:
        choices.append((catalog.find_item_by_id(gem_id).name, gem_id))
    return choices
