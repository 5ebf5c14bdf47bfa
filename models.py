"""
Data models for the bot.
Catalog records (items, weapons, magics) mirror the upstream JSON datasets;
Player/Slot/TotalStats describe a decoded GearBuilder build.
"""

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, Dict, List, Optional

from config import MAX_LEVEL


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _from_json(cls, data: Dict[str, Any], **overrides):
    """Build a dataclass from a camelCase JSON object, ignoring unknown keys."""
    kwargs = {}
    for f in fields(cls):
        if f.name in overrides:
            kwargs[f.name] = overrides[f.name]
            continue
        key = _camel(f.name)
        if key in data:
            kwargs[f.name] = data[key]
    return cls(**kwargs)


# Stats that enchantments and modifiers scale per level bucket
INCREMENT_STATS = (
    "power", "defense", "agility", "attack_speed", "attack_size",
    "intensity", "regeneration", "piercing", "resistance",
)

# Stats read from a stats_per_level row
LEVEL_STATS = (
    "power", "agility", "defense", "attack_speed", "attack_size", "intensity",
    "warding", "drawback", "regeneration", "piercing", "resistance",
)

# Flat stats carried by an item itself
ITEM_STATS = (
    "power", "defense", "agility", "attack_speed", "attack_size", "intensity",
    "regeneration", "piercing", "resistance", "insanity", "warding", "drawback",
)

# Flat stats a gem contributes
GEM_STATS = (
    "power", "defense", "agility", "attack_speed", "attack_size", "intensity",
    "regeneration", "piercing", "resistance", "drawback",
)


@dataclass
class StatsPerLevel:
    level: int
    power: Optional[int] = None
    agility: Optional[int] = None
    defense: Optional[int] = None
    attack_speed: Optional[int] = None
    attack_size: Optional[int] = None
    intensity: Optional[int] = None
    warding: Optional[int] = None
    drawback: Optional[int] = None
    regeneration: Optional[int] = None
    piercing: Optional[int] = None
    resistance: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatsPerLevel":
        return _from_json(cls, data)


@dataclass
class Item:
    """A catalog entry: accessory, chestplate, boots, enchant, modifier or gem."""
    id: str
    name: str
    legend: str = ""
    main_type: str = ""
    rarity: str = ""
    image_id: str = ""
    deleted: bool = False
    sub_type: Optional[str] = None
    gem_no: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None
    stat_type: Optional[str] = None
    stats_per_level: Optional[List[StatsPerLevel]] = None
    valid_modifiers: Optional[List[str]] = None

    # Increment stats
    power_increment: Optional[float] = None
    defense_increment: Optional[float] = None
    agility_increment: Optional[float] = None
    attack_speed_increment: Optional[float] = None
    attack_size_increment: Optional[float] = None
    intensity_increment: Optional[float] = None
    regeneration_increment: Optional[float] = None
    piercing_increment: Optional[float] = None
    resistance_increment: Optional[float] = None

    # Base stats
    insanity: Optional[int] = None
    warding: Optional[int] = None
    agility: Optional[int] = None
    attack_size: Optional[int] = None
    defense: Optional[int] = None
    drawback: Optional[int] = None
    power: Optional[int] = None
    attack_speed: Optional[int] = None
    intensity: Optional[int] = None
    piercing: Optional[int] = None
    regeneration: Optional[int] = None
    resistance: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        table = data.get("statsPerLevel")
        if table is not None:
            table = [StatsPerLevel.from_dict(row) for row in table]
        return _from_json(cls, data, stats_per_level=table)

    @classmethod
    def unknown(cls, item_id: str) -> "Item":
        """Zero-valued stand-in returned for identifiers missing from the catalog."""
        return cls(id=item_id, name="Unknown")

    def increment(self, stat: str) -> float:
        return getattr(self, f"{stat}_increment") or 0.0


@dataclass
class Weapon:
    name: str
    legend: str = ""
    rarity: str = ""
    image_id: str = ""
    damage: float = 0.0
    speed: float = 0.0
    size: float = 0.0
    special_effect: str = ""
    efficiency: float = 0.0
    durability: Optional[int] = None
    blocking_power: Optional[float] = None
    defense: Optional[int] = None
    weight: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Weapon":
        return _from_json(cls, data)


@dataclass
class MagicMultipliers:
    damage: float = 0.0
    speed: float = 0.0
    size: float = 0.0


@dataclass
class ImbuedSize:
    conjurer: float = 0.0
    warlock: float = 0.0


@dataclass
class ImbuedMultipliers:
    damage: float = 0.0
    speed: float = 0.0
    size: ImbuedSize = field(default_factory=ImbuedSize)


@dataclass
class MagicClash:
    over: List[str] = field(default_factory=list)
    neutral: List[str] = field(default_factory=list)
    under: List[str] = field(default_factory=list)


@dataclass
class MagicData:
    name: str
    legend: str = ""
    image_id: str = ""
    special_effect: str = ""
    unimbued: MagicMultipliers = field(default_factory=MagicMultipliers)
    imbued: ImbuedMultipliers = field(default_factory=ImbuedMultipliers)
    clash: MagicClash = field(default_factory=MagicClash)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MagicData":
        imbued = data.get("imbued") or {}
        return _from_json(
            cls, data,
            unimbued=_from_json(MagicMultipliers, data.get("unimbued") or {}),
            imbued=_from_json(
                ImbuedMultipliers, imbued,
                size=_from_json(ImbuedSize, imbued.get("size") or {}),
            ),
            clash=_from_json(MagicClash, data.get("clash") or {}),
        )


class Magic(IntEnum):
    ACID = 0
    ASH = 1
    CRYSTAL = 2
    EARTH = 3
    EXPLOSION = 4
    FIRE = 5
    GLASS = 6
    ICE = 7
    LIGHT = 8
    LIGHTNING = 9
    MAGMA = 10
    METAL = 11
    PLASMA = 12
    POISON = 13
    SAND = 14
    SHADOW = 15
    SNOW = 16
    WATER = 17
    WIND = 18
    WOOD = 19

    @property
    def display_name(self) -> str:
        return self.name.title()


class FightingStyle(IntEnum):
    BASIC_COMBAT = 0
    BOXING = 1
    IRON_LEG = 2
    CANNON_FIST = 3
    SAILOR_STYLE = 4
    THERMO_FIST = 5

    @property
    def display_name(self) -> str:
        return "".join(part.title() for part in self.name.split("_"))


@dataclass
class Slot:
    """One equipped item with its enchant, modifier, gems and level."""
    item: str
    enchant: str
    modifier: str
    gems: List[str] = field(default_factory=list)
    level: int = MAX_LEVEL


@dataclass
class Player:
    """A decoded GearBuilder build."""
    level: int
    vitality: int
    magic: int
    strength: int
    weapon: int
    magics: List[Magic]
    fighting_styles: List[FightingStyle]
    accessories: List[Slot]
    chestplate: Slot
    boots: Slot

    @property
    def slots(self) -> List[Slot]:
        return [*self.accessories, self.chestplate, self.boots]


@dataclass
class TotalStats:
    power: int = 0
    defense: int = 0
    agility: int = 0
    attack_speed: int = 0
    attack_size: int = 0
    intensity: int = 0
    regeneration: int = 0
    piercing: int = 0
    resistance: int = 0
    insanity: int = 0
    warding: int = 0
    drawback: int = 0

    def add(self, other: "TotalStats") -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) == 0 for f in fields(self))


@dataclass
class WikiSearchResult:
    title: str
    description: str
    url: str
