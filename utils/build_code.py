"""
GearBuilder build code decoder.

A build code is the URL fragment exported by the GearBuilder tool: eight
``|``-separated sections, each a ``,``-separated list of fields::

    level,vitality,magic,strength,weapon | magics | fighting styles |
    accessory | accessory | accessory | chestplate | boots

Each slot section is ``item,enchant,modifier[,gem...],level`` with 0-3 gems.
Decoding is all-or-nothing: any malformed field raises a BuildCodeError and
no partial Player is produced.
"""

import re
from typing import List, Optional

from config import BUILD_URL_PREFIXES, BUILD_URL_SEPARATOR
from models import FightingStyle, Magic, Player, Slot

SECTION_COUNT = 8
STATS_FIELD_COUNT = 5
MIN_SLOT_FIELDS = 4
MAX_SLOT_FIELDS = 7

SECTION_NAMES = (
    "stats",
    "magics",
    "fighting styles",
    "accessory 1",
    "accessory 2",
    "accessory 3",
    "chestplate",
    "boots",
)

STAT_FIELD_NAMES = ("player level", "vitality points", "magic points", "strength points", "weapon points")

# ASCII digits only, within the signed 32-bit range GearBuilder writes
_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1


class BuildCodeError(ValueError):
    """Base class for malformed build codes."""

    def __init__(self, message: str, section: Optional[int] = None, raw: str = ""):
        super().__init__(message)
        self.section = section
        self.raw = raw

    @property
    def section_name(self) -> Optional[str]:
        if self.section is None or self.section >= len(SECTION_NAMES):
            return None
        return SECTION_NAMES[self.section]


class SectionCountError(BuildCodeError):
    """Fewer than eight ``|`` sections."""


class StatsSectionError(BuildCodeError):
    """Stats section has fewer than five fields."""


class IntegerFieldError(BuildCodeError):
    """A numeric field could not be parsed."""


class EnumIndexError(BuildCodeError):
    """A magic or fighting style index is outside its enumeration."""


class SlotFieldCountError(BuildCodeError):
    """A slot section has a field count outside [4, 7]."""


def _parse_int(raw: str, section: int, what: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise IntegerFieldError(f"Failed to parse {what}: {raw!r}", section, raw)
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise IntegerFieldError(f"Failed to parse {what}: {raw!r} is out of range", section, raw)
    return value


def _parse_indices(fields: List[str], section: int, enum_cls, what: str) -> list:
    values = []
    # A lone empty field means nothing was selected
    if not fields or fields[0] == "":
        return values
    for raw in fields:
        if raw == "":
            continue
        index = _parse_int(raw, section, f"{what} index")
        try:
            values.append(enum_cls(index))
        except ValueError:
            raise EnumIndexError(
                f"Invalid {what} index: {index} (expected 0-{len(enum_cls) - 1})", section, raw
            ) from None
    return values


def parse_slot(fields: List[str], section: int) -> Slot:
    """Decode a single ``item,enchant,modifier[,gem...],level`` section."""
    if not MIN_SLOT_FIELDS <= len(fields) <= MAX_SLOT_FIELDS:
        raise SlotFieldCountError(
            f"Invalid {SECTION_NAMES[section]} slot: expected {MIN_SLOT_FIELDS}-{MAX_SLOT_FIELDS} "
            f"values, got {len(fields)}",
            section,
            ",".join(fields),
        )

    level = _parse_int(fields[-1], section, f"{SECTION_NAMES[section]} item level")
    return Slot(
        item=fields[0],
        enchant=fields[1],
        modifier=fields[2],
        gems=list(fields[3:-1]),
        level=level,
    )


def decode(code: str) -> Player:
    """Decode a GearBuilder build code into a Player.

    Raises:
        BuildCodeError: one of its subclasses, naming the offending section.
    """
    sections = [section.split(",") for section in code.split("|")]

    if len(sections) < SECTION_COUNT:
        raise SectionCountError(
            f"Invalid build code format: expected at least {SECTION_COUNT} sections, got {len(sections)}",
            raw=code,
        )

    stats = sections[0]
    if len(stats) < STATS_FIELD_COUNT:
        raise StatsSectionError(
            f"Invalid stats section: expected {STATS_FIELD_COUNT} values, got {len(stats)}",
            0,
            ",".join(stats),
        )

    level, vitality, magic, strength, weapon = (
        _parse_int(raw, 0, name) for raw, name in zip(stats, STAT_FIELD_NAMES)
    )

    magics = _parse_indices(sections[1], 1, Magic, "magic")
    fighting_styles = _parse_indices(sections[2], 2, FightingStyle, "fighting style")

    accessories = [parse_slot(sections[i], i) for i in (3, 4, 5)]
    chestplate = parse_slot(sections[6], 6)
    boots = parse_slot(sections[7], 7)

    return Player(
        level=level,
        vitality=vitality,
        magic=magic,
        strength=strength,
        weapon=weapon,
        magics=magics,
        fighting_styles=fighting_styles,
        accessories=accessories,
        chestplate=chestplate,
        boots=boots,
    )


def is_build_url(url: str) -> bool:
    return url.startswith(BUILD_URL_PREFIXES)


def extract_build_code(url: str) -> str:
    """Return the fragment after ``/gearBuilder#`` (may be empty)."""
    _, _, fragment = url.partition(BUILD_URL_SEPARATOR)
    return fragment
