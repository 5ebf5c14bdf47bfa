"""
Damage calculator formulas and modal input validation.
"""

import math
import re
from dataclasses import dataclass

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass
class DamageInputs:
    level: int = 0
    power: int = 0
    vitality: int = 0
    base_affinity: float = 0.0
    power_affinity: float = 0.0
    damage_affinity: float = 0.0
    customization: float = 0.0
    synergy: float = 0.0
    shape: float = 0.0
    charging: float = 0.0


@dataclass
class DamageResult:
    base_ability_damage: int
    power_ability_damage: int
    pre_multiplier_damage: int
    damage: float
    raw_simple_damage: float
    final_damage: float


def calculate_damage(inputs: DamageInputs) -> DamageResult:
    """Attacker damage before and after the additional multipliers.

    Defender stats are collected by the calculator but do not take part in
    these formulas.
    """
    base = int(inputs.base_affinity * (19 + inputs.level))
    power_part = int(inputs.power_affinity * inputs.power)
    pre = base + power_part

    base_hp = 93 + 7 * inputs.level
    max_hp = base_hp + 4 * inputs.vitality
    hp_scale = math.sqrt(base_hp / max_hp)

    damage = hp_scale * inputs.damage_affinity * pre
    raw_simple = hp_scale * inputs.damage_affinity * (
        (19 + inputs.level) * inputs.base_affinity + inputs.power * inputs.power_affinity
    )
    multiplier = inputs.customization * inputs.synergy * inputs.shape * inputs.charging

    return DamageResult(
        base_ability_damage=base,
        power_ability_damage=power_part,
        pre_multiplier_damage=pre,
        damage=damage,
        raw_simple_damage=raw_simple,
        final_damage=damage * multiplier,
    )


def validate_int_field(value: str, field_name: str) -> int:
    """Parse a non-negative integer from a modal text input.

    Raises:
        ValueError: with a message naming the field
    """
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"{field_name} must be a valid integer")
    number = int(value)
    if number < 0:
        raise ValueError(f"{field_name} must be non-negative")
    return number


def validate_float_field(value: str, field_name: str) -> float:
    try:
        number = float(value.strip())
    except ValueError:
        raise ValueError(f"{field_name} must be a valid number") from None
    if not math.isfinite(number):
        raise ValueError(f"{field_name} must be a valid number")
    if number < 0:
        raise ValueError(f"{field_name} must be non-negative")
    return number
