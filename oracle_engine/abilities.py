"""Ability descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class AbilityType(Enum):
    """Kind of ability; UNKNOWN is the default."""

    GRENADE = auto()
    MELEE = auto()
    CLASS = auto()
    SUPER = auto()
    WEAPON = auto()
    ARMOR = auto()
    MISC = auto()
    UNKNOWN = auto()


@dataclass
class AbilityDamageProfile:
    """Damage dealt by an ability; a crit_mult of 1.0 means no crit."""

    impact: float = 0.0
    secondary: float = 0.0
    sec_hit_count: int = 0
    lin_hit_scalar: float = 0.0
    crit_mult: float = 0.0


@dataclass
class Ability:
    """A named ability with its damage profile."""

    name: str = ""
    hash: int = 0
    ability_type: AbilityType = AbilityType.UNKNOWN
    damage_profile: AbilityDamageProfile = field(default_factory=AbilityDamageProfile)
    is_initialized: bool = False