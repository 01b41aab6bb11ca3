"""Game enumerations: ammo, weapon, stat, damage type and damage source."""

from __future__ import annotations

from enum import Enum, IntEnum, auto

Seconds = float
MetersPerSecond = float
StatBump = int
BungieHash = int


class AmmoType(IntEnum):
    """Ammunition slot of a weapon; unknown ids map to UNKNOWN."""

    UNKNOWN = 0
    PRIMARY = 1
    SPECIAL = 2
    HEAVY = 3

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class WeaponType(IntEnum):
    """Weapon archetype by item sub-type id; unknown ids map to UNKNOWN."""

    UNKNOWN = 0
    AUTORIFLE = 6
    SHOTGUN = 7
    MACHINEGUN = 8
    HANDCANNON = 9
    ROCKET = 10
    FUSIONRIFLE = 11
    SNIPER = 12
    PULSERIFLE = 13
    SCOUTRIFLE = 14
    SIDEARM = 17
    SWORD = 18
    LINEARFUSIONRIFLE = 22
    GRENADELAUNCHER = 23
    SUBMACHINEGUN = 24
    TRACERIFLE = 25
    BOW = 31
    GLAIVE = 33

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class StatHashes(IntEnum):
    """Stat definitions keyed by their manifest hash; unknown hashes map to UNKNOWN."""

    UNKNOWN = 0
    ACCURACY = 1591432999
    AIM_ASSIST = 1345609583
    AIRBORNE = 2714457168
    AMMO_CAPACITY = 925767036
    ATTACK = 1480404414
    BLAST_RADIUS = 3614673599
    CHARGE_RATE = 3022301683
    CHARGE_TIME = 2961396640
    DISCIPLINE = 1735777505
    DRAW_TIME = 447667954
    GUARD_EFFICIENCY = 2762071195
    GUARD_ENDURANCE = 3736848092
    GUARD_RESISTANCE = 209426660
    HANDLING = 943549884
    IMPACT = 4043523819
    INTELLECT = 144602215
    INVENTORY_SIZE = 1931675084
    MAGAZINE = 3871231066
    MOBILITY = 2996146975
    POWER = 1935470627
    RANGE = 1240592695
    RECOIL_DIR = 2715839340
    RECOVERY = 1943323491
    RELOAD = 4188031367
    RESILIENCE = 392767087
    RPM = 4284893193
    SHIELD_DURATION = 1842278586
    STABILITY = 155624089
    STRENGTH = 4244567218
    SWING_SPEED = 2837207746
    VELOCITY = 2523465841
    ZOOM = 3555269338

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    def is_weapon_stat(self) -> bool:
        """Whether the stat belongs to weapons rather than to characters."""
        return self in _WEAPON_STATS


_WEAPON_STATS = frozenset(
    {
        StatHashes.ACCURACY,
        StatHashes.AIM_ASSIST,
        StatHashes.AIRBORNE,
        StatHashes.AMMO_CAPACITY,
        StatHashes.ZOOM,
        StatHashes.RANGE,
        StatHashes.STABILITY,
        StatHashes.RELOAD,
        StatHashes.MAGAZINE,
        StatHashes.HANDLING,
        StatHashes.VELOCITY,
        StatHashes.BLAST_RADIUS,
        StatHashes.CHARGE_TIME,
        StatHashes.INVENTORY_SIZE,
        StatHashes.RECOIL_DIR,
        StatHashes.RPM,
        StatHashes.GUARD_EFFICIENCY,
        StatHashes.GUARD_ENDURANCE,
        StatHashes.GUARD_RESISTANCE,
        StatHashes.DRAW_TIME,
        StatHashes.SWING_SPEED,
        StatHashes.SHIELD_DURATION,
        StatHashes.IMPACT,
        StatHashes.CHARGE_RATE,
    }
)


class DamageType(Enum):
    """Element of a weapon, keyed by its damage-type hash."""

    ARC = 2303181850
    VOID = 3454344768
    SOLAR = 1847026933
    STASIS = 151347233
    KINETIC = 3373582085
    STRAND = 3949783978
    UNKNOWN = 0

    @classmethod
    def from_hash(cls, value: int) -> "DamageType":
        """Look up a damage type by hash, UNKNOWN when it is not known."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class DamageSource(Enum):
    """Where a piece of damage comes from."""

    SNIPER = auto()
    MELEE = auto()
    EXPLOSION = auto()
    ENVIRONMENTAL = auto()
    UNKNOWN = auto()