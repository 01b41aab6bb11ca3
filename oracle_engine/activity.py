"""Activity power levels, difficulty tables and the PvE damage multipliers they give."""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Tuple

from .log import LogLevel, extern_log

WEAPON_DELTA_EXPONENT = 0.00672
_EXPANSION_BASE = 1600

# Weapon delta curve, accurate inside +/-50 power.
_WEP_LINEAR = 0.00683343
_WEP_QUADRATIC = 0.5 * 0.0000441279650846838
_WEP_EXACT_RANGE = 50
_LOWEST_DELTA = -100


class PlayerClass(IntEnum):
    """Guardian class; UNKNOWN is the default."""

    UNKNOWN = 0
    TITAN = 1
    HUNTER = 2
    WARLOCK = 3


@dataclass
class Player:
    """The player's power level and class."""

    power: int = 0
    class_: PlayerClass = PlayerClass.UNKNOWN


@dataclass(frozen=True)
class DifficultyData:
    """A difficulty's name, its power cap and its gear-delta table."""

    name: str
    cap: int
    table: Tuple[Tuple[float, float], ...]

    def multiplier_at(self, x: float) -> float:
        """Interpolate the table at x; raise ValueError outside its domain."""
        xs = [px for px, _ in self.table]
        if not xs or not xs[0] <= x <= xs[-1]:
            raise ValueError(f"{x!r} is outside the table domain")
        index = bisect_left(xs, x)
        right_x, right_y = self.table[index]
        if right_x == x:
            return right_y
        left_x, left_y = self.table[index - 1]
        return left_y + (right_y - left_y) * (x - left_x) / (right_x - left_x)


# Power deltas at which every gear table is sampled.
_DELTAS = (-99.0, *(float(d) for d in range(-90, 1, 10)))


def _table(*multipliers: float) -> Tuple[Tuple[float, float], ...]:
    if len(multipliers) != len(_DELTAS):
        raise ValueError("a gear table needs one multiplier per delta")
    return tuple(zip(_DELTAS, multipliers))


_SHARED_LOW_END = (0.4018, 0.42, 0.44, 0.46, 0.475)

_NORMAL_TABLE = _table(*_SHARED_LOW_END, 0.5, 0.5405, 0.5915, 0.66, 0.78, 1.0)
_MASTER_TABLE = _table(*_SHARED_LOW_END, 0.49, 0.51, 0.535, 0.58, 0.68, 0.85)
_RAID_TABLE = _table(*_SHARED_LOW_END, 0.495, 0.5253, 0.5632, 0.62, 0.73, 0.925)


class DifficultyOptions(Enum):
    """Activity difficulty; NORMAL is the default."""

    NORMAL = 1
    RAID = 2
    MASTER = 3

    def get_difficulty_data(self) -> DifficultyData:
        """The name, cap and gear-delta table of this difficulty."""
        return _DIFFICULTY_DATA[self]

    @classmethod
    def from_value(cls, value: int) -> "DifficultyOptions":
        """Convert an integer; unknown values give NORMAL."""
        try:
            return cls(value)
        except ValueError:
            return cls.NORMAL


_DIFFICULTY_DATA = {
    DifficultyOptions.NORMAL: DifficultyData("Normal", 50, _NORMAL_TABLE),
    DifficultyOptions.RAID: DifficultyData("Raid & Dungeon", 20, _RAID_TABLE),
    DifficultyOptions.MASTER: DifficultyData("Master", 20, _MASTER_TABLE),
}


def _default_player() -> Player:
    return Player(power=_EXPANSION_BASE + 210)


@dataclass
class Activity:
    """An activity's difficulty, recommended power, cap and the player in it."""

    name: str = "Default"
    difficulty: DifficultyOptions = DifficultyOptions.NORMAL
    rpl: int = _EXPANSION_BASE
    cap: int = 100
    player: Player = field(default_factory=_default_player)

    @property
    def power_delta(self) -> int:
        """Player power minus recommended power."""
        return self.player.power - self.rpl

    def get_pl_delta(self) -> float:
        """Combined gear and weapon power-delta multiplier."""
        return get_gear_delta_mult(self) * get_wep_delta_mult(self)

    def get_rpl_mult(self) -> float:
        """Multiplier from the recommended power level."""
        return rpl_mult(float(self.rpl))


def rpl_mult(rpl: float) -> float:
    """Damage multiplier for a recommended power level."""
    return (1.0 + rpl / 30.0) * 0.75


def get_gear_delta_mult(activity: Activity) -> float:
    """Multiplier from the gap between player power and recommended power."""
    delta = activity.power_delta
    if delta <= _LOWEST_DELTA:
        return 0.0
    table = activity.difficulty.get_difficulty_data()
    result = table.multiplier_at(float(min(delta, 0)))
    extern_log(f"gear_delta_mult: {result}", LogLevel.DEBUG)
    return result


def get_wep_delta_mult(activity: Activity) -> float:
    """Multiplier from the weapon power delta, limited by the activity cap."""
    limit = min(activity.cap, activity.difficulty.get_difficulty_data().cap)
    if limit < _LOWEST_DELTA:
        raise ValueError(f"power cap {limit} is below the lowest delta")
    delta = min(max(activity.power_delta, _LOWEST_DELTA), limit)
    if delta <= _LOWEST_DELTA:
        return 0.0
    if abs(delta) <= _WEP_EXACT_RANGE:
        result = delta * _WEP_LINEAR + _WEP_QUADRATIC * float(delta) ** 2 + 1.0
    else:
        result = math.e ** (WEAPON_DELTA_EXPONENT * delta)
    extern_log(f"wep_delta: {result}", LogLevel.DEBUG)
    return result


def remove_pve_bonuses(damage: float, combatant_mult: float, activity: Activity) -> float:
    """Undo the recommended-power, gear-delta and combatant multipliers on a damage value."""
    scaling = get_gear_delta_mult(activity) * activity.get_rpl_mult() * combatant_mult
    return damage / scaling