"""Modifiers built into every weapon and those from armor mods and barricades."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from ..enemies import EnemyType
from ..enums import AmmoType, DamageType, StatHashes, WeaponType
from .modifiers import (
    DamageModifierResponse,
    ExplosivePercentResponse,
    FiringModifierResponse,
    FlinchModifierResponse,
    HandlingModifierResponse,
    InventoryModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    RangeModifierResponse,
    ReloadModifierResponse,
    clamp,
)

_MODIFIERS: List[Tuple[ModifierKind, str, Callable]] = []


def _modifier(kind: ModifierKind, perk: str):
    def decorate(func):
        _MODIFIERS.append((kind, perk, func))
        return func

    return decorate


_MINOR_SCALES = {
    WeaponType.SIDEARM: 1.2,
    WeaponType.BOW: 1.2,
    WeaponType.TRACERIFLE: 1.44,
    WeaponType.SCOUTRIFLE: 1.38,
    WeaponType.PULSERIFLE: 1.15,
    WeaponType.AUTORIFLE: 1.265,
    WeaponType.SUBMACHINEGUN: 1.155,
    WeaponType.HANDCANNON: 1.05,
    WeaponType.SNIPER: 1.6,
    WeaponType.FUSIONRIFLE: 1.3,
}

_ELITE_SCALES = {
    WeaponType.TRACERIFLE: 1.2,
    WeaponType.SNIPER: 1.75,
    WeaponType.SCOUTRIFLE: 1.3,
    WeaponType.AUTORIFLE: 1.1,
    WeaponType.FUSIONRIFLE: 1.3,
}

_MINIBOSS_SCALES = {
    WeaponType.SNIPER: 1.35,
    WeaponType.FUSIONRIFLE: 1.3,
}

_CHAMPION_SCALES = {
    WeaponType.SNIPER: 1.25,
    WeaponType.FUSIONRIFLE: 1.3,
}

_COMBATANT_SCALES = {
    EnemyType.MINOR: _MINOR_SCALES,
    EnemyType.ELITE: _ELITE_SCALES,
    EnemyType.MINIBOSS: _MINIBOSS_SCALES,
    EnemyType.CHAMPION: _CHAMPION_SCALES,
}

_CHARGE_DELAY_PER_STAT = {
    WeaponType.FUSIONRIFLE: 0.0040,
    WeaponType.LINEARFUSIONRIFLE: 0.0033,
}

# Lightweights, Wishender, Ticcus, Verglas
_BOW_LIGHTWEIGHT = frozenset({905, 1470121888, 3239299468, 2636679416})
# Precisions, Lemon, Trinity, Hierarchy
_BOW_PRECISION = frozenset({906, 2186532310, 1573888036, 2226793914})
_LEVIATHANS_BREATH = 1699724249


def _charge_time_delta(inp: ModifierResponseInput) -> float:
    """Charge time stat gained from perks; raise KeyError when the weapon has none."""
    charge_time = inp.calc_data.stats[int(StatHashes.CHARGE_TIME)]
    return float(charge_time.perk_val() - charge_time.base_value)


@_modifier(ModifierKind.DAMAGE, "BuiltIn")
def _built_in_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    data = inp.calc_data
    crit_scale = 1.0
    dmg_scale = 1.0
    if data.weapon_type == WeaponType.LINEARFUSIONRIFLE and not inp.pvp:
        crit_scale *= 1.15
    if data.damage_type == DamageType.KINETIC and not inp.pvp and data.enemy_type != EnemyType.BOSS:
        if data.ammo_type == AmmoType.PRIMARY:
            dmg_scale *= 1.1
        elif data.ammo_type == AmmoType.SPECIAL:
            dmg_scale *= 1.15

    if (
        data.ammo_type == AmmoType.PRIMARY
        and data.enemy_type == EnemyType.MINOR
        and not inp.pvp
        and data.intrinsic_hash > 1000
    ):
        dmg_scale *= 1.3

    if not inp.pvp:
        scales = _COMBATANT_SCALES.get(data.enemy_type)
        if scales is not None:
            dmg_scale *= scales.get(data.weapon_type, 1.0)

    if data.weapon_type == WeaponType.LINEARFUSIONRIFLE and data.intrinsic_hash < 1000:
        stat = _charge_time_delta(inp)
        firing = data.curr_firing_data
        total_damage = firing.damage * float(firing.burst_size)
        dmg_scale *= 1.0 - (0.6 * stat) / total_damage

    return DamageModifierResponse(
        impact_dmg_scale=dmg_scale,
        explosive_dmg_scale=dmg_scale,
        crit_scale=crit_scale,
    )


@_modifier(ModifierKind.FIRING, "BuiltIn")
def _built_in_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    data = inp.calc_data
    delay_add = 0.0

    if data.weapon_type in _CHARGE_DELAY_PER_STAT and data.intrinsic_hash < 1000:
        delay_add -= _charge_time_delta(inp) * _CHARGE_DELAY_PER_STAT[data.weapon_type]

    if data.weapon_type == WeaponType.BOW:
        draw = float(data.stats[int(StatHashes.DRAW_TIME)].perk_val())
        if data.intrinsic_hash in _BOW_LIGHTWEIGHT:
            delay_add += (draw * -4.0 + 900.0) / 1100.0
        elif data.intrinsic_hash in _BOW_PRECISION:
            delay_add += (draw * -3.6 + 900.0) / 1100.0
        elif data.intrinsic_hash == _LEVIATHANS_BREATH:
            delay_add += (draw * -5.0 + 1428.0) / 1100.0

    return FiringModifierResponse(burst_delay_add=delay_add)


@_modifier(ModifierKind.EXPLOSIVE_PERCENT, "BuiltIn")
def _built_in_explosive(inp: ModifierResponseInput) -> ExplosivePercentResponse:
    data = inp.calc_data
    if data.weapon_type == WeaponType.GRENADELAUNCHER:
        stat = data.stats.get(int(StatHashes.BLAST_RADIUS))
        blast_radius = float(stat.perk_val()) if stat is not None else 0.0
        if data.ammo_type == AmmoType.SPECIAL:
            return ExplosivePercentResponse(
                percent=0.5 + 0.003 * blast_radius, delyed=0.0, retain_base_total=True
            )
        if data.ammo_type == AmmoType.HEAVY:
            return ExplosivePercentResponse(
                percent=0.7 + 0.00175 * blast_radius, delyed=0.0, retain_base_total=True
            )
    if data.weapon_type == WeaponType.SIDEARM and data.intrinsic_hash == 914:
        percent = 0.536 if inp.pvp else 0.822
        return ExplosivePercentResponse(percent=percent, delyed=0.0, retain_base_total=True)
    if data.weapon_type == WeaponType.ROCKET and data.intrinsic_hash < 1000:
        return ExplosivePercentResponse(percent=0.778, delyed=0.0, retain_base_total=True)
    return ExplosivePercentResponse(percent=0.0, delyed=0.0, retain_base_total=True)


@_modifier(ModifierKind.HANDLING, "DexterityMod")
def _dexterity_mod(inp: ModifierResponseInput) -> HandlingModifierResponse:
    swap_scale = 0.85 - clamp(inp.value, 1, 3) * 0.05 if inp.value > 0 else 1.0
    return HandlingModifierResponse(stow_scale=swap_scale, draw_scale=swap_scale)


_TARGETING_ADS = {0: 1.0, 1: 0.85, 2: 0.75}
_TARGETING_AIM_ASSIST = {1: 5, 2: 8}


@_modifier(ModifierKind.HANDLING, "TargetingMod")
def _targeting_mod_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    return HandlingModifierResponse(ads_scale=_TARGETING_ADS.get(inp.value, 0.7))


@_modifier(ModifierKind.STAT_BUMP, "TargetingMod")
def _targeting_mod_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.value == 0:
        return {}
    return {int(StatHashes.AIM_ASSIST): _TARGETING_AIM_ASSIST.get(inp.value, 10)}


_RESERVE_BUFF = {0: 0, 1: 20, 2: 40}


def _reserve_buff(value: int) -> int:
    return _RESERVE_BUFF.get(value, 50)


@_modifier(ModifierKind.INVENTORY, "ReserveMod")
def _reserve_mod_inventory(inp: ModifierResponseInput) -> InventoryModifierResponse:
    return InventoryModifierResponse(inv_stat_add=_reserve_buff(inp.value), inv_scale=1.0)


@_modifier(ModifierKind.STAT_BUMP, "ReserveMod")
def _reserve_mod_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {int(StatHashes.INVENTORY_SIZE): _reserve_buff(inp.value)}


_LOADER_BUFF = {0: 0, 1: 10, 2: 15}


def _loader_buff(value: int) -> int:
    return _LOADER_BUFF.get(value, 18)


@_modifier(ModifierKind.RELOAD, "LoaderMod")
def _loader_mod_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    return ReloadModifierResponse(
        reload_stat_add=_loader_buff(inp.value),
        reload_time_scale=0.85 if inp.value > 0 else 1.0,
    )


@_modifier(ModifierKind.STAT_BUMP, "LoaderMod")
def _loader_mod_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {int(StatHashes.RELOAD): _loader_buff(inp.value)}


@_modifier(ModifierKind.FLINCH, "UnflinchingMod")
def _unflinching_mod(inp: ModifierResponseInput) -> FlinchModifierResponse:
    if inp.value > 2:
        return FlinchModifierResponse(flinch_scale=0.6)
    if inp.value == 2:
        return FlinchModifierResponse(flinch_scale=0.7)
    if inp.value == 1:
        return FlinchModifierResponse(flinch_scale=0.75)
    return FlinchModifierResponse()


@_modifier(ModifierKind.STAT_BUMP, "RallyBarricade")
def _rally_barricade_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {int(StatHashes.STABILITY): 30, int(StatHashes.RELOAD): 100}


@_modifier(ModifierKind.FLINCH, "RallyBarricade")
def _rally_barricade_flinch(inp: ModifierResponseInput) -> FlinchModifierResponse:
    return FlinchModifierResponse(flinch_scale=0.5)


@_modifier(ModifierKind.RELOAD, "RallyBarricade")
def _rally_barricade_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    return ReloadModifierResponse(reload_stat_add=100, reload_time_scale=0.9)


@_modifier(ModifierKind.RANGE, "RallyBarricade")
def _rally_barricade_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    return RangeModifierResponse(range_all_scale=1.1)


_ADEPT_CHARGE_DELAY = {
    WeaponType.FUSIONRIFLE: -0.040,
    WeaponType.LINEARFUSIONRIFLE: -0.033,
}


@_modifier(ModifierKind.FIRING, "AdeptChargeTime")
def _adept_charge_time(inp: ModifierResponseInput) -> FiringModifierResponse:
    return FiringModifierResponse(
        burst_delay_add=_ADEPT_CHARGE_DELAY.get(inp.calc_data.weapon_type, 0.0)
    )


_IN_FLIGHT_BUFF = {0: 0, 1: 15, 2: 25}


@_modifier(ModifierKind.STAT_BUMP, "InFlightCompensatorMod")
def _in_flight_compensator(inp: ModifierResponseInput) -> Dict[int, int]:
    return {int(StatHashes.AIRBORNE): _IN_FLIGHT_BUFF.get(inp.value, 30)}


def register(registry: ModifierRegistry) -> None:
    """Add the built-in, mod and barricade modifiers to the registry."""
    for kind, perk, func in _MODIFIERS:
        registry.register(kind, perk, func)