"""Modifiers for buffs and debuffs from abilities, armor and other sources."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from ..enums import DamageType, StatHashes, WeaponType
from .modifiers import (
    DamageModifierResponse,
    HandlingModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    ReloadModifierResponse,
    clamp,
)

_MODIFIERS: List[Tuple[ModifierKind, str, Callable]] = []


def _modifier(kind: ModifierKind, perk: str):
    def decorate(func):
        _MODIFIERS.append((kind, perk, func))
        return func

    return decorate


def _stacking_buff(cache: Dict[str, float], key: str, desired: float) -> float:
    """Return the extra factor needed to raise the cached buff under key to desired."""
    current = cache.get(key, 1.0)
    if current >= desired:
        return 1.0
    cache[key] = desired
    return desired / current


def _emp_buff(cache: Dict[str, float], desired: float) -> float:
    return _stacking_buff(cache, "empowering", desired)


def _gbl_debuff(cache: Dict[str, float], desired: float) -> float:
    return _stacking_buff(cache, "debuff", desired)


_SURGE_PVP = {1: 1.03, 2: 1.045, 3: 1.055}
_SURGE_PVE = {1: 1.10, 2: 1.17, 3: 1.22}


def _surge_buff(cache: Dict[str, float], value: int, pvp: bool) -> float:
    if value == 0:
        desired = 1.0
    elif pvp:
        desired = _SURGE_PVP.get(value, 1.060)
    else:
        desired = _SURGE_PVE.get(value, 1.25)
    return _stacking_buff(cache, "surge", desired)


def _both_scales(buff: float) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=buff, explosive_dmg_scale=buff)


# Buffs


@_modifier(ModifierKind.DAMAGE, "WellOfRadiance")
def _well_of_radiance(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, 1.25))


@_modifier(ModifierKind.DAMAGE, "NobleRounds")
def _noble_rounds(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    desired = 1.15 if inp.pvp else 1.35
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, desired))


@_modifier(ModifierKind.DAMAGE, "Radiant")
def _radiant(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.1 if inp.pvp else 1.2
    buff = _emp_buff(inp.cached_data, desired)
    inp.cached_data["radiant"] = 1.0
    return DamageModifierResponse.basic_dmg_buff(buff)


@_modifier(ModifierKind.DAMAGE, "PathOfTheBurningSteps")
def _path_of_the_burning_steps(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0 or inp.calc_data.damage_type != DamageType.SOLAR:
        return DamageModifierResponse()
    return DamageModifierResponse.surge_buff(_surge_buff(inp.cached_data, inp.value, inp.pvp))


@_modifier(ModifierKind.DAMAGE, "BannerShield")
def _banner_shield(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.35 if inp.pvp else 1.4
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, desired))


@_modifier(ModifierKind.DAMAGE, "EmpRift")
def _emp_rift(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.15 if inp.pvp else 1.2
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, desired))


@_modifier(ModifierKind.DAMAGE, "WardOfDawn")
def _ward_of_dawn(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, 1.25))


@_modifier(ModifierKind.DAMAGE, "Gyrfalcon")
def _gyrfalcon(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.0 if inp.pvp else 1.35
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, desired))


@_modifier(ModifierKind.DAMAGE, "AeonInsight")
def _aeon_insight(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    desired = 1.0 if inp.pvp else 1.35
    return _both_scales(_emp_buff(inp.cached_data, desired))


_UMBRAL_PVE = (1.2, 1.25, 1.35, 1.4)


@_modifier(ModifierKind.DAMAGE, "UmbralSharpening")
def _umbral_sharpening(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.0 if inp.pvp else _UMBRAL_PVE[clamp(inp.value, 0, 3)]
    return DamageModifierResponse.basic_dmg_buff(_emp_buff(inp.cached_data, desired))


@_modifier(ModifierKind.DAMAGE, "WormByproduct")
def _worm_byproduct(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(1.15)


# Debuffs


@_modifier(ModifierKind.DAMAGE, "Weaken")
def _weaken(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.075 if inp.pvp else 1.15
    return DamageModifierResponse.basic_dmg_buff(_gbl_debuff(inp.cached_data, desired))


def _heavy_debuff(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.5 if inp.pvp else 1.3
    return DamageModifierResponse.basic_dmg_buff(_gbl_debuff(inp.cached_data, desired))


for _perk in ("TractorCannon", "MoebiusQuiver", "DeadFall"):
    _MODIFIERS.append((ModifierKind.DAMAGE, _perk, _heavy_debuff))


@_modifier(ModifierKind.DAMAGE, "Felwinters")
def _felwinters(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return DamageModifierResponse.basic_dmg_buff(_gbl_debuff(inp.cached_data, 1.3))


_SCANNER_PVE = (1.08, 1.137, 1.173, 1.193, 1.2)


@_modifier(ModifierKind.DAMAGE, "EnhancedScannerAugment")
def _enhanced_scanner_augment(inp: ModifierResponseInput) -> DamageModifierResponse:
    desired = 1.0 if inp.pvp else _SCANNER_PVE[clamp(inp.value, 0, 4)]
    return DamageModifierResponse.basic_dmg_buff(_gbl_debuff(inp.cached_data, desired))


def _value_surge(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse.surge_buff(_surge_buff(inp.cached_data, inp.value, inp.pvp))


for _perk in ("SurgeMod", "EternalWarrior"):
    _MODIFIERS.append((ModifierKind.DAMAGE, _perk, _value_surge))


@_modifier(ModifierKind.STAT_BUMP, "LucentBlades")
def _lucent_blades(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.calc_data.weapon_type != WeaponType.SWORD or inp.value == 0:
        return {}
    bump = {1: 30, 2: 50}.get(inp.value, 60)
    return {int(StatHashes.CHARGE_RATE): bump}


@_modifier(ModifierKind.DAMAGE, "MantleOfBattleHarmony")
def _mantle_of_battle_harmony(inp: ModifierResponseInput) -> DamageModifierResponse:
    buff = _surge_buff(inp.cached_data, 4, inp.pvp) if inp.value > 0 else 1.0
    return DamageModifierResponse.surge_buff(buff)


@_modifier(ModifierKind.DAMAGE, "MaskOfBakris")
def _mask_of_bakris(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value > 0 and inp.calc_data.damage_type in (DamageType.STASIS, DamageType.ARC):
        buff = _surge_buff(inp.cached_data, 4, inp.pvp)
    else:
        buff = 1.0
    return DamageModifierResponse.surge_buff(buff)


@_modifier(ModifierKind.DAMAGE, "SanguineAlchemy")
def _sanguine_alchemy(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0 or inp.calc_data.damage_type == DamageType.KINETIC:
        return DamageModifierResponse()
    return DamageModifierResponse.surge_buff(_surge_buff(inp.cached_data, 4, inp.pvp))


@_modifier(ModifierKind.DAMAGE, "Foetracers")
def _foetracers(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return DamageModifierResponse.surge_buff(_surge_buff(inp.cached_data, 4, inp.pvp))


@_modifier(ModifierKind.DAMAGE, "GlacialGuard")
def _glacial_guard(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0 or inp.calc_data.damage_type != DamageType.STASIS:
        return DamageModifierResponse()
    return DamageModifierResponse.surge_buff(_surge_buff(inp.cached_data, 4, inp.pvp))


@_modifier(ModifierKind.DAMAGE, "NoBackupPlans")
def _no_backup_plans(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.calc_data.weapon_type != WeaponType.SHOTGUN or inp.value == 0:
        return DamageModifierResponse()
    desired = 1.10 if inp.pvp else 1.35
    return _both_scales(_emp_buff(inp.cached_data, desired))


@_modifier(ModifierKind.RELOAD, "AeonForce")
def _aeon_force_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    if inp.value == 0:
        return ReloadModifierResponse()
    return ReloadModifierResponse(reload_stat_add=30, reload_time_scale=0.85)


@_modifier(ModifierKind.STAT_BUMP, "AeonForce")
def _aeon_force_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.value == 0:
        return {}
    return {int(StatHashes.RELOAD): 30, int(StatHashes.HANDLING): 40}


@_modifier(ModifierKind.HANDLING, "AeonForce")
def _aeon_force_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if inp.value == 0:
        return HandlingModifierResponse()
    return HandlingModifierResponse(stat_add=40)


@_modifier(ModifierKind.DAMAGE, "DoomFang")
def _doom_fang(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.calc_data.damage_type != DamageType.VOID or inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(_surge_buff(inp.cached_data, inp.value, inp.pvp))


_BURNING_FISTS = {1: (1.0, 1.0), 2: (1.2, 1.0), 3: (1.25, 1.2), 4: (1.3, 1.25)}


@_modifier(ModifierKind.DAMAGE, "BurningFists")
def _burning_fists(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    pve, pvp = _BURNING_FISTS.get(inp.value, (1.35, 1.25))
    return _both_scales(_emp_buff(inp.cached_data, pvp if inp.pvp else pve))


def register(registry: ModifierRegistry) -> None:
    """Add every buff and debuff modifier to the registry."""
    for kind, perk, func in _MODIFIERS:
        registry.register(kind, perk, func)