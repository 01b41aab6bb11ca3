"""Modifiers granted by exotic armor pieces."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from ..enums import AmmoType, DamageType, StatHashes, WeaponType
from .modifiers import (
    DamageModifierResponse,
    FlinchModifierResponse,
    HandlingModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    RangeModifierResponse,
    ReloadModifierResponse,
    clamp,
)

_MODIFIERS: List[Tuple[ModifierKind, str, Callable]] = []

_AIRBORNE = int(StatHashes.AIRBORNE)
_HANDLING = int(StatHashes.HANDLING)
_RELOAD = int(StatHashes.RELOAD)
_DRAW_TIME = int(StatHashes.DRAW_TIME)


def _modifier(kind: ModifierKind, perk: str):
    def decorate(func):
        _MODIFIERS.append((kind, perk, func))
        return func

    return decorate


def _both_scales(buff: float) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=buff, explosive_dmg_scale=buff)


def _flat_airborne(amount: int) -> Callable[[ModifierResponseInput], Dict[int, int]]:
    def stats(inp: ModifierResponseInput) -> Dict[int, int]:
        return {_AIRBORNE: amount}

    return stats


def _airborne_for_weapons(
    amount: int, weapon_types: frozenset
) -> Callable[[ModifierResponseInput], Dict[int, int]]:
    def stats(inp: ModifierResponseInput) -> Dict[int, int]:
        if inp.calc_data.weapon_type in weapon_types:
            return {_AIRBORNE: amount}
        return {}

    return stats


def _airborne_for_intrinsics(
    amount: int, intrinsics: frozenset
) -> Callable[[ModifierResponseInput], Dict[int, int]]:
    def stats(inp: ModifierResponseInput) -> Dict[int, int]:
        if inp.calc_data.intrinsic_hash in intrinsics:
            return {_AIRBORNE: amount}
        return {}

    return stats


@_modifier(ModifierKind.DAMAGE, "BallindorseWrathweavers")
def _wrathweavers(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.calc_data.damage_type == DamageType.STASIS and inp.value >= 1:
        return _both_scales(1.05 if inp.pvp else 1.15)
    return DamageModifierResponse()


# Perks whose damage replaces the Lucky Pants bonus; looked up by perk name.
_LUCKY_PANTS_EXCLUSIONS = ("ParacausalShot", "StormAndStress")


@_modifier(ModifierKind.DAMAGE, "LuckyPants")
def _lucky_pants_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    perks = inp.calc_data.perk_value_map
    if inp.pvp or any(perks.get(name, 0) > 0 for name in _LUCKY_PANTS_EXCLUSIONS):
        return DamageModifierResponse()
    mult = 0.3 if inp.calc_data.ammo_type == AmmoType.SPECIAL else 0.45
    return DamageModifierResponse(impact_dmg_scale=1.0 + mult * clamp(inp.value, 0, 10))


@_modifier(ModifierKind.STAT_BUMP, "TomeOfDawn")
def _tome_of_dawn_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_AIRBORNE: 50} if inp.value > 0 else {}


@_modifier(ModifierKind.FLINCH, "TomeOfDawn")
def _tome_of_dawn_flinch(inp: ModifierResponseInput) -> FlinchModifierResponse:
    if inp.value > 0:
        return FlinchModifierResponse(flinch_scale=0.80)
    return FlinchModifierResponse()


_MODIFIERS.append((ModifierKind.STAT_BUMP, "KnuckleheadRadar", _flat_airborne(20)))


@_modifier(ModifierKind.DAMAGE, "KnuckleheadRadar")
def _knucklehead_radar_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    health_percent = inp.cached_data.get("health%", 1.0)
    if health_percent >= 0.3 or inp.value == 0:
        return DamageModifierResponse()
    return DamageModifierResponse.basic_dmg_buff(1.0 + (0.3 - health_percent))


def _is_sidearm(inp: ModifierResponseInput) -> bool:
    return inp.calc_data.weapon_type == WeaponType.SIDEARM


@_modifier(ModifierKind.STAT_BUMP, "MechaneersTricksleeves")
def _tricksleeves_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if not _is_sidearm(inp):
        return {}
    return {_AIRBORNE: 50, _HANDLING: 100, _RELOAD: 100}


@_modifier(ModifierKind.HANDLING, "MechaneersTricksleeves")
def _tricksleeves_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if _is_sidearm(inp):
        return HandlingModifierResponse(stat_add=100)
    return HandlingModifierResponse()


@_modifier(ModifierKind.RELOAD, "MechaneersTricksleeves")
def _tricksleeves_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    if _is_sidearm(inp):
        return ReloadModifierResponse(reload_stat_add=100)
    return ReloadModifierResponse()


@_modifier(ModifierKind.DAMAGE, "MechaneersTricksleeves")
def _tricksleeves_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0 or not _is_sidearm(inp):
        return DamageModifierResponse()
    return _both_scales(1.10 if inp.pvp else 2.0)


@_modifier(ModifierKind.STAT_BUMP, "Oathkeeper")
def _oathkeeper_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.calc_data.weapon_type == WeaponType.BOW:
        return {_AIRBORNE: 40, _DRAW_TIME: 10}
    return {}


@_modifier(ModifierKind.STAT_BUMP, "SealedAhamkaraGrasps")
def _ahamkara_grasps_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_AIRBORNE: 50} if inp.value > 0 else {}


@_modifier(ModifierKind.DAMAGE, "SealedAhamkaraGrasps")
def _ahamkara_grasps_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return DamageModifierResponse.basic_dmg_buff(1.2 if inp.pvp else 1.35)


def _lucky_pants_active(inp: ModifierResponseInput) -> bool:
    return inp.value > 0 and inp.calc_data.weapon_type == WeaponType.HANDCANNON


@_modifier(ModifierKind.STAT_BUMP, "LuckyPants")
def _lucky_pants_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if _lucky_pants_active(inp):
        return {_AIRBORNE: 20, _HANDLING: 100}
    return {}


@_modifier(ModifierKind.HANDLING, "LuckyPants")
def _lucky_pants_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if _lucky_pants_active(inp):
        return HandlingModifierResponse(draw_add=100, draw_scale=0.6)
    return HandlingModifierResponse()


_MODIFIERS.extend(
    [
        (
            ModifierKind.STAT_BUMP,
            "NoBackupPlans",
            _airborne_for_weapons(30, frozenset({WeaponType.SHOTGUN})),
        ),
        (
            ModifierKind.STAT_BUMP,
            "ActiumWarRig",
            _airborne_for_weapons(30, frozenset({WeaponType.AUTORIFLE, WeaponType.MACHINEGUN})),
        ),
        (ModifierKind.STAT_BUMP, "HallowfireHeart", _flat_airborne(20)),
        (ModifierKind.STAT_BUMP, "LionRampart", _flat_airborne(50)),
    ]
)


@_modifier(ModifierKind.STAT_BUMP, "Peacekeepers")
def _peacekeepers_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.calc_data.weapon_type == WeaponType.SUBMACHINEGUN:
        return {_AIRBORNE: 40, _HANDLING: 50}
    return {}


@_modifier(ModifierKind.HANDLING, "Peacekeepers")
def _peacekeepers_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if inp.calc_data.weapon_type == WeaponType.SUBMACHINEGUN:
        return HandlingModifierResponse(
            stat_add=50, ads_scale=1.0, draw_scale=0.8, stow_scale=0.8
        )
    return HandlingModifierResponse()


_MODIFIERS.extend(
    [
        (ModifierKind.STAT_BUMP, "PeregrineGreaves", _flat_airborne(20)),
        (ModifierKind.STAT_BUMP, "EyeOfAnotherWorld", _flat_airborne(15)),
    ]
)


@_modifier(ModifierKind.STAT_BUMP, "AstrocyteVerse")
def _astrocyte_verse_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    stats = {_AIRBORNE: 30}
    if inp.value > 0:
        stats[_HANDLING] = 100
    return stats


@_modifier(ModifierKind.HANDLING, "AstrocyteVerse")
def _astrocyte_verse_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if inp.value == 0:
        return HandlingModifierResponse()
    return HandlingModifierResponse(draw_add=100)


# Thorn, Osteo Striga, Touch of Malice, Necrochasm
_NECROTIC_WEAPONS = frozenset({1863355414, 2965975126, 2724693746, 4184462049})
_LUMINA = frozenset({2144092201})

_MODIFIERS.extend(
    [
        (
            ModifierKind.STAT_BUMP,
            "NecroticGrips",
            _airborne_for_intrinsics(30, _NECROTIC_WEAPONS),
        ),
        (
            ModifierKind.STAT_BUMP,
            "BootsOfTheAssembler",
            _airborne_for_intrinsics(30, _LUMINA),
        ),
        (
            ModifierKind.STAT_BUMP,
            "RainOfFire",
            _airborne_for_weapons(
                30, frozenset({WeaponType.FUSIONRIFLE, WeaponType.LINEARFUSIONRIFLE})
            ),
        ),
    ]
)

# value -> (reload, handling, airborne, reload time scale)
_SPEEDLOADER = {
    0: (0, 0, 0, 1.0),
    1: (40, 40, 30, 1.0),
    2: (40, 40, 35, 0.925),
    3: (45, 45, 40, 0.915),
    4: (50, 50, 45, 0.91),
}
_SPEEDLOADER_MAX = (55, 55, 50, 0.89)


def _speedloader(value: int) -> Tuple[int, int, int, float]:
    return _SPEEDLOADER.get(value, _SPEEDLOADER_MAX)


@_modifier(ModifierKind.STAT_BUMP, "SpeedloaderSlacks")
def _speedloader_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    reload, handling, airborne, _ = _speedloader(inp.value)
    return {_RELOAD: reload, _HANDLING: handling, _AIRBORNE: airborne}


@_modifier(ModifierKind.HANDLING, "SpeedloaderSlacks")
def _speedloader_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    return HandlingModifierResponse(stat_add=_speedloader(inp.value)[1])


@_modifier(ModifierKind.RELOAD, "SpeedloaderSlacks")
def _speedloader_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    reload, _, _, scale = _speedloader(inp.value)
    return ReloadModifierResponse(reload_stat_add=reload, reload_time_scale=scale)


@_modifier(ModifierKind.STAT_BUMP, "LunaFaction")
def _luna_faction_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_RELOAD: 100} if inp.value >= 1 else {}


@_modifier(ModifierKind.RELOAD, "LunaFaction")
def _luna_faction_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    if inp.value >= 1:
        return ReloadModifierResponse(reload_stat_add=100, reload_time_scale=0.9)
    return ReloadModifierResponse()


@_modifier(ModifierKind.RANGE, "LunaFaction")
def _luna_faction_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    if inp.value >= 2:
        return RangeModifierResponse(range_all_scale=2.0)
    return RangeModifierResponse()


@_modifier(ModifierKind.STAT_BUMP, "TritonVice")
def _triton_vice_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.value > 0 and inp.calc_data.weapon_type == WeaponType.GLAIVE:
        return {_RELOAD: 50}
    return {}


def register(registry: ModifierRegistry) -> None:
    """Add every exotic armor modifier to the registry."""
    for kind, perk, func in _MODIFIERS:
        registry.register(kind, perk, func)