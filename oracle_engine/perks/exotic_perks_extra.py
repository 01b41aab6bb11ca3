"""Modifiers of exotic weapon perks and intrinsics, from Harmonic Laser to Judgment."""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

from ..enemies import EnemyType
from ..enums import StatHashes
from .modifiers import (
    DamageModifierResponse,
    FiringModifierResponse,
    HandlingModifierResponse,
    MagazineModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    RefundResponse,
    clamp,
)

_MODIFIERS: List[Tuple[ModifierKind, str, Callable]] = []

_HANDLING = int(StatHashes.HANDLING)

# Perks and intrinsics referred to by name in the perk value map and intrinsic slot.
_PICK_YOUR_POISON = "PickYourPoison"
_JUDGMENT = "Judgment"


def _modifier(kind: ModifierKind, perk: str):
    def decorate(func):
        _MODIFIERS.append((kind, perk, func))
        return func

    return decorate


def _both_scales(buff: float) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=buff, explosive_dmg_scale=buff)


_HARMONIC_PVP = {1: 1.03}
_HARMONIC_PVE = {1: 1.323}


@_modifier(ModifierKind.DAMAGE, "HarmonicLaser")
def _harmonic_laser(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        buff = 1.0
    elif inp.pvp:
        buff = _HARMONIC_PVP.get(inp.value, 1.0625)
    else:
        buff = _HARMONIC_PVE.get(inp.value, 1.687)
    return DamageModifierResponse(impact_dmg_scale=buff)


@_modifier(ModifierKind.DAMAGE, "AgersScepterCatalyst")
def _agers_scepter_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value > 0:
        return DamageModifierResponse(impact_dmg_scale=1.8)
    return DamageModifierResponse()


@_modifier(ModifierKind.MAGAZINE, "AgersScepterCatalyst")
def _agers_scepter_magazine(inp: ModifierResponseInput) -> MagazineModifierResponse:
    active = inp.value > 0 and inp.calc_data.total_shots_fired == 0.0
    return MagazineModifierResponse(magazine_scale=2.0 if active else 1.0)


@_modifier(ModifierKind.DAMAGE, "ColdFusion")
def _cold_fusion(inp: ModifierResponseInput) -> DamageModifierResponse:
    bonus = 0.0195 * clamp(inp.calc_data.total_shots_hit, 0.0, 41.0)
    return DamageModifierResponse(impact_dmg_scale=1.0 + bonus)


# Queenbreaker's sights
@_modifier(ModifierKind.DAMAGE, "MarksmanSights")
def _marksman_sights_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=1.38)


@_modifier(ModifierKind.FIRING, "MarksmanSights")
def _marksman_sights_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    # 300 + 333 = 633
    return FiringModifierResponse(burst_delay_add=0.333)


_BROADSIDE = {0: 1.0, 1: 1.18, 2: 1.39, 3: 1.59}


@_modifier(ModifierKind.DAMAGE, "Broadside")
def _broadside(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=_BROADSIDE.get(inp.value, 1.81))


@_modifier(ModifierKind.FIRING, "TemporalUnlimiter")
def _temporal_unlimiter_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.value > 0:
        return FiringModifierResponse(burst_delay_add=0.366)
    return FiringModifierResponse()


_LFR_BODY = 154.004
_LFR_CRIT_MULT = 463.516 / _LFR_BODY


@_modifier(ModifierKind.DAMAGE, "TemporalUnlimiter")
def _temporal_unlimiter_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    firing = inp.calc_data.curr_firing_data
    pve_mult = 1.0 if inp.pvp else 2.85
    champ_buff = 2.0 if inp.calc_data.enemy_type == EnemyType.CHAMPION else 1.0
    return DamageModifierResponse(
        impact_dmg_scale=_LFR_BODY / firing.damage * champ_buff * pve_mult,
        crit_scale=_LFR_CRIT_MULT / firing.crit_mult,
    )


@_modifier(ModifierKind.MAGAZINE, "FourthHorsemanCatalyst")
def _fourth_horseman(inp: ModifierResponseInput) -> MagazineModifierResponse:
    return MagazineModifierResponse(magazine_add=1.0)


@_modifier(ModifierKind.DAMAGE, "BlackHole")
def _black_hole(inp: ModifierResponseInput) -> DamageModifierResponse:
    odd_hit = math.fmod(inp.calc_data.total_shots_hit, 2.0) == 1.0
    return DamageModifierResponse(impact_dmg_scale=1.35 if odd_hit else 1.0)


@_modifier(ModifierKind.DAMAGE, "Impetus")
def _impetus(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value > 0:
        return DamageModifierResponse(impact_dmg_scale=1.5)
    return DamageModifierResponse()


@_modifier(ModifierKind.DAMAGE, "Broadhead")
def _broadhead(inp: ModifierResponseInput) -> DamageModifierResponse:
    broadhead_damage = 30.0 if inp.pvp else 60.0
    firing = inp.calc_data.curr_firing_data
    impact = firing.damage
    crit_mult = firing.crit_mult
    impact_scale = (broadhead_damage + impact) / impact
    crit_scale = (impact * crit_mult + broadhead_damage) / (impact * impact_scale * crit_mult)
    return DamageModifierResponse(impact_dmg_scale=impact_scale, crit_scale=crit_scale)


@_modifier(ModifierKind.FIRING, "Desperation")
def _desperation(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.value == 0 or inp.calc_data.time_total > 7.0:
        return FiringModifierResponse()
    return FiringModifierResponse(burst_delay_scale=0.8)


@_modifier(ModifierKind.DAMAGE, "IonicReturn")
def _ionic_return(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    current = inp.calc_data.curr_firing_data.crit_mult
    return DamageModifierResponse(
        impact_dmg_scale=1.15,
        crit_scale=(current + 34.0 / 51.0) / current,
    )


@_modifier(ModifierKind.DAMAGE, "Unrepentant")
def _unrepentant_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0 or inp.pvp:
        return DamageModifierResponse()
    return DamageModifierResponse(impact_dmg_scale=3.0)


_SHOTS_IN_SUPER_BURST = 6.0


@_modifier(ModifierKind.FIRING, "Unrepentant")
def _unrepentant_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.calc_data.total_shots_hit >= _SHOTS_IN_SUPER_BURST or inp.value == 0:
        return FiringModifierResponse()
    return FiringModifierResponse(burst_size_add=3.0)


@_modifier(ModifierKind.DAMAGE, "ArcConductor")
def _arc_conductor_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(1.1)


@_modifier(ModifierKind.HANDLING, "ArcConductor")
def _arc_conductor_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if inp.value == 0:
        return HandlingModifierResponse()
    return HandlingModifierResponse(stat_add=100)


@_modifier(ModifierKind.STAT_BUMP, "ArcConductor")
def _arc_conductor_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_HANDLING: 100} if inp.value == 1 else {}


@_modifier(ModifierKind.DAMAGE, "VoidLeech")
def _void_leech(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0 or inp.pvp:
        return DamageModifierResponse()
    return _both_scales(1.2)


@_modifier(ModifierKind.REFUND, "WhiteNail")
def _white_nail(inp: ModifierResponseInput) -> RefundResponse:
    return RefundResponse(crit=True, requirement=3, refund_mag=3, refund_reserves=-2)


@_modifier(ModifierKind.DAMAGE, "WhisperedBreathing")
def _whispered_breathing(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    # approximate crit and damage scalars
    base = inp.calc_data.base_crit_mult
    return DamageModifierResponse(impact_dmg_scale=1.1078, crit_scale=(base + 1.2207) / base)


_INVERSE_PVE = {1: 1.1, 2: 1.2}
_INVERSE_PVP = {1: 1.01, 2: 1.025}


@_modifier(ModifierKind.DAMAGE, "InverseRelationship")
def _inverse_relationship(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        buff = 1.0
    elif inp.pvp:
        buff = _INVERSE_PVP.get(inp.value, 1.05)
    else:
        buff = _INVERSE_PVE.get(inp.value, 1.4)
    return _both_scales(buff)


@_modifier(ModifierKind.DAMAGE, "Spindle")
def _spindle(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(1.0 + 0.02 * inp.value)


@_modifier(ModifierKind.DAMAGE, "TheRightChoice")
def _the_right_choice(inp: ModifierResponseInput) -> DamageModifierResponse:
    # every 1st, 8th, 15th... shot
    if math.fmod(inp.calc_data.total_shots_fired + 6.0, 7.0) == 0.0:
        return _both_scales(1.15 if inp.pvp else 3.525)
    return DamageModifierResponse()


@_modifier(ModifierKind.DAMAGE, "PickYourPoison")
def _pick_your_poison(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    if inp.value == 1:
        return DamageModifierResponse(crit_scale=2.0)
    return DamageModifierResponse(
        impact_dmg_scale=1.2, explosive_dmg_scale=1.2, crit_scale=1.0 / 1.2
    )


@_modifier(ModifierKind.DAMAGE, "StringTheory")
def _string_theory(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.calc_data.perk_value_map.get(_PICK_YOUR_POISON, 0) == 0:
        return DamageModifierResponse()
    heavy_target = inp.calc_data.enemy_type in (EnemyType.MINIBOSS, EnemyType.BOSS)
    return _both_scales(1.05 if heavy_target else 1.1)


@_modifier(ModifierKind.DAMAGE, "Judgment")
def _judgment(inp: ModifierResponseInput) -> DamageModifierResponse:
    hits_needed = 5.0 if inp.pvp else 14.0
    is_intrinsic = inp.calc_data.intrinsic_hash == _JUDGMENT
    if inp.calc_data.shots_fired_this_mag < hits_needed and not is_intrinsic and inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(1.3 if is_intrinsic or inp.pvp else 1.15)


def register(registry: ModifierRegistry) -> None:
    """Add these exotic weapon modifiers to the registry."""
    for kind, perk, func in _MODIFIERS:
        registry.register(kind, perk, func)