"""Modifiers of exotic weapon perks and intrinsics, from Paracausal Shot to Dark-Forged Trigger."""

from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

from ..enums import StatHashes
from .modifiers import (
    DamageModifierResponse,
    ExtraDamageResponse,
    FiringModifierResponse,
    HandlingModifierResponse,
    MagazineModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    RangeModifierResponse,
    RefundResponse,
    ReloadModifierResponse,
    clamp,
)

_MODIFIERS: List[Tuple[ModifierKind, str, Callable]] = []

_RELOAD = int(StatHashes.RELOAD)
_RANGE = int(StatHashes.RANGE)
_HANDLING = int(StatHashes.HANDLING)
_STABILITY = int(StatHashes.STABILITY)
_ZOOM = int(StatHashes.ZOOM)
_AIM_ASSIST = int(StatHashes.AIM_ASSIST)

# Perk hashes looked up in the weapon's perk value map.
_HUNTERS_TRACE = 213689231
_RELEASE_THE_WOLVES_CATALYST = 431220296
_HONED_EDGE_CATALYST = 529188544
_DARK_FORGED_COUNTER = 1319823571


def _modifier(kind: ModifierKind, perk: str):
    def decorate(func):
        _MODIFIERS.append((kind, perk, func))
        return func

    return decorate


def _both_scales(buff: float) -> DamageModifierResponse:
    return DamageModifierResponse(impact_dmg_scale=buff, explosive_dmg_scale=buff)


_PARACAUSAL_PVE = (1.0, 3.92, 4.0, 4.4, 5.25, 7.67, 11.71, 18.36)
_PARACAUSAL_PVP = (1.0, 1.01, 1.03, 1.13, 1.41, 1.96, 3.0, 4.73)


@_modifier(ModifierKind.DAMAGE, "ParacausalShot")
def _paracausal_shot(inp: ModifierResponseInput) -> DamageModifierResponse:
    data = inp.calc_data
    bufflist = _PARACAUSAL_PVP if inp.pvp else _PARACAUSAL_PVE
    buff = 1.0
    if data.curr_mag == 1.0:
        buff = bufflist[clamp(int(data.shots_fired_this_mag), 0, 7)]
    if data.time_this_mag < 0.0:
        buff = bufflist[clamp(int(inp.value), 0, 7)]
    return _both_scales(buff)


def _hunters_trance_buff(inp: ModifierResponseInput) -> int:
    return clamp(inp.calc_data.perk_value_map.get(_HUNTERS_TRACE, 0), 0, 7) * 5


@_modifier(ModifierKind.STAT_BUMP, "HuntersTrance")
def _hunters_trance_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    buff = _hunters_trance_buff(inp)
    return {_RELOAD: buff, _RANGE: buff, _HANDLING: buff}


@_modifier(ModifierKind.RELOAD, "HuntersTrance")
def _hunters_trance_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    return ReloadModifierResponse(reload_stat_add=_hunters_trance_buff(inp))


@_modifier(ModifierKind.RANGE, "HuntersTrance")
def _hunters_trance_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    return RangeModifierResponse(range_stat_add=_hunters_trance_buff(inp))


@_modifier(ModifierKind.HANDLING, "HuntersTrance")
def _hunters_trance_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    return HandlingModifierResponse(stat_add=_hunters_trance_buff(inp))


@_modifier(ModifierKind.RANGE, "HuntersTrace")
def _hunters_trace_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    return RangeModifierResponse(range_zoom_scale=4.5 / 1.7 if inp.value > 0 else 1.0)


def _memento_active(inp: ModifierResponseInput) -> bool:
    return inp.value > 0 and inp.calc_data.total_shots_fired < 7.0


@_modifier(ModifierKind.DAMAGE, "MementoMori")
def _memento_mori_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    buff = (1.285 if inp.pvp else 1.5) if _memento_active(inp) else 1.0
    return _both_scales(buff)


@_modifier(ModifierKind.RANGE, "MementoMori")
def _memento_mori_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    return RangeModifierResponse(range_all_scale=0.85 if _memento_active(inp) else 1.0)


@_modifier(ModifierKind.STAT_BUMP, "Roadborn")
def _roadborn_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if inp.value == 0:
        return {}
    return {_HANDLING: 20, _STABILITY: 20, _RELOAD: 40}


@_modifier(ModifierKind.DAMAGE, "Roadborn")
def _roadborn_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse(crit_scale=1.17 if inp.value > 0 else 1.0)


@_modifier(ModifierKind.FIRING, "Roadborn")
def _roadborn_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    return FiringModifierResponse(
        burst_delay_scale=0.583 if inp.value > 0 else 1.0,
        burst_delay_add=0.0,
        inner_burst_scale=1.0,
        burst_size_add=0.0,
    )


@_modifier(ModifierKind.RANGE, "Roadborn")
def _roadborn_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    return RangeModifierResponse(
        range_stat_add=0,
        range_all_scale=1.15 if inp.value > 0 else 1.05,
        range_hip_scale=1.0,
        range_zoom_scale=1.0,
    )


@_modifier(ModifierKind.RELOAD, "Roadborn")
def _roadborn_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    if inp.value == 0:
        return ReloadModifierResponse()
    return ReloadModifierResponse(reload_stat_add=40, reload_time_scale=0.75)


@_modifier(ModifierKind.FIRING, "ReignHavoc")
def _reign_havoc_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    data = inp.calc_data
    delay = 1.0
    if data.shots_fired_this_mag >= data.base_mag * 0.2:
        delay = 0.75
    if data.shots_fired_this_mag >= data.base_mag * 0.4:
        delay = 0.625
    return FiringModifierResponse(burst_delay_scale=delay)


def _single_hit_extra(damage: float) -> ExtraDamageResponse:
    return ExtraDamageResponse(
        additive_damage=damage,
        increment_total_time=False,
        times_to_hit=1,
        time_for_additive_damage=0.0,
        hit_at_same_time=True,
        is_dot=False,
        weapon_scale=True,
        crit_scale=False,
        combatant_scale=True,
    )


@_modifier(ModifierKind.EXTRA_DAMAGE, "ReignHavoc")
def _reign_havoc_extra(inp: ModifierResponseInput) -> ExtraDamageResponse:
    return _single_hit_extra(65.0 if inp.pvp else 65.0 * 1.3)


@_modifier(ModifierKind.DAMAGE, "WormsHunger")
def _worms_hunger(inp: ModifierResponseInput) -> DamageModifierResponse:
    return _both_scales(1.0 + clamp(inp.value, 0, 20) * 0.1)


@_modifier(ModifierKind.DAMAGE, "LagragianSight")
def _lagragian_sight(inp: ModifierResponseInput) -> DamageModifierResponse:
    active = inp.value > 0 and inp.calc_data.time_total < 30.0
    return _both_scales(1.4 if active else 1.0)


@_modifier(ModifierKind.DAMAGE, "ToM")
def _tom_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    buff = (2.0 if inp.pvp else 2.4) if inp.calc_data.curr_mag == 1.0 else 1.0
    return _both_scales(buff)


@_modifier(ModifierKind.REFUND, "ToM")
def _tom_refund(inp: ModifierResponseInput) -> RefundResponse:
    return RefundResponse(
        refund_mag=1 if inp.calc_data.curr_mag == 0.0 else 0,
        refund_reserves=0,
        crit=False,
        requirement=1,
    )


@_modifier(ModifierKind.EXTRA_DAMAGE, "RocketTracers")
def _rocket_tracers(inp: ModifierResponseInput) -> ExtraDamageResponse:
    return _single_hit_extra(24.0 if inp.pvp else 105.0)


@_modifier(ModifierKind.FIRING, "HakkeHeavyBurst")
def _hakke_heavy_burst_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    return FiringModifierResponse(burst_size_add=-2.0, burst_delay_add=-0.033)


@_modifier(ModifierKind.DAMAGE, "HakkeHeavyBurst")
def _hakke_heavy_burst_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    return DamageModifierResponse(
        impact_dmg_scale=1.485,
        explosive_dmg_scale=1.485,
        crit_scale=1.8525 / inp.calc_data.base_crit_mult,
    )


@_modifier(ModifierKind.DAMAGE, "SwoopingTalons")
def _swooping_talons(inp: ModifierResponseInput) -> DamageModifierResponse:
    mult = 1.4 if inp.value > 0 else 1.0
    mult += inp.calc_data.total_shots_fired * 0.04
    return _both_scales(clamp(mult, 1.0, 1.4))


@_modifier(ModifierKind.DAMAGE, "IgnitionTrigger")
def _ignition_trigger(inp: ModifierResponseInput) -> DamageModifierResponse:
    active = inp.value > 0 or inp.calc_data.total_shots_fired > 20.0
    buff = (1.55 if inp.pvp else 1.99) if active else 1.0
    return _both_scales(buff)


@_modifier(ModifierKind.DAMAGE, "CalculatedBalance")
def _calculated_balance(inp: ModifierResponseInput) -> DamageModifierResponse:
    bonus = 0.2 if inp.value > 0 else 0.0
    if inp.calc_data.time_total > 5.0:
        bonus = 0.0
    return _both_scales(1.0 + bonus)


@_modifier(ModifierKind.FIRING, "RavenousBeast")
def _ravenous_beast_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.value > 0:
        return FiringModifierResponse(burst_delay_scale=0.8)
    return FiringModifierResponse()


@_modifier(ModifierKind.DAMAGE, "RavenousBeast")
def _ravenous_beast_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    if inp.pvp:
        damage, crit = 2.2, 1.0 / (1.5 + -3.0 / 51.0)
    else:
        damage, crit = 2.87, 1.99 / 2.87
    return DamageModifierResponse(
        impact_dmg_scale=damage, explosive_dmg_scale=damage, crit_scale=crit
    )


def _has_wolves_catalyst(inp: ModifierResponseInput) -> bool:
    return _RELEASE_THE_WOLVES_CATALYST in inp.calc_data.perk_value_map


@_modifier(ModifierKind.STAT_BUMP, "ReleaseTheWolves")
def _release_the_wolves_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    if not _has_wolves_catalyst(inp):
        return {}
    if inp.value == 0:
        return {_STABILITY: 40}
    if inp.value == 1:
        return {_RELOAD: 100}
    return {}


@_modifier(ModifierKind.RELOAD, "ReleaseTheWolves")
def _release_the_wolves_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    if inp.value == 1 and _has_wolves_catalyst(inp):
        return ReloadModifierResponse(reload_stat_add=100, reload_time_scale=0.85)
    return ReloadModifierResponse()


@_modifier(ModifierKind.FIRING, "ReleaseTheWolves")
def _release_the_wolves_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.value > 0:
        return FiringModifierResponse(burst_delay_scale=0.4)
    return FiringModifierResponse()


@_modifier(ModifierKind.DAMAGE, "ReleaseTheWolves")
def _release_the_wolves_damage(inp: ModifierResponseInput) -> DamageModifierResponse:
    return _both_scales(1.4 if inp.value > 0 else 1.0)


@_modifier(ModifierKind.DAMAGE, "Fundamentals")
def _fundamentals(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(1.1 if inp.pvp else 1.3)


@_modifier(ModifierKind.STAT_BUMP, "ThinTheHerd")
def _thin_the_herd_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_RELOAD: 70} if inp.value > 0 else {}


@_modifier(ModifierKind.RELOAD, "ThinTheHerd")
def _thin_the_herd_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    if inp.value > 0:
        return ReloadModifierResponse(reload_stat_add=70)
    return ReloadModifierResponse()


@_modifier(ModifierKind.HANDLING, "Chimera")
def _chimera_handling(inp: ModifierResponseInput) -> HandlingModifierResponse:
    if inp.value > 0:
        return HandlingModifierResponse(stat_add=100)
    return HandlingModifierResponse()


@_modifier(ModifierKind.STAT_BUMP, "Chimera")
def _chimera_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_RELOAD: 100} if inp.value > 0 else {}


@_modifier(ModifierKind.DAMAGE, "FirstGlance")
def _first_glance(inp: ModifierResponseInput) -> DamageModifierResponse:
    damage = crit = 1.0
    if inp.value > 0:
        if inp.calc_data.total_shots_fired == 0.0:
            damage = 1.33
        else:
            crit = 1.33
    return DamageModifierResponse(
        impact_dmg_scale=damage, explosive_dmg_scale=damage, crit_scale=crit
    )


@_modifier(ModifierKind.DAMAGE, "FateOfAllFools")
def _fate_of_all_fools(inp: ModifierResponseInput) -> DamageModifierResponse:
    damage = crit = 1.0
    if float(inp.value) > inp.calc_data.total_shots_fired:
        damage = inp.calc_data.base_crit_mult
        crit = 1.0 / damage
    return DamageModifierResponse(
        impact_dmg_scale=damage, explosive_dmg_scale=damage, crit_scale=crit
    )


@_modifier(ModifierKind.DAMAGE, "HonedEdge")
def _honed_edge(inp: ModifierResponseInput) -> DamageModifierResponse:
    has_cat = _HONED_EDGE_CATALYST in inp.calc_data.perk_value_map
    buff = 1.0
    if inp.value == 2:
        buff = 1.183 if inp.pvp else 2.0
    elif inp.value == 3:
        buff = 1.412 if inp.pvp else 3.0
    elif inp.value == 4:
        buff = 1.504 if inp.pvp else 4.0
        if has_cat:
            buff *= 1.2
    return _both_scales(buff)


@_modifier(ModifierKind.DAMAGE, "TakenPredator")
def _taken_predator(inp: ModifierResponseInput) -> DamageModifierResponse:
    buff = 1.0
    if inp.value in (1, 2):
        buff = 1.25
    elif inp.value == 3:
        buff = 1.25 * 1.25
    return _both_scales(buff)


@_modifier(ModifierKind.DAMAGE, "MarkovChain")
def _markov_chain(inp: ModifierResponseInput) -> DamageModifierResponse:
    stacks = clamp(inp.value, 0, 5)
    bonus = (1.0 / 15.0) * stacks * (1.0 if inp.pvp else 2.0)
    return _both_scales(1.0 + bonus)


@_modifier(ModifierKind.DAMAGE, "StringofCurses")
def _string_of_curses(inp: ModifierResponseInput) -> DamageModifierResponse:
    bonus = 0.2 * clamp(inp.value, 0, 5)
    if inp.pvp:
        bonus = math.ceil((bonus * 100.0 / 2.0) / 4.0) * 0.04
    if inp.calc_data.time_total > 3.5:
        bonus = 0.0
    return _both_scales(1.0 + bonus)


@_modifier(ModifierKind.DAMAGE, "StormAndStress")
def _storm_and_stress(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.value == 0:
        return DamageModifierResponse()
    return _both_scales(1.8 if inp.pvp else 3.62)


@_modifier(ModifierKind.RANGE, "DualSpeedReceiver")
def _dual_speed_receiver_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    if inp.value == 0:
        return RangeModifierResponse()
    return RangeModifierResponse(range_stat_add=30)


@_modifier(ModifierKind.STAT_BUMP, "DualSpeedReceiver")
def _dual_speed_receiver_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    return {_ZOOM: 3, _RANGE: 30} if inp.value > 0 else {}


@_modifier(ModifierKind.DAMAGE, "FullStop")
def _full_stop(inp: ModifierResponseInput) -> DamageModifierResponse:
    if inp.pvp:
        return DamageModifierResponse()
    return DamageModifierResponse(crit_scale=2.9)


def _rat_pack_stacks(value: int) -> int:
    return clamp(value - 1, 0, 4)


@_modifier(ModifierKind.FIRING, "RatPack")
def _rat_pack_firing(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.value == 0:
        return FiringModifierResponse()
    return FiringModifierResponse(burst_delay_add=_rat_pack_stacks(inp.value) * (-0.625 / 30.0))


@_modifier(ModifierKind.MAGAZINE, "RatPack")
def _rat_pack_magazine(inp: ModifierResponseInput) -> MagazineModifierResponse:
    stacks = _rat_pack_stacks(inp.value)
    return MagazineModifierResponse(magazine_add=stacks * (2.25 if stacks == 4 else 2.0))


def _ramping_delay(shots_per_stack: float, delay_per_stack: float):
    def firing(inp: ModifierResponseInput) -> FiringModifierResponse:
        extra = int(inp.calc_data.shots_fired_this_mag / shots_per_stack)
        stacks = clamp(inp.value + extra, 0, 2)
        return FiringModifierResponse(burst_delay_add=stacks * delay_per_stack)

    return firing


_MODIFIERS.extend(
    [
        (ModifierKind.FIRING, "RideTheBull", _ramping_delay(10.0, -0.25 / 30.0)),
        (ModifierKind.FIRING, "SpinningUp", _ramping_delay(12.0, -0.5 / 30.0)),
    ]
)


@_modifier(ModifierKind.STAT_BUMP, "CranialSpike")
def _cranial_spike_stats(inp: ModifierResponseInput) -> Dict[int, int]:
    stacks = clamp(inp.value, 0, 5)
    return {_RANGE: 8 * stacks, _AIM_ASSIST: 4 * stacks}


@_modifier(ModifierKind.RELOAD, "CranialSpike")
def _cranial_spike_reload(inp: ModifierResponseInput) -> ReloadModifierResponse:
    return ReloadModifierResponse(reload_time_scale=0.97 ** clamp(inp.value, 0, 5))


@_modifier(ModifierKind.RANGE, "CranialSpike")
def _cranial_spike_range(inp: ModifierResponseInput) -> RangeModifierResponse:
    return RangeModifierResponse(range_stat_add=8 * clamp(inp.value, 0, 5))


@_modifier(ModifierKind.FIRING, "DarkForgedTrigger")
def _dark_forged_trigger(inp: ModifierResponseInput) -> FiringModifierResponse:
    if inp.value == 0:
        return FiringModifierResponse()
    if inp.calc_data.perk_value_map.get(_DARK_FORGED_COUNTER, 0) > 4:
        return FiringModifierResponse(burst_delay_add=-5.0 / 30.0)
    return FiringModifierResponse(burst_delay_add=-1.0 / 30.0)


def register(registry: ModifierRegistry) -> None:
    """Add these exotic weapon modifiers to the registry."""
    for kind, perk, func in _MODIFIERS:
        registry.register(kind, perk, func)