from types import SimpleNamespace

import pytest

from oracle_engine.enemies import EnemyType
from oracle_engine.enums import StatHashes
from oracle_engine.perks.exotic_perks_extra import register
from oracle_engine.perks.modifiers import (
    DamageModifierResponse,
    FiringModifierResponse,
    HandlingModifierResponse,
    MagazineModifierResponse,
    ModifierKind,
    ModifierRegistry,
)


@pytest.fixture
def registry():
    reg = ModifierRegistry()
    register(reg)
    return reg


def make_input(value=0, pvp=False, **calc):
    firing = SimpleNamespace(
        damage=calc.pop("damage", 100.0), crit_mult=calc.pop("crit_mult", 2.0)
    )
    data = dict(
        intrinsic_hash=0,
        curr_firing_data=firing,
        base_crit_mult=2.0,
        shots_fired_this_mag=0.0,
        total_shots_fired=0.0,
        total_shots_hit=0.0,
        base_mag=10.0,
        curr_mag=10.0,
        time_total=0.0,
        time_this_mag=0.0,
        enemy_type=EnemyType.ENCLAVE,
        perk_value_map={},
    )
    data.update(calc)
    return SimpleNamespace(
        value=value,
        pvp=pvp,
        is_enhanced=False,
        calc_data=SimpleNamespace(**data),
        cached_data={},
    )


def dmg(registry, perk, inp):
    return registry.evaluate(ModifierKind.DAMAGE, perk, inp)


def test_harmonic_laser_off_and_pvp_weaker(registry):
    assert dmg(registry, "HarmonicLaser", make_input(0)) == DamageModifierResponse()
    pve = dmg(registry, "HarmonicLaser", make_input(2))
    pvp = dmg(registry, "HarmonicLaser", make_input(2, pvp=True))
    assert pvp.impact_dmg_scale < pve.impact_dmg_scale
    assert pve.explosive_dmg_scale == DamageModifierResponse().explosive_dmg_scale


def test_marksman_sights_final_delay(registry):
    res = registry.evaluate(ModifierKind.FIRING, "MarksmanSights", make_input())
    assert res.burst_delay_add == pytest.approx(0.333)


def test_pick_your_poison_keeps_crit_total(registry):
    res = dmg(registry, "PickYourPoison", make_input(2))
    assert res.impact_dmg_scale * res.crit_scale == pytest.approx(
        DamageModifierResponse().crit_scale
    )
    assert dmg(registry, "PickYourPoison", make_input(0)) == DamageModifierResponse()


@pytest.mark.parametrize("pvp", [False, True])
def test_broadhead_adds_same_damage_to_body_and_crit(registry, pvp):
    damage, cm = 120.0, 1.8
    res = dmg(registry, "Broadhead", make_input(pvp=pvp, damage=damage, crit_mult=cm))
    body_extra = damage * res.impact_dmg_scale - damage
    crit_extra = damage * res.impact_dmg_scale * cm * res.crit_scale - damage * cm
    assert body_extra == pytest.approx(crit_extra)


def test_ionic_return_crit_bonus(registry):
    res = dmg(registry, "IonicReturn", make_input(1, crit_mult=2.5))
    assert res.crit_scale * 2.5 - 2.5 == pytest.approx(34.0 / 51.0)
    assert dmg(registry, "IonicReturn", make_input(0)) == DamageModifierResponse()


def test_black_hole_alternates(registry):
    odd = dmg(registry, "BlackHole", make_input(total_shots_hit=3.0))
    even = dmg(registry, "BlackHole", make_input(total_shots_hit=4.0))
    assert odd.impact_dmg_scale > even.impact_dmg_scale
    assert even == DamageModifierResponse()


def test_the_right_choice_every_seventh_shot(registry):
    first = dmg(registry, "TheRightChoice", make_input(total_shots_fired=1.0))
    eighth = dmg(registry, "TheRightChoice", make_input(total_shots_fired=8.0))
    other = dmg(registry, "TheRightChoice", make_input(total_shots_fired=2.0))
    assert first == eighth
    assert first.impact_dmg_scale > other.impact_dmg_scale
    assert other == DamageModifierResponse()


def test_judgment_activation(registry):
    idle = dmg(registry, "Judgment", make_input(0, pvp=True, shots_fired_this_mag=2.0))
    assert idle == DamageModifierResponse()
    pvp = dmg(registry, "Judgment", make_input(0, pvp=True, shots_fired_this_mag=5.0))
    intrinsic = dmg(registry, "Judgment", make_input(0, intrinsic_hash="Judgment"))
    pve = dmg(registry, "Judgment", make_input(1))
    assert pvp == intrinsic
    assert pve.impact_dmg_scale < pvp.impact_dmg_scale


def test_string_theory_needs_pick_your_poison(registry):
    assert dmg(registry, "StringTheory", make_input(1)) == DamageModifierResponse()
    boss = dmg(
        registry,
        "StringTheory",
        make_input(1, enemy_type=EnemyType.BOSS, perk_value_map={"PickYourPoison": 1}),
    )
    minor = dmg(
        registry,
        "StringTheory",
        make_input(1, enemy_type=EnemyType.MINOR, perk_value_map={"PickYourPoison": 1}),
    )
    assert 1.0 < boss.impact_dmg_scale < minor.impact_dmg_scale


def test_unrepentant(registry):
    firing = registry.evaluate(ModifierKind.FIRING, "Unrepentant", make_input(1))
    assert firing.burst_size_add > 0
    done = registry.evaluate(
        ModifierKind.FIRING, "Unrepentant", make_input(1, total_shots_hit=6.0)
    )
    assert done == FiringModifierResponse()
    assert dmg(registry, "Unrepentant", make_input(1, pvp=True)) == DamageModifierResponse()


def test_white_nail_refund(registry):
    res = registry.evaluate(ModifierKind.REFUND, "WhiteNail", make_input())
    assert res.crit is True
    assert res.refund_mag == res.requirement
    assert res.refund_reserves < 0


def test_inverse_relationship_monotonic(registry):
    pve = [dmg(registry, "InverseRelationship", make_input(v)).impact_dmg_scale for v in range(5)]
    assert pve == sorted(pve)
    assert pve[3] == pve[4]
    pvp = dmg(registry, "InverseRelationship", make_input(3, pvp=True))
    assert pvp.impact_dmg_scale < pve[3]


def test_spindle_grows_with_stacks(registry):
    assert dmg(registry, "Spindle", make_input(0)) == DamageModifierResponse()
    low = dmg(registry, "Spindle", make_input(1)).impact_dmg_scale
    high = dmg(registry, "Spindle", make_input(5)).impact_dmg_scale
    assert 1.0 < low < high


def test_desperation_expires(registry):
    active = registry.evaluate(ModifierKind.FIRING, "Desperation", make_input(1))
    expired = registry.evaluate(
        ModifierKind.FIRING, "Desperation", make_input(1, time_total=8.0)
    )
    assert active.burst_delay_scale < 1.0
    assert expired == FiringModifierResponse()


def test_cold_fusion_saturates(registry):
    capped = dmg(registry, "ColdFusion", make_input(total_shots_hit=41.0))
    beyond = dmg(registry, "ColdFusion", make_input(total_shots_hit=100.0))
    none = dmg(registry, "ColdFusion", make_input())
    assert capped == beyond
    assert none == DamageModifierResponse()


def test_agers_scepter_magazine_only_before_firing(registry):
    fresh = registry.evaluate(ModifierKind.MAGAZINE, "AgersScepterCatalyst", make_input(1))
    fired = registry.evaluate(
        ModifierKind.MAGAZINE, "AgersScepterCatalyst", make_input(1, total_shots_fired=5.0)
    )
    assert fresh.magazine_scale > fired.magazine_scale
    assert fired == MagazineModifierResponse()


def test_fourth_horseman_adds_one_round(registry):
    res = registry.evaluate(ModifierKind.MAGAZINE, "FourthHorsemanCatalyst", make_input())
    assert res.magazine_add == 1.0


def test_arc_conductor_stats_match_handling(registry):
    stats = registry.evaluate(ModifierKind.STAT_BUMP, "ArcConductor", make_input(1))
    handling = registry.evaluate(ModifierKind.HANDLING, "ArcConductor", make_input(1))
    assert stats == {int(StatHashes.HANDLING): handling.stat_add}
    assert registry.evaluate(ModifierKind.STAT_BUMP, "ArcConductor", make_input(0)) == {}
    off = registry.evaluate(ModifierKind.HANDLING, "ArcConductor", make_input(0))
    assert off == HandlingModifierResponse()


def test_temporal_unlimiter_champion_doubles(registry):
    normal = dmg(registry, "TemporalUnlimiter", make_input(1))
    champ = dmg(registry, "TemporalUnlimiter", make_input(1, enemy_type=EnemyType.CHAMPION))
    assert champ.impact_dmg_scale == pytest.approx(normal.impact_dmg_scale * 2)
    assert champ.crit_scale == normal.crit_scale
    off = registry.evaluate(ModifierKind.FIRING, "TemporalUnlimiter", make_input(0))
    assert off == FiringModifierResponse()


def test_void_leech_and_whispered_breathing(registry):
    assert dmg(registry, "VoidLeech", make_input(1, pvp=True)) == DamageModifierResponse()
    leech = dmg(registry, "VoidLeech", make_input(1))
    assert leech.impact_dmg_scale == leech.explosive_dmg_scale > 1.0
    breath = dmg(registry, "WhisperedBreathing", make_input(1))
    assert breath.explosive_dmg_scale == DamageModifierResponse().explosive_dmg_scale
    assert breath.crit_scale > 1.0
    assert dmg(registry, "WhisperedBreathing", make_input(0)) == DamageModifierResponse()


def test_broadside_caps_at_four(registry):
    values = [dmg(registry, "Broadside", make_input(v)).impact_dmg_scale for v in range(6)]
    assert values == sorted(values)
    assert values[4] == values[5]
    assert values[0] == DamageModifierResponse().impact_dmg_scale