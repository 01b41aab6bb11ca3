import pytest

from oracle_engine.enemies import EnemyType
from oracle_engine.enums import AmmoType, DamageType, WeaponType
from oracle_engine.perks.modifiers import (
    CalculationInput,
    DamageModifierResponse,
    ExtraDamageResponse,
    FiringModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    ReloadModifierResponse,
    ReloadOverrideResponse,
    clamp,
)


@pytest.fixture
def response_input():
    return ModifierResponseInput(calc_data=CalculationInput(), value=1, pvp=False)


@pytest.mark.parametrize("value,expected", [(-3, 0), (2, 2), (9, 5), (0, 0), (5, 5)])
def test_clamp(value, expected):
    assert clamp(value, 0, 5) == expected


def test_clamp_floats():
    assert clamp(1.7, 1.0, 1.4) == 1.4


def test_damage_defaults_are_neutral():
    dmr = DamageModifierResponse()
    assert (dmr.impact_dmg_scale, dmr.explosive_dmg_scale, dmr.crit_scale) == (1.0, 1.0, 1.0)


def test_basic_dmg_buff_leaves_crit():
    dmr = DamageModifierResponse.basic_dmg_buff(1.25)
    assert dmr.impact_dmg_scale == 1.25
    assert dmr.explosive_dmg_scale == 1.25
    assert dmr.crit_scale == 1.0


def test_surge_buff_matches_basic():
    assert DamageModifierResponse.surge_buff(1.17) == DamageModifierResponse.basic_dmg_buff(1.17)


def test_reload_override_invalid():
    response = ReloadOverrideResponse.invalid()
    assert response.valid is False
    assert response.ammo_to_reload == 0
    assert response.count_as_reload is False


def test_extra_damage_default():
    edr = ExtraDamageResponse()
    assert edr.hit_at_same_time is True
    assert edr.times_to_hit == 0
    assert edr.additive_damage == 0.0


def test_construct_pve_sparse():
    calc = CalculationInput.construct_pve_sparse(
        905, None, {}, {}, WeaponType.AUTORIFLE, AmmoType.PRIMARY, DamageType.ARC,
        20.0, 1.5, 40, 12, 3.0,
    )
    assert calc.enemy_type is EnemyType.BOSS
    assert calc.time_this_mag == -1.0
    assert calc.reserves_left == 100.0
    assert calc.total_shots_fired == calc.total_shots_hit == 12.0
    assert calc.base_mag == calc.curr_mag == 40.0
    assert calc.damage_type is DamageType.ARC


def test_construct_pvp():
    calc = CalculationInput.construct_pvp(
        906, None, {}, {}, WeaponType.HANDCANNON, AmmoType.PRIMARY,
        30.0, 1.8, 12.0, True, None,
    )
    assert calc.enemy_type is EnemyType.PLAYER
    assert calc.damage_type is DamageType.STASIS
    assert calc.reserves_left == 999.0
    assert calc.has_overshield is True
    assert calc.curr_mag == 12.0


def test_registry_defaults(response_input):
    registry = ModifierRegistry()
    assert registry.evaluate(ModifierKind.DAMAGE, "X", response_input) == DamageModifierResponse()
    assert registry.evaluate(ModifierKind.STAT_BUMP, "X", response_input) == {}
    assert registry.evaluate(ModifierKind.RELOAD, "X", response_input) == ReloadModifierResponse()
    assert (
        registry.evaluate(ModifierKind.RELOAD_OVERRIDE, "X", response_input)
        == ReloadOverrideResponse.invalid()
    )


def test_registry_get_missing():
    assert ModifierRegistry().get(ModifierKind.FIRING, "X") is None


def test_registry_evaluates_registered(response_input):
    registry = ModifierRegistry()
    registry.register(
        ModifierKind.DAMAGE,
        "Buff",
        lambda inp: DamageModifierResponse.basic_dmg_buff(1.0 + inp.value),
    )
    result = registry.evaluate(ModifierKind.DAMAGE, "Buff", response_input)
    assert result.impact_dmg_scale == 2.0
    assert registry.evaluate(ModifierKind.FIRING, "Buff", response_input) == FiringModifierResponse()
    assert len(registry) == 1


def test_registry_later_registration_replaces(response_input):
    registry = ModifierRegistry()
    registry.register(ModifierKind.FIRING, "P", lambda inp: FiringModifierResponse(burst_delay_add=0.1))
    registry.register(ModifierKind.FIRING, "P", lambda inp: FiringModifierResponse(burst_delay_add=0.333))
    assert registry.evaluate(ModifierKind.FIRING, "P", response_input).burst_delay_add == 0.333
    assert len(registry) == 1


def test_default_responses_are_fresh(response_input):
    registry = ModifierRegistry()
    first = registry.evaluate(ModifierKind.STAT_BUMP, "X", response_input)
    first[1] = 5
    assert registry.evaluate(ModifierKind.STAT_BUMP, "X", response_input) == {}