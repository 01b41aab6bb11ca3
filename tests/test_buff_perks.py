import pytest

from oracle_engine.enums import DamageType, StatHashes, WeaponType
from oracle_engine.perks.buff_perks import register
from oracle_engine.perks.modifiers import (
    CalculationInput,
    DamageModifierResponse,
    HandlingModifierResponse,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
    ReloadModifierResponse,
)


@pytest.fixture
def registry():
    reg = ModifierRegistry()
    register(reg)
    return reg


def _input(value=1, pvp=False, cache=None, **calc):
    return ModifierResponseInput(
        calc_data=CalculationInput(**calc),
        value=value,
        pvp=pvp,
        cached_data={} if cache is None else cache,
    )


def _dmg(registry, perk, inp):
    return registry.evaluate(ModifierKind.DAMAGE, perk, inp)


@pytest.mark.parametrize(
    "kind,perk",
    [
        (ModifierKind.DAMAGE, "WellOfRadiance"),
        (ModifierKind.DAMAGE, "BurningFists"),
        (ModifierKind.STAT_BUMP, "LucentBlades"),
        (ModifierKind.RELOAD, "AeonForce"),
        (ModifierKind.HANDLING, "AeonForce"),
        (ModifierKind.DAMAGE, "DeadFall"),
        (ModifierKind.DAMAGE, "EternalWarrior"),
    ],
)
def test_modifiers_are_registered(registry, kind, perk):
    assert (kind, perk) in registry


def test_well_of_radiance(registry):
    result = _dmg(registry, "WellOfRadiance", _input())
    assert result.impact_dmg_scale == pytest.approx(1.25)
    assert result.explosive_dmg_scale == pytest.approx(1.25)
    assert result.crit_scale == 1.0


def test_empowering_buffs_do_not_stack(registry):
    cache = {}
    first = _dmg(registry, "WellOfRadiance", _input(cache=cache))
    second = _dmg(registry, "WardOfDawn", _input(cache=cache))
    assert second.impact_dmg_scale == 1.0
    assert first.impact_dmg_scale == pytest.approx(1.25)


def test_stronger_empowering_buff_tops_up(registry):
    cache = {}
    first = _dmg(registry, "WellOfRadiance", _input(cache=cache))
    second = _dmg(registry, "BannerShield", _input(cache=cache))
    assert first.impact_dmg_scale * second.impact_dmg_scale == pytest.approx(1.4)
    assert cache["empowering"] == pytest.approx(1.4)


def test_debuff_stacks_with_empowering(registry):
    cache = {}
    well = _dmg(registry, "WellOfRadiance", _input(cache=cache))
    weaken = _dmg(registry, "Weaken", _input(cache=cache))
    assert well.impact_dmg_scale == pytest.approx(1.25)
    assert weaken.impact_dmg_scale == pytest.approx(1.15)


def test_debuffs_do_not_stack(registry):
    cache = {}
    _dmg(registry, "TractorCannon", _input(cache=cache))
    again = _dmg(registry, "MoebiusQuiver", _input(cache=cache))
    assert again.impact_dmg_scale == 1.0


def test_noble_rounds_off(registry):
    assert _dmg(registry, "NobleRounds", _input(value=0)) == DamageModifierResponse()


def test_radiant_marks_cache(registry):
    cache = {}
    result = _dmg(registry, "Radiant", _input(pvp=True, cache=cache))
    assert result.impact_dmg_scale == pytest.approx(1.1)
    assert cache["radiant"] == 1.0


def test_burning_steps_requires_solar(registry):
    off = _dmg(registry, "PathOfTheBurningSteps", _input(value=4, damage_type=DamageType.ARC))
    assert off == DamageModifierResponse()
    on = _dmg(registry, "PathOfTheBurningSteps", _input(value=4, damage_type=DamageType.SOLAR))
    assert on.impact_dmg_scale == pytest.approx(1.25)


def test_surge_mod_pvp(registry):
    result = _dmg(registry, "SurgeMod", _input(value=2, pvp=True))
    assert result.impact_dmg_scale == pytest.approx(1.045)


def test_surge_is_monotonic_in_value(registry):
    scales = [_dmg(registry, "SurgeMod", _input(value=v)).impact_dmg_scale for v in range(6)]
    assert scales == sorted(scales)
    assert scales[0] == 1.0


def test_mask_of_bakris_elements(registry):
    arc = _dmg(registry, "MaskOfBakris", _input(damage_type=DamageType.ARC))
    solar = _dmg(registry, "MaskOfBakris", _input(damage_type=DamageType.SOLAR))
    assert arc.impact_dmg_scale == pytest.approx(1.25)
    assert solar.impact_dmg_scale == 1.0


def test_sanguine_alchemy_ignores_kinetic(registry):
    result = _dmg(registry, "SanguineAlchemy", _input(damage_type=DamageType.KINETIC))
    assert result == DamageModifierResponse()


def test_lucent_blades(registry):
    kind = ModifierKind.STAT_BUMP
    assert registry.evaluate(kind, "LucentBlades", _input(value=2)) == {}
    sword = registry.evaluate(kind, "LucentBlades", _input(value=2, weapon_type=WeaponType.SWORD))
    assert sword == {int(StatHashes.CHARGE_RATE): 50}
    maxed = registry.evaluate(kind, "LucentBlades", _input(value=9, weapon_type=WeaponType.SWORD))
    assert maxed == {int(StatHashes.CHARGE_RATE): 60}


def test_aeon_force(registry):
    reload = registry.evaluate(ModifierKind.RELOAD, "AeonForce", _input())
    assert reload == ReloadModifierResponse(reload_stat_add=30, reload_time_scale=0.85)
    stats = registry.evaluate(ModifierKind.STAT_BUMP, "AeonForce", _input())
    assert stats == {int(StatHashes.RELOAD): 30, int(StatHashes.HANDLING): 40}
    handling = registry.evaluate(ModifierKind.HANDLING, "AeonForce", _input())
    assert handling.stat_add == 40
    off = registry.evaluate(ModifierKind.HANDLING, "AeonForce", _input(value=0))
    assert off == HandlingModifierResponse()


def test_umbral_sharpening(registry):
    assert _dmg(registry, "UmbralSharpening", _input(value=10)).impact_dmg_scale == pytest.approx(1.4)
    assert _dmg(registry, "UmbralSharpening", _input(value=3, pvp=True)).impact_dmg_scale == 1.0


def test_enhanced_scanner_augment_first_value(registry):
    result = _dmg(registry, "EnhancedScannerAugment", _input(value=0))
    assert result.impact_dmg_scale == pytest.approx(1.08)


def test_no_backup_plans_needs_shotgun(registry):
    assert _dmg(registry, "NoBackupPlans", _input()) == DamageModifierResponse()
    shotgun = _dmg(registry, "NoBackupPlans", _input(weapon_type=WeaponType.SHOTGUN))
    assert shotgun.impact_dmg_scale == pytest.approx(1.35)


def test_doom_fang_needs_void(registry):
    assert _dmg(registry, "DoomFang", _input(value=3)) == DamageModifierResponse()
    void = _dmg(registry, "DoomFang", _input(value=3, damage_type=DamageType.VOID))
    assert void.impact_dmg_scale == pytest.approx(1.22)


def test_burning_fists(registry):
    assert _dmg(registry, "BurningFists", _input(value=3, pvp=True)).impact_dmg_scale == pytest.approx(1.2)
    assert _dmg(registry, "BurningFists", _input(value=9)).impact_dmg_scale == pytest.approx(1.35)
    assert _dmg(registry, "BurningFists", _input(value=0)) == DamageModifierResponse()