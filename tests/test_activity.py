import math

import pytest

from oracle_engine.activity import (
    Activity,
    DifficultyData,
    DifficultyOptions,
    Player,
    PlayerClass,
    get_gear_delta_mult,
    get_wep_delta_mult,
    remove_pve_bonuses,
    rpl_mult,
)


def _activity(power, rpl=1600, difficulty=DifficultyOptions.NORMAL, cap=100):
    return Activity(difficulty=difficulty, rpl=rpl, cap=cap, player=Player(power=power))


def test_default_activity():
    activity = Activity()
    assert activity.rpl == 1600
    assert activity.cap == 100
    assert activity.player.power == 1810
    assert activity.player.class_ is PlayerClass.UNKNOWN
    assert activity.difficulty is DifficultyOptions.NORMAL


def test_difficulty_from_value_falls_back_to_normal():
    assert DifficultyOptions.from_value(2) is DifficultyOptions.RAID
    assert DifficultyOptions.from_value(3) is DifficultyOptions.MASTER
    assert DifficultyOptions.from_value(42) is DifficultyOptions.NORMAL


def test_difficulty_data_names_and_caps():
    assert DifficultyOptions.NORMAL.get_difficulty_data().cap == 50
    assert DifficultyOptions.RAID.get_difficulty_data().name == "Raid & Dungeon"
    assert DifficultyOptions.MASTER.get_difficulty_data().cap == 20


def test_table_points_are_exact():
    data = DifficultyOptions.NORMAL.get_difficulty_data()
    assert data.multiplier_at(-50.0) == pytest.approx(0.5)
    assert data.multiplier_at(-10.0) == pytest.approx(0.78)


def test_table_interpolates_between_points():
    data = DifficultyOptions.NORMAL.get_difficulty_data()
    value = data.multiplier_at(-45.0)
    assert 0.5 < value < 0.5405


def test_table_outside_domain_raises():
    data = DifficultyData("x", 0, ((0.0, 1.0), (1.0, 2.0)))
    with pytest.raises(ValueError):
        data.multiplier_at(-1.0)
    with pytest.raises(ValueError):
        data.multiplier_at(1.5)


def test_gear_delta_above_rpl_uses_zero_point():
    assert get_gear_delta_mult(Activity()) == pytest.approx(1.0)
    master = _activity(1700, difficulty=DifficultyOptions.MASTER)
    assert get_gear_delta_mult(master) == pytest.approx(0.85)


def test_gear_delta_far_under_is_zero():
    assert get_gear_delta_mult(_activity(1500)) == 0.0


def test_gear_delta_increases_with_power():
    values = [get_gear_delta_mult(_activity(1600 + d)) for d in range(-99, 1, 9)]
    assert values == sorted(values)


def test_wep_delta_at_parity_is_one():
    assert get_wep_delta_mult(_activity(1600)) == pytest.approx(1.0)


def test_wep_delta_far_under_is_zero():
    assert get_wep_delta_mult(_activity(1400)) == 0.0


def test_wep_delta_respects_caps():
    normal = get_wep_delta_mult(_activity(2000))
    assert get_wep_delta_mult(_activity(1650)) == pytest.approx(normal)
    raid = get_wep_delta_mult(_activity(2000, difficulty=DifficultyOptions.RAID))
    assert get_wep_delta_mult(_activity(1620, difficulty=DifficultyOptions.RAID)) == pytest.approx(raid)
    assert get_wep_delta_mult(_activity(2000, cap=10)) == pytest.approx(
        get_wep_delta_mult(_activity(1610))
    )


def test_wep_delta_exponential_region():
    value = get_wep_delta_mult(_activity(1530))
    assert value == pytest.approx(math.exp(0.00672 * -70))


def test_wep_delta_monotonic():
    values = [get_wep_delta_mult(_activity(1600 + d)) for d in range(-99, 51)]
    assert values == sorted(values)


def test_wep_delta_cap_below_range_raises():
    with pytest.raises(ValueError):
        get_wep_delta_mult(_activity(1600, cap=-200))


def test_rpl_mult_values():
    assert rpl_mult(10.0) == pytest.approx(1.0)
    assert rpl_mult(1600.0) > rpl_mult(1500.0)
    assert Activity().get_rpl_mult() == pytest.approx(rpl_mult(1600.0))


def test_pl_delta_is_product():
    activity = _activity(1580)
    assert activity.get_pl_delta() == pytest.approx(
        get_gear_delta_mult(activity) * get_wep_delta_mult(activity)
    )


def test_remove_pve_bonuses_round_trip():
    activity = _activity(1590)
    base = remove_pve_bonuses(1000.0, 1.2, activity)
    restored = base * get_gear_delta_mult(activity) * activity.get_rpl_mult() * 1.2
    assert restored == pytest.approx(1000.0)