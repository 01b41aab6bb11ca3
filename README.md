# oracle_engine

A calculation library for Destiny 2 weapons. It holds the game's weapon,
ammo, stat and damage enumerations, the power-level scaling of damage in PvE
activities, and the modifier functions that perks, mods, buffs, debuffs and
exotic armor apply to a weapon's damage, firing, handling, range, reload,
magazine, inventory, flinch and stats.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `oracle_engine.enums`: `AmmoType`, `WeaponType` and `StatHashes` (integer
  enums whose unknown values map to `UNKNOWN`), `StatHashes.is_weapon_stat()`,
  `DamageType` with `DamageType.from_hash()`, and `DamageSource`.
- `oracle_engine.log`: `LogLevel` (`ERROR`, `WARNING`, `INFO`, `DEBUG`),
  `set_log_level`, `get_log_level`, `extern_log` and `log`. Messages at or
  below the active level are written to standard error; the default level is
  `WARNING`. An out-of-range integer level raises `ValueError`.
- `oracle_engine.enemies`: `EnemyType` and `Enemy`, whose
  `get_adjusted_health()` takes damage resistance into account.
- `oracle_engine.abilities`: `AbilityType`, `AbilityDamageProfile` and
  `Ability`.
- `oracle_engine.activity`: `Activity`, `Player`, `PlayerClass`,
  `DifficultyOptions` (`NORMAL`, `RAID`, `MASTER`) and `DifficultyData`, plus
  `rpl_mult`, `get_gear_delta_mult`, `get_wep_delta_mult` and
  `remove_pve_bonuses`. `Activity.get_rpl_mult()` and
  `Activity.get_pl_delta()` give the recommended-power and power-delta
  multipliers.
- `oracle_engine.perks.modifiers`: `CalculationInput` (with the
  `construct_pve_sparse` and `construct_pvp` constructors),
  `ModifierResponseInput`, the response dataclasses such as
  `DamageModifierResponse`, `FiringModifierResponse`,
  `HandlingModifierResponse`, `RangeModifierResponse`,
  `ReloadModifierResponse`, `MagazineModifierResponse`,
  `InventoryModifierResponse`, `FlinchModifierResponse`, `RefundResponse`,
  `ExtraDamageResponse` and `ExplosivePercentResponse`, the `ModifierKind`
  enum, `clamp`, and `ModifierRegistry`.
- `oracle_engine.perks.buff_perks`, `meta_perks`, `exotic_armor`,
  `exotic_perks` and `exotic_perks_extra`: each has a `register(registry)`
  function that adds its modifier functions to a `ModifierRegistry`.

## Example

```python
from oracle_engine.activity import Activity, DifficultyOptions
from oracle_engine.enums import WeaponType
from oracle_engine.perks import buff_perks, meta_perks
from oracle_engine.perks.modifiers import (
    CalculationInput,
    ModifierKind,
    ModifierRegistry,
    ModifierResponseInput,
)

activity = Activity(difficulty=DifficultyOptions.MASTER)
print(activity.get_rpl_mult(), activity.get_pl_delta())

registry = ModifierRegistry()
buff_perks.register(registry)
meta_perks.register(registry)

cache = {}
calc = CalculationInput(weapon_type=WeaponType.HANDCANNON)
well = registry.evaluate(
    ModifierKind.DAMAGE,
    "WellOfRadiance",
    ModifierResponseInput(calc_data=calc, value=1, cached_data=cache),
)
ward = registry.evaluate(
    ModifierKind.DAMAGE,
    "WardOfDawn",
    ModifierResponseInput(calc_data=calc, value=1, cached_data=cache),
)
print(well.impact_dmg_scale, ward.impact_dmg_scale)  # 1.25 1.0
```

Modifier functions are registered under a `ModifierKind` and a perk name
such as `"WellOfRadiance"` or `"BuiltIn"`; registering the same pair again
replaces the earlier function. `registry.get(kind, perk)` returns the
function or `None`, and `registry.evaluate(kind, perk, input)` runs it, or
returns the neutral response of that kind when nothing is registered.

The `cached_data` dictionary is shared by the modifiers of one calculation.
Buffs of one family (empowering buffs, surges, debuffs) do not stack: each
returns only the extra factor needed to reach its own strength over the
strongest one already recorded in the cache, so a weaker buff after a stronger
one contributes 1.0.

## What is not included

The package has no weapon model and no command-line program. It does not
compute a weapon's stats, ranges, handling or reload times, or combine the
responses of several perks into a final result; it provides the modifier
functions and the activity scaling that such a calculation uses. The caller
supplies the weapon data a modifier reads: `CalculationInput.stats` maps stat
hashes to objects with a `perk_val()` method and a `base_value` attribute, and
`curr_firing_data` is an object with `damage`, `crit_mult` and `burst_size`.