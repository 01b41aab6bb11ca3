"""Enumerations, activity scaling and perk modifiers for Destiny 2 weapon calculations."""

__version__ = "8.2.6"