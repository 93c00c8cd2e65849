"""Rules constants shared by the combat and progression engines."""

from __future__ import annotations

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score reachable through stat allocation."""

# =============================================================================
# Point Buy Constants
# =============================================================================

POINT_BUY_TOTAL = 27
"""Total points that a valid point-buy allocation must spend."""

POINT_BUY_MIN = 8
"""Minimum ability score in point buy."""

POINT_BUY_MAX = 15
"""Maximum ability score in point buy (before class boosts)."""

POINT_BUY_COSTS = {
    8: 0,
    9: 1,
    10: 2,
    11: 3,
    12: 4,
    13: 5,
    14: 7,
    15: 9,
}

# =============================================================================
# Dice
# =============================================================================

SUPPORTED_DIE_SIZES = frozenset({4, 6, 8, 10, 12, 20, 100})
"""Die sizes accepted by the dice engine."""

NATURAL_CRITICAL = 20
NATURAL_FUMBLE = 1

# =============================================================================
# Combat Constants
# =============================================================================

BASE_ARMOR_CLASS = 10
"""Armor class before DEX, armor, shield and talent bonuses."""

WEAPON_DAMAGE_DIE = 6
"""Base weapon strike die; the weapon contributes a flat bonus on top."""

MIN_WEAPON_DAMAGE = 1
"""Damage floor for non-critical weapon hits."""

# =============================================================================
# Progression
# =============================================================================

MAX_CHARACTER_LEVEL = 20
"""Level cap."""

MIN_CHARACTER_LEVEL = 1

XP_PER_LEVEL_FACTOR = 100
"""Total XP to reach level n is XP_PER_LEVEL_FACTOR * n**2."""

ASI_LEVELS = frozenset({4, 8, 12, 16, 19})
"""Levels that grant stat points."""

ASI_POINTS = 2
"""Stat points granted at each ASI level."""

STARTING_HP_BONUS = 10
STARTING_MP_BASE = 4
MP_PER_LEVEL_BASE = 2
STARTING_GOLD = 50


__all__ = [
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "POINT_BUY_TOTAL",
    "POINT_BUY_MIN",
    "POINT_BUY_MAX",
    "POINT_BUY_COSTS",
    "SUPPORTED_DIE_SIZES",
    "NATURAL_CRITICAL",
    "NATURAL_FUMBLE",
    "BASE_ARMOR_CLASS",
    "WEAPON_DAMAGE_DIE",
    "MIN_WEAPON_DAMAGE",
    "MAX_CHARACTER_LEVEL",
    "MIN_CHARACTER_LEVEL",
    "XP_PER_LEVEL_FACTOR",
    "ASI_LEVELS",
    "ASI_POINTS",
    "STARTING_HP_BONUS",
    "STARTING_MP_BASE",
    "MP_PER_LEVEL_BASE",
    "STARTING_GOLD",
]
