"""Enumeration types for questcore.

These enums are shared by content definitions, runtime state and the
combat/progression engines.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six ability scores.

    Values match the ``PlayerStats`` field names so an ability can be used
    directly with ``getattr``.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the display name (e.g. 'Strength')."""
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g. 'STR')."""
        return self.name


class Element(StrEnum):
    """Damage elements carried by spells, abilities, weapons and monster attacks."""

    FIRE = "fire"
    ICE = "ice"
    LIGHTNING = "lightning"
    POISON = "poison"
    NECROTIC = "necrotic"
    RADIANT = "radiant"
    THUNDER = "thunder"
    FORCE = "force"
    PSYCHIC = "psychic"


class ActionKind(StrEnum):
    """What a spell or ability does when used."""

    DAMAGE = "damage"
    HEAL = "heal"
    UTILITY = "utility"


class MonsterAbilityKind(StrEnum):
    """What a monster special ability does."""

    DAMAGE = "damage"
    HEAL = "heal"


class ItemType(StrEnum):
    """Inventory item categories."""

    WEAPON = "weapon"
    ARMOR = "armor"
    SHIELD = "shield"
    CONSUMABLE = "consumable"
    KEY = "key"
    MOUNT = "mount"


class Restores(StrEnum):
    """Resource a consumable restores."""

    HP = "hp"
    MP = "mp"


class WeatherType(StrEnum):
    """Weather conditions that affect combat accuracy."""

    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"
    SANDSTORM = "sandstorm"
    STORM = "storm"
    FOG = "fog"


class LevelUpPhase(StrEnum):
    """Phases of the deferred level-up pipeline.

    EARNING: no level-ups waiting.
    PENDING: XP thresholds crossed, waiting for a rest.
    APPLIED: the last pending batch was applied; behaves like EARNING.
    """

    EARNING = "earning"
    PENDING = "pending"
    APPLIED = "applied"


class Side(StrEnum):
    """Combatant side in a battle."""

    PLAYER = "player"
    MONSTER = "monster"


class BattleOutcome(StrEnum):
    """How a battle ended (or that it has not)."""

    ONGOING = "ongoing"
    VICTORY = "victory"
    DEFEAT = "defeat"
    FLED = "fled"


__all__ = [
    "Ability",
    "Element",
    "ActionKind",
    "MonsterAbilityKind",
    "ItemType",
    "Restores",
    "WeatherType",
    "LevelUpPhase",
    "Side",
    "BattleOutcome",
]
