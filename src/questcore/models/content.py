"""Immutable content definitions.

Spells, abilities, items, talents, monsters and classes are authored once
and looked up by id through the content registry. They are never mutated
at runtime; battle-time monster state lives in ``questcore.models.combat``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from questcore.core.constants import SUPPORTED_DIE_SIZES
from questcore.models.enums import (
    Ability,
    ActionKind,
    Element,
    ItemType,
    MonsterAbilityKind,
    Restores,
    WeatherType,
)


# =============================================================================
# Type Aliases
# =============================================================================

ContentId = Annotated[str, Field(min_length=1, max_length=64)]
DiceCount = Annotated[int, Field(ge=0, le=50)]
LevelRequirement = Annotated[int, Field(ge=1, le=20)]
Chance = Annotated[float, Field(ge=0.0, le=1.0)]


def _check_die(value: int) -> int:
    if value != 0 and value not in SUPPORTED_DIE_SIZES:
        raise ValueError(f"unsupported die size d{value}")
    return value


class ContentModel(BaseModel):
    """Base class for content definitions."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


# =============================================================================
# Elements
# =============================================================================


class ElementalProfile(ContentModel):
    """Elemental interactions of a damage target.

    An element may appear in more than one list; the elemental modifier
    resolves overlaps with immune > weak > resistant.
    """

    immunities: tuple[Element, ...] = Field(default=(), description="Elements dealing no damage")
    weaknesses: tuple[Element, ...] = Field(default=(), description="Elements dealing double damage")
    resistances: tuple[Element, ...] = Field(default=(), description="Elements dealing half damage")


# =============================================================================
# Spells & Abilities
# =============================================================================


class ActionDef(ContentModel):
    """Shared shape of spells and martial abilities."""

    id: ContentId
    name: str
    description: str = ""
    mp_cost: int = Field(default=0, ge=0, description="MP consumed on use")
    level_required: LevelRequirement = 1
    damage_count: DiceCount = 0
    damage_die: int = Field(default=0, description="Die size; 0 for utility actions")
    kind: ActionKind = ActionKind.DAMAGE
    element: Element | None = None
    auto_hit: bool = Field(default=False, description="Damage lands without an attack roll")

    @field_validator("damage_die")
    @classmethod
    def validate_die(cls, value: int) -> int:
        """Only supported die sizes (or 0) are allowed."""
        return _check_die(value)

    @property
    def is_utility(self) -> bool:
        return self.kind == ActionKind.UTILITY

    @property
    def is_heal(self) -> bool:
        return self.kind == ActionKind.HEAL


class SpellDef(ActionDef):
    """A spell. Spell attacks use the caster's class primary stat."""


class AbilityDef(ActionDef):
    """A martial ability whose attack roll is driven by ``stat``."""

    stat: Ability = Field(default=Ability.STR, description="Stat driving the attack roll")
    bonus_action: bool = Field(
        default=False,
        description="Used alongside the turn action instead of ending the turn",
    )


# =============================================================================
# Items
# =============================================================================


class ItemDef(ContentModel):
    """An inventory item.

    ``effect`` is the flat bonus for weapons, the AC bonus for armor and
    shields, and the amount restored for consumables.
    """

    id: ContentId
    name: str
    description: str = ""
    item_type: ItemType
    effect: int = 0
    cost: int = Field(default=0, ge=0)
    two_handed: bool = False
    light: bool = False
    finesse: bool = False
    element: Element | None = None
    restores: Restores | None = None

    @model_validator(mode="after")
    def validate_flags(self) -> "ItemDef":
        """Reject flag combinations that cannot occur on real items."""
        if self.restores is not None and self.item_type != ItemType.CONSUMABLE:
            raise ValueError(f"{self.id}: only consumables restore resources")
        if self.item_type != ItemType.WEAPON and (self.two_handed or self.light or self.finesse):
            raise ValueError(f"{self.id}: weapon flags set on a {self.item_type}")
        if self.two_handed and self.light:
            raise ValueError(f"{self.id}: a weapon cannot be both light and two-handed")
        return self

    @property
    def is_weapon(self) -> bool:
        return self.item_type == ItemType.WEAPON


# =============================================================================
# Talents
# =============================================================================


class TalentDef(ContentModel):
    """A passive talent unlocked by level.

    HP/MP bonuses are applied once on unlock. Attack, damage and AC bonuses
    are summed over known talents whenever they are needed.
    """

    id: ContentId
    name: str
    description: str = ""
    level_required: LevelRequirement
    class_restriction: tuple[str, ...] = Field(default=(), description="Empty means every class")
    max_hp_bonus: int = Field(default=0, ge=0)
    max_mp_bonus: int = Field(default=0, ge=0)
    attack_bonus: int = 0
    damage_bonus: int = 0
    ac_bonus: int = 0

    def available_to(self, class_id: str) -> bool:
        """Check whether a class may learn this talent."""
        return not self.class_restriction or class_id in self.class_restriction


# =============================================================================
# Monsters
# =============================================================================


class MonsterAbilityDef(ContentModel):
    """A monster special ability tried with probability ``chance`` each turn."""

    name: str
    chance: Chance
    damage_count: DiceCount
    damage_die: int
    kind: MonsterAbilityKind = MonsterAbilityKind.DAMAGE
    self_heal: bool = Field(default=False, description="Monster recovers HP equal to damage dealt")
    element: Element | None = None

    @field_validator("damage_die")
    @classmethod
    def validate_die(cls, value: int) -> int:
        """Only supported die sizes (or 0) are allowed."""
        return _check_die(value)


class MonsterDropDef(ContentModel):
    """An item a monster may leave behind, rolled once per victory."""

    item_id: ContentId
    chance: Chance


class MonsterDef(ContentModel):
    """Template for a monster; battles clone it into a ``Monster``."""

    id: ContentId
    name: str
    hp: int = Field(ge=1)
    ac: int
    attack_bonus: int
    damage_count: DiceCount
    damage_die: int
    xp_reward: int = Field(default=0, ge=0)
    gold_reward: int = Field(default=0, ge=0)
    is_boss: bool = False
    elemental: ElementalProfile | None = None
    abilities: tuple[MonsterAbilityDef, ...] = ()
    drops: tuple[MonsterDropDef, ...] = ()
    weather_affinity: tuple[WeatherType, ...] = ()

    @field_validator("damage_die")
    @classmethod
    def validate_die(cls, value: int) -> int:
        """Only supported die sizes (or 0) are allowed."""
        return _check_die(value)


# =============================================================================
# Classes
# =============================================================================


class ClassDef(ContentModel):
    """A playable class.

    The primary stat drives weapon and spell attack rolls. ``spells`` and
    ``abilities`` are whitelists unlocked by level during progression.
    """

    id: ContentId
    label: str
    description: str = ""
    primary_stat: Ability
    hit_die: int
    stat_boosts: dict[Ability, int] = Field(default_factory=dict)
    spells: tuple[str, ...] = ()
    abilities: tuple[str, ...] = ()
    starting_weapon_id: str | None = None

    @field_validator("hit_die")
    @classmethod
    def validate_die(cls, value: int) -> int:
        """Only supported die sizes (or 0) are allowed."""
        return _check_die(value)


__all__ = [
    "ContentModel",
    "ElementalProfile",
    "ActionDef",
    "SpellDef",
    "AbilityDef",
    "ItemDef",
    "TalentDef",
    "MonsterAbilityDef",
    "MonsterDropDef",
    "MonsterDef",
    "ClassDef",
]
