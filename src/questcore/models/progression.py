"""Result records returned by progression, item and rest operations."""

from __future__ import annotations

from pydantic import Field

from questcore.models.combat import ResultModel
from questcore.models.content import AbilityDef, SpellDef, TalentDef


class XPAwardResult(ResultModel):
    """Outcome of an XP award.

    Attributes:
        xp: Total XP after the award.
        pending_levels: Pending level-ups after the award.
        gained_levels: Level-ups newly queued by this award.
    """

    xp: int
    pending_levels: int
    gained_levels: int = 0


class LevelUpResult(ResultModel):
    """Outcome of applying pending level-ups."""

    leveled_up: bool = False
    new_level: int
    new_spells: tuple[SpellDef, ...] = ()
    new_abilities: tuple[AbilityDef, ...] = ()
    new_talents: tuple[TalentDef, ...] = ()
    asi_gained: int = Field(default=0, description="Stat points granted")
    hp_gained: int = 0
    mp_gained: int = 0


class ItemUseResult(ResultModel):
    """Outcome of using an inventory item."""

    used: bool
    message: str


class RestResult(ResultModel):
    """Outcome of a short or long rest."""

    rested: bool
    message: str
    hp_restored: int = 0
    mp_restored: int = 0
    level_up: LevelUpResult | None = None


class FieldActionResult(ResultModel):
    """Outcome of a spell or ability used outside of battle."""

    used: bool
    message: str
    healing: int = 0
    mp_used: int = 0
    rest: RestResult | None = None


__all__ = [
    "XPAwardResult",
    "LevelUpResult",
    "ItemUseResult",
    "FieldActionResult",
    "RestResult",
]
