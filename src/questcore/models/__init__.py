"""Pydantic V2 schemas for content definitions, runtime state and results."""

from __future__ import annotations

from questcore.models.combat import (
    CombatResult,
    InitiativeResult,
    Monster,
    MonsterAbilityResult,
)
from questcore.models.content import (
    AbilityDef,
    ActionDef,
    ClassDef,
    ElementalProfile,
    ItemDef,
    MonsterAbilityDef,
    MonsterDef,
    MonsterDropDef,
    SpellDef,
    TalentDef,
)
from questcore.models.enums import (
    Ability,
    ActionKind,
    BattleOutcome,
    Element,
    ItemType,
    LevelUpPhase,
    MonsterAbilityKind,
    Restores,
    Side,
    WeatherType,
)
from questcore.models.player import LevelUpTracker, PlayerState, PlayerStats
from questcore.models.progression import (
    FieldActionResult,
    ItemUseResult,
    LevelUpResult,
    RestResult,
    XPAwardResult,
)


__all__ = [
    # Enums
    "Ability",
    "ActionKind",
    "BattleOutcome",
    "Element",
    "ItemType",
    "LevelUpPhase",
    "MonsterAbilityKind",
    "Restores",
    "Side",
    "WeatherType",
    # Content
    "AbilityDef",
    "ActionDef",
    "ClassDef",
    "ElementalProfile",
    "ItemDef",
    "MonsterAbilityDef",
    "MonsterDef",
    "MonsterDropDef",
    "SpellDef",
    "TalentDef",
    # State
    "LevelUpTracker",
    "Monster",
    "PlayerState",
    "PlayerStats",
    # Results
    "CombatResult",
    "InitiativeResult",
    "FieldActionResult",
    "ItemUseResult",
    "LevelUpResult",
    "MonsterAbilityResult",
    "RestResult",
    "XPAwardResult",
]
