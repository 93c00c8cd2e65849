"""Passive talents unlocked by level."""

from __future__ import annotations

from questcore.models.content import TalentDef


TWO_WEAPON_FIGHTING = "twoWeaponFighting"


TALENTS: tuple[TalentDef, ...] = (
    TalentDef(id="toughness", name="Toughness", description="+5 max HP",
              level_required=3, max_hp_bonus=5),
    TalentDef(id="combatTraining", name="Combat Training", description="+1 to attack rolls",
              level_required=6, attack_bonus=1),
    TalentDef(id="resilience", name="Resilience", description="+10 max HP, +3 max MP",
              level_required=10, max_hp_bonus=10, max_mp_bonus=3),
    TalentDef(id="deadlyPrecision", name="Deadly Precision", description="+2 damage on attacks",
              level_required=14, damage_bonus=2),
    TalentDef(id="legendary", name="Legendary", description="+1 AC, +2 to attack rolls",
              level_required=18, ac_bonus=1, attack_bonus=2),
    TalentDef(id=TWO_WEAPON_FIGHTING, name="Two-Weapon Fighting",
              description="Add your ability modifier to off-hand attack damage",
              level_required=2, class_restriction=("knight", "rogue", "bard", "monk")),
)


__all__ = ["TALENTS", "TWO_WEAPON_FIGHTING"]
