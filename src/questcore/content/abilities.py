"""Martial ability catalog.

Abilities work like spells but roll their attack with the stat named in
``stat``. Utility abilities (rests, travel) are usable only outside combat.
"""

from __future__ import annotations

from questcore.models.content import AbilityDef
from questcore.models.enums import Ability, ActionKind


HEAL = ActionKind.HEAL
UTILITY = ActionKind.UTILITY


ABILITIES: tuple[AbilityDef, ...] = (
    # Knight
    AbilityDef(id="shieldBash", name="Shield Bash", description="Slam your shield into the foe",
               mp_cost=2, damage_count=1, damage_die=8, stat=Ability.STR),
    AbilityDef(id="actionSurge", name="Action Surge", description="Push beyond your limits",
               mp_cost=5, level_required=5, damage_count=2, damage_die=10, stat=Ability.STR),
    AbilityDef(id="secondWind", name="Second Wind", description="Catch your breath and recover",
               mp_cost=6, level_required=9, damage_count=3, damage_die=8, kind=HEAL, stat=Ability.STR),
    AbilityDef(id="championStrike", name="Champion Strike", description="A legendary blow that cleaves armor",
               mp_cost=12, level_required=15, damage_count=4, damage_die=10, stat=Ability.STR),
    # Ranger
    AbilityDef(id="aimedShot", name="Aimed Shot", description="Take careful aim at a weak point",
               mp_cost=2, damage_count=1, damage_die=10, stat=Ability.DEX),
    AbilityDef(id="huntersMark", name="Hunter's Mark", description="Mark your prey for extra damage",
               mp_cost=5, level_required=5, damage_count=2, damage_die=8, stat=Ability.DEX,
               bonus_action=True),
    AbilityDef(id="naturesRemedy", name="Nature's Remedy", description="Use herbal knowledge to mend wounds",
               mp_cost=6, level_required=9, damage_count=3, damage_die=6, kind=HEAL, stat=Ability.DEX),
    AbilityDef(id="deadeye", name="Deadeye", description="An arrow that never misses its mark",
               mp_cost=12, level_required=15, damage_count=5, damage_die=8, stat=Ability.DEX,
               auto_hit=True),
    # Rogue
    AbilityDef(id="sneakAttack", name="Sneak Attack", description="Strike from the shadows",
               mp_cost=2, damage_count=2, damage_die=6, stat=Ability.DEX),
    AbilityDef(id="cunningStrike", name="Cunning Action", description="Exploit an opening with quick reflexes",
               mp_cost=5, level_required=5, damage_count=3, damage_die=6, stat=Ability.DEX,
               bonus_action=True),
    AbilityDef(id="shadowStep", name="Shadow Step", description="Vanish into darkness and recover",
               mp_cost=6, level_required=9, damage_count=2, damage_die=8, kind=HEAL, stat=Ability.DEX),
    AbilityDef(id="assassinate", name="Assassinate", description="A lethal strike to a vital point",
               mp_cost=12, level_required=15, damage_count=6, damage_die=6, stat=Ability.DEX),
    # Paladin
    AbilityDef(id="smite", name="Divine Smite", description="Channel radiant energy into your strike",
               mp_cost=2, damage_count=1, damage_die=8, stat=Ability.STR),
    AbilityDef(id="layOnHands", name="Lay on Hands", description="Heal with a blessed divine touch",
               mp_cost=4, level_required=4, damage_count=3, damage_die=8, kind=HEAL, stat=Ability.CHA),
    AbilityDef(id="holyStrike", name="Holy Strike", description="A blazing blow of righteous fury",
               mp_cost=7, level_required=9, damage_count=3, damage_die=8, stat=Ability.STR),
    AbilityDef(id="greaterSmite", name="Greater Smite", description="Unleash the full wrath of your oath",
               mp_cost=12, level_required=15, damage_count=5, damage_die=8, stat=Ability.STR),
    # Barbarian
    AbilityDef(id="recklessStrike", name="Reckless Attack", description="Throw caution to the wind",
               mp_cost=2, damage_count=2, damage_die=6, stat=Ability.STR),
    AbilityDef(id="rage", name="Rage", description="Enter a berserker fury",
               mp_cost=5, level_required=5, damage_count=3, damage_die=8, stat=Ability.STR),
    AbilityDef(id="endure", name="Relentless Endurance", description="Shrug off pain through primal will",
               mp_cost=6, level_required=9, damage_count=3, damage_die=8, kind=HEAL, stat=Ability.STR),
    AbilityDef(id="titansBlow", name="Titan's Blow", description="A strike that shakes the earth itself",
               mp_cost=12, level_required=15, damage_count=5, damage_die=10, stat=Ability.STR),
    # Druid
    AbilityDef(id="thornWhip", name="Thorn Whip", description="Lash the foe with a thorny vine",
               mp_cost=2, damage_count=1, damage_die=8, stat=Ability.WIS),
    AbilityDef(id="wildShape", name="Wild Shape", description="Take a beast's form and maul the foe",
               mp_cost=5, level_required=5, damage_count=2, damage_die=8, stat=Ability.WIS),
    AbilityDef(id="naturesWrath", name="Nature's Wrath", description="Roots and stones crush the foe",
               mp_cost=7, level_required=9, damage_count=3, damage_die=8, stat=Ability.WIS),
    AbilityDef(id="primalStrike", name="Primal Strike", description="Strike with the fury of the wild",
               mp_cost=12, level_required=15, damage_count=5, damage_die=8, stat=Ability.WIS),
    # Monk
    AbilityDef(id="flurryOfBlows", name="Flurry of Blows", description="A rapid barrage of strikes",
               mp_cost=2, damage_count=2, damage_die=4, stat=Ability.DEX,
               bonus_action=True),
    AbilityDef(id="kiStrike", name="Ki Strike", description="Focus ki into a single blow",
               mp_cost=5, level_required=5, damage_count=2, damage_die=8, stat=Ability.DEX),
    AbilityDef(id="patientDefense", name="Patient Defense", description="Steady your breath and recover",
               mp_cost=6, level_required=9, damage_count=2, damage_die=8, kind=HEAL, stat=Ability.WIS),
    AbilityDef(id="stunningStrike", name="Stunning Strike", description="A precise blow to a nerve cluster",
               mp_cost=12, level_required=15, damage_count=5, damage_die=8, stat=Ability.DEX),
    # Bard
    AbilityDef(id="bardicInspiration", name="Bardic Inspiration", description="A rousing tune restores vigor",
               mp_cost=3, damage_count=1, damage_die=6, kind=HEAL, stat=Ability.CHA),
    AbilityDef(id="cuttingWords", name="Cutting Words", description="A barbed insult saps the foe",
               mp_cost=3, level_required=3, damage_count=2, damage_die=6, stat=Ability.CHA),
    # Utility
    AbilityDef(id="shortRest", name="Short Rest", description="Catch your breath outside of battle",
               kind=UTILITY),
    AbilityDef(id="fastTravel", name="Fast Travel", description="Travel quickly to a known town",
               mp_cost=4, level_required=5, kind=UTILITY),
    AbilityDef(id="evac", name="Evacuate", description="Escape the current dungeon",
               mp_cost=2, level_required=3, kind=UTILITY),
)


__all__ = ["ABILITIES"]
