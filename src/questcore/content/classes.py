"""Playable class definitions."""

from __future__ import annotations

from questcore.models.content import ClassDef
from questcore.models.enums import Ability


STR = Ability.STR
DEX = Ability.DEX
CON = Ability.CON
INT = Ability.INT
WIS = Ability.WIS
CHA = Ability.CHA

DEFAULT_CLASS_ID = "knight"


CLASSES: tuple[ClassDef, ...] = (
    ClassDef(
        id="knight", label="Knight",
        description="A stalwart warrior clad in heavy armor, master of sword and shield.",
        primary_stat=STR, hit_die=10, stat_boosts={STR: 2, CON: 1},
        abilities=("shieldBash", "actionSurge", "secondWind", "championStrike",
                   "fastTravel", "evac", "shortRest"),
        starting_weapon_id="startSword",
    ),
    ClassDef(
        id="ranger", label="Ranger",
        description="A skilled hunter who wields nature magic and deadly aim.",
        primary_stat=DEX, hit_die=10, stat_boosts={DEX: 2, WIS: 1},
        spells=("huntersMark", "goodberry", "cureWounds", "spikeGrowth", "swiftQuiver"),
        abilities=("aimedShot", "huntersMark", "naturesRemedy", "deadeye",
                   "fastTravel", "evac", "shortRest"),
        starting_weapon_id="startBow",
    ),
    ClassDef(
        id="wizard", label="Wizard",
        description="A scholarly arcanist who masters magic through study.",
        primary_stat=INT, hit_die=6, stat_boosts={INT: 2, WIS: 1},
        spells=("fireBolt", "rayOfFrost", "magicMissile", "thunderwave", "scorchingRay",
                "fireball", "lightningBolt", "iceStorm", "coneOfCold", "chainLightning",
                "disintegrate", "meteorSwarm", "powerWordKill", "teleport"),
        abilities=("evac", "shortRest"),
        starting_weapon_id="startStaff",
    ),
    ClassDef(
        id="sorcerer", label="Sorcerer",
        description="A natural-born wielder of chaotic arcane power.",
        primary_stat=CHA, hit_die=6, stat_boosts={CHA: 2, CON: 1},
        spells=("fireBolt", "shockingGrasp", "magicMissile", "thunderwave", "scorchingRay",
                "fireball", "lightningBolt", "coneOfCold", "chainLightning", "disintegrate",
                "meteorSwarm", "powerWordKill", "teleport"),
        abilities=("evac", "shortRest"),
        starting_weapon_id="startStaff",
    ),
    ClassDef(
        id="rogue", label="Rogue",
        description="A cunning scoundrel who strikes from the shadows.",
        primary_stat=DEX, hit_die=8, stat_boosts={DEX: 2, CHA: 1},
        abilities=("sneakAttack", "cunningStrike", "shadowStep", "assassinate",
                   "fastTravel", "evac", "shortRest"),
        starting_weapon_id="startDagger",
    ),
    ClassDef(
        id="paladin", label="Paladin",
        description="A holy warrior who smites evil and heals allies.",
        primary_stat=CHA, hit_die=10, stat_boosts={STR: 1, CHA: 2},
        spells=("wordOfRadiance", "cureWounds", "healingWord", "greaterHeal", "destructiveWave"),
        abilities=("smite", "layOnHands", "holyStrike", "greaterSmite", "evac", "shortRest"),
        starting_weapon_id="startSword",
    ),
    ClassDef(
        id="warlock", label="Warlock",
        description="An occultist bound to an otherworldly patron.",
        primary_stat=CHA, hit_die=8, stat_boosts={CHA: 2, INT: 1},
        spells=("eldritchBlast", "hexCurse", "hellishRebuke", "hungerOfHadar", "synapticStatic",
                "coneOfCold", "disintegrate", "powerWordKill", "teleport"),
        abilities=("evac", "shortRest"),
        starting_weapon_id="startStaff",
    ),
    ClassDef(
        id="cleric", label="Cleric",
        description="A divine servant who heals the faithful and punishes the wicked.",
        primary_stat=WIS, hit_die=8, stat_boosts={WIS: 2, CON: 1},
        spells=("sacredFlame", "tollTheDead", "cureWounds", "healingWord", "guidingBolt",
                "spiritualWeapon", "spiritGuardians", "flameStrike", "massCureWounds", "heal",
                "harm", "bladeBarrier", "regenerate", "massHeal", "teleport"),
        abilities=("evac", "shortRest"),
        starting_weapon_id="startMace",
    ),
    ClassDef(
        id="druid", label="Druid",
        description="A guardian of nature who wields primal magic.",
        primary_stat=WIS, hit_die=8, stat_boosts={WIS: 2, CON: 1},
        spells=("produceFlame", "goodberry", "cureWounds", "healingWord", "thunderwave",
                "moonbeam", "spikeGrowth", "callLightning", "iceStorm", "heal", "sunbeam",
                "fireStorm", "regenerate", "teleport"),
        abilities=("thornWhip", "wildShape", "naturesWrath", "primalStrike", "evac", "shortRest"),
        starting_weapon_id="startStaff",
    ),
    ClassDef(
        id="barbarian", label="Barbarian",
        description="A primal warrior fueled by rage.",
        primary_stat=STR, hit_die=12, stat_boosts={STR: 2, CON: 1},
        abilities=("recklessStrike", "rage", "endure", "titansBlow",
                   "fastTravel", "evac", "shortRest"),
        starting_weapon_id="startAxe",
    ),
    ClassDef(
        id="monk", label="Monk",
        description="A disciplined martial artist who channels ki.",
        primary_stat=DEX, hit_die=8, stat_boosts={DEX: 2, WIS: 1},
        abilities=("flurryOfBlows", "kiStrike", "patientDefense", "stunningStrike",
                   "fastTravel", "evac", "shortRest"),
        starting_weapon_id="startDagger",
    ),
    ClassDef(
        id="bard", label="Bard",
        description="A charismatic performer whose music weaves magic.",
        primary_stat=CHA, hit_die=8, stat_boosts={CHA: 2, DEX: 1},
        spells=("viciousMockery", "cureWounds", "healingWord", "dissonantWhispers", "thunderwave",
                "shatter", "synapticStatic", "greaterHeal", "massCureWounds", "heal", "teleport"),
        abilities=("bardicInspiration", "cuttingWords", "evac", "shortRest"),
        starting_weapon_id="startRapier",
    ),
)


__all__ = ["CLASSES", "DEFAULT_CLASS_ID"]
