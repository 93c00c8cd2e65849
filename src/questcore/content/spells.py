"""Spell catalog, ordered by level requirement."""

from __future__ import annotations

from questcore.models.content import SpellDef
from questcore.models.enums import ActionKind, Element


HEAL = ActionKind.HEAL
UTILITY = ActionKind.UTILITY


SPELLS: tuple[SpellDef, ...] = (
    # Cantrips (0 MP)
    SpellDef(id="fireBolt", name="Fire Bolt", description="Hurl a bolt of fire at a foe",
             damage_count=1, damage_die=10, element=Element.FIRE),
    SpellDef(id="eldritchBlast", name="Eldritch Blast", description="A beam of crackling eldritch energy",
             damage_count=1, damage_die=10, element=Element.FORCE),
    SpellDef(id="sacredFlame", name="Sacred Flame", description="Radiant flame descends on a foe",
             damage_count=1, damage_die=8, element=Element.RADIANT),
    SpellDef(id="viciousMockery", name="Vicious Mockery", description="Insults laced with subtle enchantment",
             damage_count=1, damage_die=4, element=Element.PSYCHIC),
    SpellDef(id="produceFlame", name="Produce Flame", description="A flickering flame appears in your hand",
             damage_count=1, damage_die=8, element=Element.FIRE),
    SpellDef(id="tollTheDead", name="Toll the Dead", description="A dolorous bell damages a creature",
             damage_count=1, damage_die=12, element=Element.NECROTIC),
    SpellDef(id="rayOfFrost", name="Ray of Frost", description="A frigid beam of blue-white light",
             damage_count=1, damage_die=8, element=Element.ICE),
    SpellDef(id="shockingGrasp", name="Shocking Grasp", description="Lightning springs from your hand",
             damage_count=1, damage_die=8, element=Element.LIGHTNING),
    SpellDef(id="wordOfRadiance", name="Word of Radiance", description="A divine word burns nearby foes",
             damage_count=1, damage_die=6, element=Element.RADIANT),
    # 1st level
    SpellDef(id="cureWounds", name="Cure Wounds", description="Heal wounds with divine magic",
             mp_cost=2, damage_count=1, damage_die=8, kind=HEAL),
    SpellDef(id="healingWord", name="Healing Word", description="Quick healing incantation",
             mp_cost=2, damage_count=1, damage_die=4, kind=HEAL),
    SpellDef(id="goodberry", name="Goodberry", description="Create berries that restore vitality",
             mp_cost=2, damage_count=2, damage_die=4, kind=HEAL),
    SpellDef(id="magicMissile", name="Magic Missile", description="Three darts of magical force",
             mp_cost=3, level_required=2, damage_count=3, damage_die=4, element=Element.FORCE,
             auto_hit=True),
    SpellDef(id="thunderwave", name="Thunderwave", description="A wave of thunderous force",
             mp_cost=3, level_required=2, damage_count=2, damage_die=8, element=Element.THUNDER),
    SpellDef(id="hexCurse", name="Hex", description="Curse a foe, dealing necrotic damage",
             mp_cost=2, level_required=2, damage_count=1, damage_die=6, element=Element.NECROTIC),
    SpellDef(id="guidingBolt", name="Guiding Bolt", description="A flash of light streaks toward a creature",
             mp_cost=3, level_required=2, damage_count=4, damage_die=6, element=Element.RADIANT),
    SpellDef(id="dissonantWhispers", name="Dissonant Whispers", description="Discordant melody wracks the target",
             mp_cost=3, level_required=2, damage_count=3, damage_die=6, element=Element.PSYCHIC),
    SpellDef(id="hellishRebuke", name="Hellish Rebuke", description="Flames engulf the one who wronged you",
             mp_cost=3, level_required=2, damage_count=2, damage_die=10, element=Element.FIRE),
    SpellDef(id="huntersMark", name="Hunter's Mark", description="Mark prey for extra damage",
             mp_cost=2, level_required=2, damage_count=1, damage_die=6),
    # 2nd level
    SpellDef(id="scorchingRay", name="Scorching Ray", description="Three rays of fire streak toward targets",
             mp_cost=4, level_required=4, damage_count=6, damage_die=6, element=Element.FIRE),
    SpellDef(id="shatter", name="Shatter", description="A sudden loud noise deals thunder damage",
             mp_cost=4, level_required=4, damage_count=3, damage_die=8, element=Element.THUNDER),
    SpellDef(id="moonbeam", name="Moonbeam", description="A silvery beam of pale light shines down",
             mp_cost=4, level_required=4, damage_count=2, damage_die=10, element=Element.RADIANT),
    SpellDef(id="spiritualWeapon", name="Spiritual Weapon", description="A floating spectral weapon strikes",
             mp_cost=4, level_required=4, damage_count=1, damage_die=8),
    SpellDef(id="spikeGrowth", name="Spike Growth", description="Ground sprouts thorns that shred foes",
             mp_cost=4, level_required=4, damage_count=2, damage_die=4),
    # 3rd level
    SpellDef(id="fireball", name="Fireball", description="A bright streak explodes into flame",
             mp_cost=6, level_required=6, damage_count=8, damage_die=6, element=Element.FIRE),
    SpellDef(id="lightningBolt", name="Lightning Bolt", description="A stroke of lightning in a line",
             mp_cost=6, level_required=6, damage_count=8, damage_die=6, element=Element.LIGHTNING),
    SpellDef(id="spiritGuardians", name="Spirit Guardians", description="Spectral spirits swirl and strike",
             mp_cost=6, level_required=6, damage_count=3, damage_die=8, element=Element.RADIANT),
    SpellDef(id="callLightning", name="Call Lightning", description="A storm cloud appears and strikes",
             mp_cost=6, level_required=6, damage_count=3, damage_die=10, element=Element.LIGHTNING),
    SpellDef(id="hungerOfHadar", name="Hunger of Hadar", description="A sphere of blackness and bitter cold",
             mp_cost=6, level_required=6, damage_count=4, damage_die=6, element=Element.ICE),
    SpellDef(id="synapticStatic", name="Synaptic Static", description="Psychic energy explodes in the mind",
             mp_cost=7, level_required=7, damage_count=8, damage_die=6, element=Element.PSYCHIC),
    # 4th level
    SpellDef(id="iceStorm", name="Ice Storm", description="Hail and freezing rain pound the area",
             mp_cost=8, level_required=9, damage_count=4, damage_die=8, element=Element.ICE),
    SpellDef(id="flameStrike", name="Flame Strike", description="A column of divine fire roars down",
             mp_cost=8, level_required=9, damage_count=4, damage_die=6, element=Element.FIRE),
    SpellDef(id="greaterHeal", name="Greater Heal", description="Powerful restorative magic",
             mp_cost=8, level_required=9, damage_count=4, damage_die=8, kind=HEAL),
    SpellDef(id="massCureWounds", name="Mass Cure Wounds", description="Healing energy washes over allies",
             mp_cost=8, level_required=9, damage_count=3, damage_die=8, kind=HEAL),
    SpellDef(id="destructiveWave", name="Destructive Wave", description="Divine energy erupts in a shockwave",
             mp_cost=8, level_required=9, damage_count=5, damage_die=6, element=Element.THUNDER),
    # 5th level
    SpellDef(id="coneOfCold", name="Cone of Cold", description="A blast of cold erupts from your hands",
             mp_cost=10, level_required=11, damage_count=8, damage_die=8, element=Element.ICE),
    SpellDef(id="heal", name="Heal", description="A surge of positive energy cures wounds",
             mp_cost=10, level_required=11, damage_count=7, damage_die=10, kind=HEAL),
    SpellDef(id="sunbeam", name="Sunbeam", description="A beam of brilliant light sears foes",
             mp_cost=10, level_required=11, damage_count=6, damage_die=8, element=Element.RADIANT),
    SpellDef(id="swiftQuiver", name="Swift Quiver", description="Arrows fly with supernatural speed",
             mp_cost=9, level_required=11, damage_count=4, damage_die=8),
    # 6th level
    SpellDef(id="chainLightning", name="Chain Lightning", description="Lightning arcs between targets",
             mp_cost=12, level_required=13, damage_count=10, damage_die=8, element=Element.LIGHTNING),
    SpellDef(id="disintegrate", name="Disintegrate", description="A thin green ray reduces the target to dust",
             mp_cost=12, level_required=13, damage_count=10, damage_die=6, element=Element.FORCE),
    SpellDef(id="harm", name="Harm", description="Unleash a virulent disease on a creature",
             mp_cost=12, level_required=13, damage_count=14, damage_die=6, element=Element.NECROTIC),
    SpellDef(id="bladeBarrier", name="Blade Barrier", description="A wall of whirling blades shreds all",
             mp_cost=12, level_required=13, damage_count=6, damage_die=10),
    SpellDef(id="fireStorm", name="Fire Storm", description="A storm of fire rains from the sky",
             mp_cost=12, level_required=13, damage_count=7, damage_die=10, element=Element.FIRE),
    # 7th level and up
    SpellDef(id="regenerate", name="Regenerate", description="Touch restores body and spirit",
             mp_cost=14, level_required=15, damage_count=4, damage_die=8, kind=HEAL),
    SpellDef(id="massHeal", name="Mass Heal", description="A flood of healing energy restores all",
             mp_cost=16, level_required=17, damage_count=10, damage_die=10, kind=HEAL),
    SpellDef(id="meteorSwarm", name="Meteor Swarm", description="Blazing orbs plummet from the sky",
             mp_cost=20, level_required=19, damage_count=24, damage_die=6, element=Element.FIRE),
    SpellDef(id="powerWordKill", name="Power Word Kill", description="A word of power that slays outright",
             mp_cost=20, level_required=19, damage_count=20, damage_die=10),
    # Utility
    SpellDef(id="teleport", name="Teleport", description="Instantly travel to a known town",
             mp_cost=8, level_required=5, kind=UTILITY),
)


__all__ = ["SPELLS"]
