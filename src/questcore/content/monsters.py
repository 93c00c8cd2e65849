"""Monster templates: random encounters first, then bosses."""

from __future__ import annotations

from questcore.models.content import ElementalProfile, MonsterAbilityDef, MonsterDef, MonsterDropDef
from questcore.models.enums import Element, MonsterAbilityKind, WeatherType


HEAL = MonsterAbilityKind.HEAL

CLEAR = WeatherType.CLEAR
RAIN = WeatherType.RAIN
SNOW = WeatherType.SNOW
SANDSTORM = WeatherType.SANDSTORM
STORM = WeatherType.STORM
FOG = WeatherType.FOG


def _drop(item_id: str, chance: float) -> MonsterDropDef:
    return MonsterDropDef(item_id=item_id, chance=chance)


MONSTERS: tuple[MonsterDef, ...] = (
    # Random encounters, ordered by difficulty
    MonsterDef(
        id="slime", name="Slime", hp=8, ac=8, attack_bonus=1,
        damage_count=1, damage_die=4, xp_reward=25, gold_reward=5,
        drops=(_drop("potion", 0.15),),
        elemental=ElementalProfile(resistances=(Element.POISON,), weaknesses=(Element.FIRE,)),
        weather_affinity=(RAIN,),
    ),
    MonsterDef(
        id="giantRat", name="Giant Rat", hp=14, ac=11, attack_bonus=3,
        damage_count=1, damage_die=6, xp_reward=18, gold_reward=5,
        drops=(_drop("potion", 0.2),),
        abilities=(
            MonsterAbilityDef(name="Frenzy Bite", chance=0.25, damage_count=2, damage_die=4),
        ),
    ),
    MonsterDef(
        id="goblin", name="Goblin", hp=15, ac=12, attack_bonus=3,
        damage_count=1, damage_die=6, xp_reward=50, gold_reward=10,
        drops=(_drop("potion", 0.2), _drop("ether", 0.1)),
    ),
    MonsterDef(
        id="skeleton", name="Skeleton", hp=22, ac=13, attack_bonus=4,
        damage_count=1, damage_die=8, xp_reward=75, gold_reward=15,
        drops=(_drop("ether", 0.15),),
        elemental=ElementalProfile(
            immunities=(Element.POISON,),
            weaknesses=(Element.RADIANT, Element.THUNDER),
            resistances=(Element.NECROTIC,),
        ),
        abilities=(
            MonsterAbilityDef(name="Bone Throw", chance=0.25, damage_count=2, damage_die=4),
        ),
        weather_affinity=(SANDSTORM,),
    ),
    MonsterDef(
        id="shadow", name="Shadow", hp=26, ac=13, attack_bonus=5,
        damage_count=2, damage_die=6, xp_reward=35, gold_reward=12,
        drops=(_drop("ether", 0.25),),
        elemental=ElementalProfile(
            immunities=(Element.NECROTIC, Element.POISON),
            weaknesses=(Element.RADIANT,),
        ),
        abilities=(
            MonsterAbilityDef(name="Shadow Drain", chance=0.35, damage_count=2, damage_die=6,
                              self_heal=True, element=Element.NECROTIC),
        ),
        weather_affinity=(FOG,),
    ),
    MonsterDef(
        id="wolf", name="Dire Wolf", hp=30, ac=13, attack_bonus=5,
        damage_count=2, damage_die=6, xp_reward=100, gold_reward=12,
        drops=(_drop("potion", 0.25),),
        abilities=(
            MonsterAbilityDef(name="Pounce", chance=0.30, damage_count=3, damage_die=6),
        ),
        weather_affinity=(SNOW,),
    ),
    MonsterDef(
        id="iceElemental", name="Ice Elemental", hp=35, ac=14, attack_bonus=5,
        damage_count=2, damage_die=8, xp_reward=50, gold_reward=18,
        drops=(_drop("ether", 0.2),),
        elemental=ElementalProfile(immunities=(Element.ICE,), weaknesses=(Element.FIRE,)),
        abilities=(
            MonsterAbilityDef(name="Frost Nova", chance=0.3, damage_count=3, damage_die=4,
                              element=Element.ICE),
            MonsterAbilityDef(name="Ice Armor", chance=0.2, damage_count=2, damage_die=6, kind=HEAL),
        ),
        weather_affinity=(SNOW, FOG),
    ),
    MonsterDef(
        id="orc", name="Orc Warrior", hp=42, ac=14, attack_bonus=6,
        damage_count=1, damage_die=12, xp_reward=150, gold_reward=25,
        drops=(_drop("potion", 0.2), _drop("shortSword", 0.05)),
        abilities=(
            MonsterAbilityDef(name="Cleave", chance=0.35, damage_count=2, damage_die=10),
        ),
        weather_affinity=(SANDSTORM, STORM),
    ),
    MonsterDef(
        id="wraith", name="Wraith", hp=55, ac=15, attack_bonus=6,
        damage_count=2, damage_die=8, xp_reward=200, gold_reward=30,
        drops=(_drop("ether", 0.25), _drop("greaterPotion", 0.1)),
        elemental=ElementalProfile(
            immunities=(Element.NECROTIC, Element.POISON),
            weaknesses=(Element.RADIANT,),
            resistances=(Element.ICE, Element.LIGHTNING),
        ),
        abilities=(
            MonsterAbilityDef(name="Life Drain", chance=0.35, damage_count=2, damage_die=6,
                              self_heal=True, element=Element.NECROTIC),
            MonsterAbilityDef(name="Necrotic Bolt", chance=0.25, damage_count=3, damage_die=6,
                              element=Element.NECROTIC),
        ),
        weather_affinity=(FOG, STORM),
    ),
    MonsterDef(
        id="stoneGolem", name="Stone Golem", hp=60, ac=16, attack_bonus=7,
        damage_count=3, damage_die=8, xp_reward=80, gold_reward=40,
        drops=(_drop("greaterPotion", 0.3), _drop("plateArmor", 0.1)),
        elemental=ElementalProfile(
            immunities=(Element.POISON, Element.PSYCHIC),
            weaknesses=(Element.THUNDER,),
            resistances=(Element.FIRE, Element.ICE, Element.LIGHTNING),
        ),
        abilities=(
            MonsterAbilityDef(name="Ground Slam", chance=0.35, damage_count=4, damage_die=6),
        ),
    ),
    # Bosses
    MonsterDef(
        id="troll", name="Cave Troll", hp=84, ac=15, attack_bonus=7,
        damage_count=2, damage_die=10, xp_reward=500, gold_reward=100, is_boss=True,
        drops=(_drop("greaterPotion", 0.5), _drop("chainMail", 0.25)),
        elemental=ElementalProfile(weaknesses=(Element.FIRE,)),
        abilities=(
            MonsterAbilityDef(name="Regenerate", chance=0.25, damage_count=3, damage_die=8, kind=HEAL),
            MonsterAbilityDef(name="Rock Slam", chance=0.35, damage_count=3, damage_die=10),
        ),
        weather_affinity=(RAIN,),
    ),
    MonsterDef(
        id="frostGiant", name="Frost Giant", hp=120, ac=16, attack_bonus=8,
        damage_count=3, damage_die=10, xp_reward=750, gold_reward=180, is_boss=True,
        drops=(_drop("greaterPotion", 0.6), _drop("chainMail", 0.3)),
        elemental=ElementalProfile(immunities=(Element.ICE,), weaknesses=(Element.FIRE,)),
        abilities=(
            MonsterAbilityDef(name="Icy Smash", chance=0.35, damage_count=4, damage_die=8,
                              element=Element.ICE),
            MonsterAbilityDef(name="Frost Aura", chance=0.2, damage_count=2, damage_die=10,
                              element=Element.ICE),
        ),
        weather_affinity=(SNOW, STORM),
    ),
    MonsterDef(
        id="swampHydra", name="Swamp Hydra", hp=140, ac=14, attack_bonus=8,
        damage_count=2, damage_die=12, xp_reward=900, gold_reward=200, is_boss=True,
        drops=(_drop("greaterPotion", 0.7), _drop("plateArmor", 0.2)),
        elemental=ElementalProfile(immunities=(Element.POISON,), resistances=(Element.LIGHTNING,)),
        abilities=(
            MonsterAbilityDef(name="Multi-Bite", chance=0.4, damage_count=5, damage_die=6),
            MonsterAbilityDef(name="Regenerate", chance=0.2, damage_count=4, damage_die=8, kind=HEAL),
        ),
        weather_affinity=(RAIN, FOG),
    ),
    MonsterDef(
        id="dragon", name="Young Red Dragon", hp=178, ac=18, attack_bonus=10,
        damage_count=4, damage_die=10, xp_reward=2000, gold_reward=500, is_boss=True,
        drops=(_drop("greaterPotion", 0.75), _drop("plateArmor", 0.3), _drop("greatSword", 0.2)),
        elemental=ElementalProfile(immunities=(Element.FIRE,), weaknesses=(Element.ICE,)),
        abilities=(
            MonsterAbilityDef(name="Fire Breath", chance=0.40, damage_count=6, damage_die=8,
                              element=Element.FIRE),
            MonsterAbilityDef(name="Tail Sweep", chance=0.25, damage_count=3, damage_die=10),
        ),
        weather_affinity=(STORM,),
    ),
)


__all__ = ["MONSTERS"]
