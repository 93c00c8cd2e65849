"""Combat and progression engine.

Submodules:
    dice: Dice rolling on top of the d20 library
    elements: Elemental damage modifiers
    resolution: Attack roll resolution and damage dice
    character: Player creation, derived modifiers, equipment and items
    combat: Single combat actions for player and monster
    weather: Weather accuracy penalties and monster affinities
    progression: XP, deferred level-ups, stat points, rests
    battle: Turn-alternating battle between one player and one monster

Example:
    >>> from questcore.engine import Battle, create_player, long_rest
    >>>
    >>> hero = create_player("Ayla", {"strength": 14, "dexterity": 12}, "knight")
    >>> battle = Battle(hero, "goblin")
    >>> while not battle.is_over:
    ...     if battle.active_side == "player":
    ...         battle.player_attack()
    ...     else:
    ...         battle.monster_turn()
    >>> long_rest(hero)  # applies any pending level-ups
"""

from __future__ import annotations

# =============================================================================
# Dice
# =============================================================================
from questcore.engine.dice import (
    D20Roll,
    DiceExpression,
    DiceRoller,
    RollType,
    ability_modifier,
    get_default_roller,
    resolve_roller,
    roll,
    roll_d20,
    roll_dice,
    set_default_roller,
)

# =============================================================================
# Resolution
# =============================================================================
from questcore.engine.elements import (
    ElementalResult,
    apply_elemental_modifier,
    element_display_name,
)
from questcore.engine.resolution import (
    AttackOutcome,
    resolve_attack_roll,
    roll_attack_damage,
)

# =============================================================================
# Character
# =============================================================================
from questcore.engine.character import (
    can_dual_wield,
    create_player,
    equip_item,
    equip_off_hand,
    get_armor_class,
    get_attack_modifier,
    get_spell_modifier,
    has_two_weapon_fighting,
    is_light_weapon,
    proficiency_bonus,
    talent_ac_bonus,
    talent_attack_bonus,
    talent_damage_bonus,
    use_item,
)

# =============================================================================
# Combat
# =============================================================================
from questcore.engine.combat import (
    attempt_flee,
    monster_attack,
    monster_use_ability,
    player_attack,
    player_cast_spell,
    player_off_hand_attack,
    player_use_ability,
    roll_initiative,
)
from questcore.engine.weather import (
    MonsterWeatherBoost,
    monster_weather_boost,
    weather_accuracy_penalty,
    weather_label,
)

# =============================================================================
# Progression
# =============================================================================
from questcore.engine.progression import (
    allocate_stat_point,
    award_xp,
    calculate_points_spent,
    cast_spell_outside_combat,
    is_valid_point_buy,
    long_rest,
    process_pending_level_ups,
    short_rest,
    use_ability_outside_combat,
    xp_for_level,
)

# =============================================================================
# Battle
# =============================================================================
from questcore.engine.battle import Battle, CombatModifiers


__all__ = [
    # Dice
    "D20Roll",
    "DiceExpression",
    "DiceRoller",
    "RollType",
    "ability_modifier",
    "get_default_roller",
    "resolve_roller",
    "roll",
    "roll_d20",
    "roll_dice",
    "set_default_roller",
    # Resolution
    "ElementalResult",
    "apply_elemental_modifier",
    "element_display_name",
    "AttackOutcome",
    "resolve_attack_roll",
    "roll_attack_damage",
    # Character
    "can_dual_wield",
    "create_player",
    "equip_item",
    "equip_off_hand",
    "get_armor_class",
    "get_attack_modifier",
    "get_spell_modifier",
    "has_two_weapon_fighting",
    "is_light_weapon",
    "proficiency_bonus",
    "talent_ac_bonus",
    "talent_attack_bonus",
    "talent_damage_bonus",
    "use_item",
    # Combat
    "attempt_flee",
    "monster_attack",
    "monster_use_ability",
    "player_attack",
    "player_cast_spell",
    "player_off_hand_attack",
    "player_use_ability",
    "roll_initiative",
    "MonsterWeatherBoost",
    "monster_weather_boost",
    "weather_accuracy_penalty",
    "weather_label",
    # Progression
    "allocate_stat_point",
    "award_xp",
    "calculate_points_spent",
    "cast_spell_outside_combat",
    "is_valid_point_buy",
    "long_rest",
    "process_pending_level_ups",
    "short_rest",
    "use_ability_outside_combat",
    "xp_for_level",
    # Battle
    "Battle",
    "CombatModifiers",
]
