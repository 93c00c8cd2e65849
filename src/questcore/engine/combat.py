"""Combat actions.

Each function resolves exactly one action and mutates the ``PlayerState``
and ``Monster`` it is handed. Invalid calls (missing combatants,
non-integer modifiers) raise ``CombatError``; rejected actions (not enough
MP, unknown spell, no off-hand weapon) come back as a ``CombatResult``
with ``success=False`` and leave both sides untouched.
"""

from __future__ import annotations

from typing import Any

from questcore.content import ContentRegistry, get_registry
from questcore.core.constants import MIN_WEAPON_DAMAGE, WEAPON_DAMAGE_DIE
from questcore.core.exceptions import CombatError
from questcore.core.logging import get_logger
from questcore.engine.character import (
    can_dual_wield,
    get_ability_attack_modifier,
    get_armor_class,
    get_attack_modifier,
    get_spell_modifier,
    has_two_weapon_fighting,
    is_light_weapon,
    primary_stat_modifier,
    talent_damage_bonus,
    weapon_damage_modifier,
)
from questcore.engine.dice import DiceRoller, resolve_roller
from questcore.engine.elements import apply_elemental_modifier, describe_interaction
from questcore.engine.resolution import resolve_attack_roll, roll_attack_damage
from questcore.models.combat import (
    CombatResult,
    InitiativeResult,
    Monster,
    MonsterAbilityResult,
)
from questcore.models.content import MonsterAbilityDef
from questcore.models.enums import MonsterAbilityKind
from questcore.models.player import PlayerState


logger = get_logger(__name__)


# =============================================================================
# Argument checks
# =============================================================================


def _require_combatants(operation: str, player: PlayerState | None, monster: Monster | None) -> None:
    if player is None or monster is None:
        raise CombatError(f"{operation}: missing player or monster")


def _require_int(operation: str, name: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise CombatError(
            f"{operation}: invalid {name} {value!r}",
            details={name: value},
        )
    return value


def _registry(registry: ContentRegistry | None) -> ContentRegistry:
    return registry if registry is not None else get_registry()


# =============================================================================
# Initiative and Flee
# =============================================================================


def roll_initiative(
    player_dex_mod: int,
    monster_bonus: int,
    *,
    roller: DiceRoller | None = None,
) -> InitiativeResult:
    """Roll initiative for both sides. Ties go to the player.

    Raises:
        CombatError: If either modifier is not an integer.
    """
    _require_int("roll_initiative", "player_dex_mod", player_dex_mod)
    _require_int("roll_initiative", "monster_bonus", monster_bonus)
    dice = resolve_roller(roller)

    player_init = dice.roll_d20(player_dex_mod)
    monster_init = dice.roll_d20(monster_bonus)
    result = InitiativeResult(
        player_roll=player_init.roll,
        player_total=player_init.total,
        monster_roll=monster_init.roll,
        monster_total=monster_init.total,
    )
    logger.debug(
        "Initiative rolled",
        player_total=result.player_total,
        monster_total=result.monster_total,
        player_first=result.player_first,
    )
    return result


def attempt_flee(
    dex_modifier: int,
    *,
    dc: int = 10,
    roller: DiceRoller | None = None,
) -> CombatResult:
    """Try to escape: d20 + DEX modifier against ``dc``.

    Raises:
        CombatError: If the modifier is not an integer.
    """
    _require_int("attempt_flee", "dex_modifier", dex_modifier)
    roll = resolve_roller(roller).roll_d20(dex_modifier)
    escaped = roll.total >= dc
    logger.debug("Flee attempted", roll=roll.roll, total=roll.total, dc=dc, escaped=escaped)
    if escaped:
        return CombatResult(
            message=f"Escaped! (rolled {roll.total})",
            roll=roll.roll,
            total_roll=roll.total,
            target_ac=dc,
        )
    return CombatResult(
        success=False,
        message=f"Failed to escape! (rolled {roll.total}, needed {dc})",
        roll=roll.roll,
        total_roll=roll.total,
        target_ac=dc,
    )


# =============================================================================
# Weapon Attacks
# =============================================================================


def player_attack(
    player: PlayerState,
    monster: Monster,
    monster_defend_bonus: int = 0,
    weather_penalty: int = 0,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> CombatResult:
    """Attack the monster with the main-hand weapon.

    The attack roll uses the class primary stat, proficiency and talent
    attack bonus against ``monster.ac`` plus the defend bonus and weather
    penalty. A hit deals 1d6 (2d6 on a critical) plus the weapon's flat
    bonus, talent damage bonus and the STR modifier (the better of STR and
    DEX for finesse weapons). Normal hits deal at least 1. The total then
    goes through the monster's elemental profile and is subtracted from
    ``monster.hp``.

    Args:
        player: The attacking player.
        monster: The target monster.
        monster_defend_bonus: AC bonus from a defending monster.
        weather_penalty: Accuracy penalty from the weather.
        roller: Dice roller override.
        registry: Content registry override.

    Returns:
        CombatResult for the attack.

    Raises:
        CombatError: If a combatant is missing or a modifier is not an integer.
    """
    _require_combatants("player_attack", player, monster)
    _require_int("player_attack", "monster_defend_bonus", monster_defend_bonus)
    _require_int("player_attack", "weather_penalty", weather_penalty)
    dice = resolve_roller(roller)

    attack_mod = get_attack_modifier(player, registry)
    roll = dice.roll_d20(attack_mod)
    target_ac = monster.ac + monster_defend_bonus + weather_penalty
    outcome = resolve_attack_roll(roll, target_ac)
    meta = {
        "roll": outcome.roll,
        "total_roll": outcome.total,
        "attack_mod": attack_mod,
        "target_ac": target_ac,
    }

    if outcome.fumble:
        result = CombatResult(
            message=f"Critical miss! {player.name}'s attack goes wild!",
            fumble=True,
            **meta,
        )
    elif outcome.hit:
        weapon = player.equipped_weapon
        bonus = (
            (weapon.effect if weapon else 0)
            + talent_damage_bonus(player, registry)
            + weapon_damage_modifier(player, weapon)
        )
        base = roll_attack_damage(
            1,
            WEAPON_DAMAGE_DIE,
            outcome.critical,
            bonus,
            0 if outcome.critical else MIN_WEAPON_DAMAGE,
            roller=dice,
        )
        elemental = apply_elemental_modifier(base, weapon.element if weapon else None, monster.elemental)
        monster.take_damage(elemental.damage)
        prefix = "CRITICAL HIT! " if outcome.critical else ""
        verb = "strikes" if outcome.critical else "hits"
        result = CombatResult(
            message=(
                f"{prefix}{player.name} {verb} for {elemental.damage} damage!"
                f"{describe_interaction(elemental.label)}"
            ),
            hit=True,
            critical=outcome.critical,
            damage=elemental.damage,
            elemental_label=elemental.label,
            **meta,
        )
    else:
        result = CombatResult(message=f"{player.name} misses!", **meta)

    logger.debug(
        "Player attack",
        roll=result.roll,
        total=result.total_roll,
        target_ac=target_ac,
        hit=result.hit,
        critical=result.critical,
        damage=result.damage,
    )
    return result


def player_off_hand_attack(
    player: PlayerState,
    monster: Monster,
    monster_defend_bonus: int = 0,
    weather_penalty: int = 0,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> CombatResult:
    """Bonus-action attack with the off-hand weapon.

    The class primary stat modifier is added to damage only with the
    Two-Weapon Fighting talent, or when it is negative.

    Raises:
        CombatError: If a combatant is missing or a modifier is not an integer.
    """
    _require_combatants("player_off_hand_attack", player, monster)
    _require_int("player_off_hand_attack", "monster_defend_bonus", monster_defend_bonus)
    _require_int("player_off_hand_attack", "weather_penalty", weather_penalty)

    off_hand = player.equipped_off_hand
    if off_hand is None:
        return CombatResult.failure("No off-hand weapon equipped!")
    if not is_light_weapon(off_hand):
        return CombatResult.failure(f"{off_hand.name} is too heavy for the off-hand!")
    if not can_dual_wield(player):
        return CombatResult.failure("Cannot dual wield with this equipment!")

    dice = resolve_roller(roller)
    attack_mod = get_attack_modifier(player, registry)
    roll = dice.roll_d20(attack_mod)
    target_ac = monster.ac + monster_defend_bonus + weather_penalty
    outcome = resolve_attack_roll(roll, target_ac)
    meta = {
        "roll": outcome.roll,
        "total_roll": outcome.total,
        "attack_mod": attack_mod,
        "target_ac": target_ac,
    }

    if outcome.fumble:
        return CombatResult(
            message=f"{player.name}'s off-hand strike goes wild!",
            fumble=True,
            **meta,
        )
    if not outcome.hit:
        return CombatResult(message=f"{player.name}'s off-hand attack misses!", **meta)

    stat_mod = primary_stat_modifier(player, registry)
    ability_bonus = stat_mod if has_two_weapon_fighting(player) or stat_mod < 0 else 0
    bonus = off_hand.effect + talent_damage_bonus(player, registry) + ability_bonus
    base = roll_attack_damage(
        1,
        WEAPON_DAMAGE_DIE,
        outcome.critical,
        bonus,
        0 if outcome.critical else MIN_WEAPON_DAMAGE,
        roller=dice,
    )
    elemental = apply_elemental_modifier(base, off_hand.element, monster.elemental)
    monster.take_damage(elemental.damage)
    prefix = "CRITICAL HIT! " if outcome.critical else ""
    logger.debug("Player off-hand attack", damage=elemental.damage, critical=outcome.critical)
    return CombatResult(
        message=(
            f"{prefix}{player.name}'s off-hand {off_hand.name} hits for {elemental.damage} damage!"
            f"{describe_interaction(elemental.label)}"
        ),
        hit=True,
        critical=outcome.critical,
        damage=elemental.damage,
        elemental_label=elemental.label,
        **meta,
    )


# =============================================================================
# Spells and Abilities
# =============================================================================


def player_cast_spell(
    player: PlayerState,
    spell_id: str,
    monster: Monster,
    weather_penalty: int = 0,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> CombatResult:
    """Cast a known spell in battle.

    Heal spells always succeed. Damage spells roll a spell attack against
    ``monster.ac`` plus the weather penalty, or hit outright when the spell
    is flagged ``auto_hit`` (a natural 1 still misses). MP is spent whether
    the attack hits or misses. Spell damage dice are never doubled.

    Raises:
        CombatError: If a combatant or the spell id is missing.
    """
    _require_combatants("player_cast_spell", player, monster)
    if not spell_id:
        raise CombatError("player_cast_spell: missing spell_id")
    _require_int("player_cast_spell", "weather_penalty", weather_penalty)

    spell = _registry(registry).spell(spell_id)
    if spell is None or spell_id not in player.known_spells:
        return CombatResult.failure("Unknown spell!")
    if player.mp < spell.mp_cost:
        return CombatResult.failure("Not enough MP!")
    if spell.is_utility:
        return CombatResult.failure(f"{spell.name} cannot be used in battle!")

    dice = resolve_roller(roller)

    if spell.is_heal:
        healed = player.heal(dice.roll_dice(spell.damage_count, spell.damage_die))
        player.spend_mp(spell.mp_cost)
        logger.debug("Spell heal", spell=spell.id, healed=healed)
        return CombatResult(
            message=f"{player.name} casts {spell.name}! Healed {healed} HP!",
            hit=True,
            healing=healed,
            mp_used=spell.mp_cost,
        )

    spell_mod = get_spell_modifier(player, registry)
    roll = dice.roll_d20(spell_mod)
    target_ac = monster.ac + weather_penalty
    outcome = resolve_attack_roll(roll, target_ac, spell.auto_hit)
    player.spend_mp(spell.mp_cost)
    meta = {
        "roll": outcome.roll,
        "total_roll": outcome.total,
        "attack_mod": spell_mod,
        "target_ac": target_ac,
        "mp_used": spell.mp_cost,
    }

    if not outcome.hit:
        logger.debug("Spell missed", spell=spell.id, roll=outcome.roll)
        return CombatResult(
            message=f"{player.name} casts {spell.name} but it misses!",
            fumble=outcome.fumble,
            **meta,
        )

    base = dice.roll_dice(spell.damage_count, spell.damage_die) + talent_damage_bonus(player, registry)
    elemental = apply_elemental_modifier(base, spell.element, monster.elemental)
    monster.take_damage(elemental.damage)
    logger.debug("Spell hit", spell=spell.id, damage=elemental.damage, label=elemental.label)
    return CombatResult(
        message=(
            f"{player.name} casts {spell.name}! {elemental.damage} damage!"
            f"{describe_interaction(elemental.label)}"
        ),
        hit=True,
        critical=outcome.critical,
        auto_hit=spell.auto_hit,
        damage=elemental.damage,
        elemental_label=elemental.label,
        **meta,
    )


def player_use_ability(
    player: PlayerState,
    ability_id: str,
    monster: Monster,
    weather_penalty: int = 0,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> CombatResult:
    """Use a known martial ability in battle.

    Works like :func:`player_cast_spell`, except the attack modifier comes
    from the ability's own stat and critical hits double the damage dice.

    Raises:
        CombatError: If a combatant or the ability id is missing.
    """
    _require_combatants("player_use_ability", player, monster)
    if not ability_id:
        raise CombatError("player_use_ability: missing ability_id")
    _require_int("player_use_ability", "weather_penalty", weather_penalty)

    ability = _registry(registry).ability(ability_id)
    if ability is None or ability_id not in player.known_abilities:
        return CombatResult.failure("Unknown ability!")
    if player.mp < ability.mp_cost:
        return CombatResult.failure("Not enough MP!")
    if ability.is_utility:
        return CombatResult.failure(f"{ability.name} cannot be used in battle!")

    dice = resolve_roller(roller)

    if ability.is_heal:
        healed = player.heal(dice.roll_dice(ability.damage_count, ability.damage_die))
        player.spend_mp(ability.mp_cost)
        return CombatResult(
            message=f"{player.name} uses {ability.name}! Healed {healed} HP!",
            hit=True,
            healing=healed,
            mp_used=ability.mp_cost,
        )

    attack_mod = get_ability_attack_modifier(player, ability.stat, registry)
    roll = dice.roll_d20(attack_mod)
    target_ac = monster.ac + weather_penalty
    outcome = resolve_attack_roll(roll, target_ac, ability.auto_hit)
    player.spend_mp(ability.mp_cost)
    meta = {
        "roll": outcome.roll,
        "total_roll": outcome.total,
        "attack_mod": attack_mod,
        "target_ac": target_ac,
        "mp_used": ability.mp_cost,
    }

    if outcome.fumble:
        return CombatResult(
            message=f"{player.name} uses {ability.name} but fumbles!",
            fumble=True,
            **meta,
        )
    if not outcome.hit:
        return CombatResult(message=f"{player.name} uses {ability.name} but misses!", **meta)

    base = roll_attack_damage(
        ability.damage_count,
        ability.damage_die,
        outcome.critical,
        talent_damage_bonus(player, registry),
        roller=dice,
    )
    elemental = apply_elemental_modifier(base, ability.element, monster.elemental)
    monster.take_damage(elemental.damage)
    prefix = "CRITICAL! " if outcome.critical else ""
    logger.debug("Ability hit", ability=ability.id, damage=elemental.damage, critical=outcome.critical)
    return CombatResult(
        message=(
            f"{prefix}{player.name} uses {ability.name}! {elemental.damage} damage!"
            f"{describe_interaction(elemental.label)}"
        ),
        hit=True,
        critical=outcome.critical,
        auto_hit=ability.auto_hit,
        damage=elemental.damage,
        elemental_label=elemental.label,
        **meta,
    )


# =============================================================================
# Monster Actions
# =============================================================================


def monster_attack(
    monster: Monster,
    player: PlayerState,
    player_defend_bonus: int = 0,
    weather_penalty: int = 0,
    monster_atk_boost: int = 0,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> CombatResult:
    """Monster basic attack against the player's armor class.

    Raises:
        CombatError: If a combatant is missing or a modifier is not an integer.
    """
    _require_combatants("monster_attack", player, monster)
    _require_int("monster_attack", "player_defend_bonus", player_defend_bonus)
    _require_int("monster_attack", "weather_penalty", weather_penalty)
    _require_int("monster_attack", "monster_atk_boost", monster_atk_boost)
    dice = resolve_roller(roller)

    target_ac = get_armor_class(player, player_defend_bonus, registry) + weather_penalty
    attack_bonus = monster.attack_bonus + monster_atk_boost
    roll = dice.roll_d20(attack_bonus)
    outcome = resolve_attack_roll(roll, target_ac)
    meta = {
        "roll": outcome.roll,
        "total_roll": outcome.total,
        "attack_mod": attack_bonus,
        "target_ac": target_ac,
    }

    if outcome.fumble:
        return CombatResult(message=f"{monster.name} stumbles and misses!", fumble=True, **meta)
    if not outcome.hit:
        return CombatResult(message=f"{monster.name} misses!", **meta)

    damage = roll_attack_damage(monster.damage_count, monster.damage_die, outcome.critical, roller=dice)
    player.take_damage(damage)
    prefix = "CRITICAL! " if outcome.critical else ""
    verb = "savages you" if outcome.critical else "hits you"
    logger.debug("Monster attack", monster=monster.name, damage=damage, critical=outcome.critical)
    return CombatResult(
        message=f"{prefix}{monster.name} {verb} for {damage} damage!",
        hit=True,
        critical=outcome.critical,
        damage=damage,
        **meta,
    )


def monster_use_ability(
    ability: MonsterAbilityDef,
    monster: Monster,
    player: PlayerState,
    *,
    roller: DiceRoller | None = None,
) -> MonsterAbilityResult:
    """Resolve a monster special ability. Abilities bypass AC.

    Heal abilities restore the monster's own HP. Damage abilities always
    land; a ``self_heal`` ability also restores the damage dealt to the
    monster.

    Raises:
        CombatError: If the ability or a combatant is missing.
    """
    _require_combatants("monster_use_ability", player, monster)
    if ability is None:
        raise CombatError("monster_use_ability: missing ability")
    dice = resolve_roller(roller)

    amount = dice.roll_dice(ability.damage_count, ability.damage_die)

    if ability.kind == MonsterAbilityKind.HEAL:
        healed = monster.heal(amount)
        return MonsterAbilityResult(
            ability_name=ability.name,
            kind=ability.kind,
            healing=healed,
            message=f"{monster.name} uses {ability.name}! Recovers {healed} HP!",
        )

    player.take_damage(amount)
    damage = amount
    healing = monster.heal(damage) if ability.self_heal else 0
    suffix = f" {monster.name} absorbs the life force!" if ability.self_heal else ""
    damage_label = f"{ability.element.value} damage" if ability.element is not None else "damage"
    logger.debug("Monster ability", monster=monster.name, ability=ability.name, damage=damage)
    return MonsterAbilityResult(
        ability_name=ability.name,
        kind=ability.kind,
        damage=damage,
        healing=healing,
        element=ability.element,
        message=f"{monster.name} uses {ability.name}! {damage} {damage_label}!{suffix}",
    )


__all__ = [
    "roll_initiative",
    "attempt_flee",
    "player_attack",
    "player_off_hand_attack",
    "player_cast_spell",
    "player_use_ability",
    "monster_attack",
    "monster_use_ability",
]
