"""Character progression: XP, deferred level-ups, stat points and rests.

XP awards never change a character's level directly. They queue pending
level-ups on the player's ``LevelUpTracker``; the queue is applied by
``process_pending_level_ups``, which rests call.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from questcore.content import ContentRegistry, get_registry
from questcore.core.config import get_settings
from questcore.core.constants import (
    ASI_LEVELS,
    ASI_POINTS,
    MAX_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    MP_PER_LEVEL_BASE,
    POINT_BUY_COSTS,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    POINT_BUY_TOTAL,
    XP_PER_LEVEL_FACTOR,
)
from questcore.core.exceptions import ValidationError
from questcore.core.logging import get_logger
from questcore.engine.character import get_player_class, require_player
from questcore.engine.dice import DiceRoller, resolve_roller
from questcore.models.content import AbilityDef, SpellDef, TalentDef
from questcore.models.enums import Ability
from questcore.models.player import PlayerState, PlayerStats
from questcore.models.progression import (
    FieldActionResult,
    LevelUpResult,
    RestResult,
    XPAwardResult,
)


logger = get_logger(__name__)


# =============================================================================
# Experience
# =============================================================================


def xp_for_level(level: int) -> int:
    """Total XP needed to reach ``level``: 100 * level^2."""
    return XP_PER_LEVEL_FACTOR * level * level


def award_xp(player: PlayerState, amount: int) -> XPAwardResult:
    """Add XP and queue any level-ups it earns.

    Only ``xp`` and the pending level-up count change. The pending count
    grows to cover every level the new total reaches, stopping at level 20.

    Args:
        player: The player receiving XP.
        amount: Non-negative XP amount.

    Returns:
        XPAwardResult with the new XP total and pending count.

    Raises:
        ValidationError: If the amount is negative or not an integer.
    """
    require_player(player, "award_xp")
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
        raise ValidationError(
            f"award_xp: invalid XP amount {amount!r}",
            field_name="amount",
            invalid_value=amount,
        )

    player.xp += amount
    before = player.pending_level_ups
    pending = before
    while (
        player.level + pending < MAX_CHARACTER_LEVEL
        and player.xp >= xp_for_level(player.level + pending + 1)
    ):
        pending += 1
    player.level_ups.record(pending)

    gained = pending - before
    if gained:
        logger.info(
            "Level-ups pending",
            player=player.name,
            xp=player.xp,
            pending=pending,
            gained=gained,
        )
    return XPAwardResult(xp=player.xp, pending_levels=pending, gained_levels=gained)


# =============================================================================
# Level-Ups
# =============================================================================


def process_pending_level_ups(
    player: PlayerState,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> LevelUpResult:
    """Apply every queued level-up.

    Each level grants max(1, hit die + CON mod) HP and max(1, 2 + INT mod)
    MP to both the max and current pools. Levels 4, 8, 12, 16 and 19 grant
    two stat points. Class spells and abilities, and talents open to the
    class, are unlocked once their level requirement is met; a talent's HP
    and MP bonuses are applied when it is learned.

    Returns:
        LevelUpResult describing everything gained. ``leveled_up`` is False
        and nothing changes when no level-ups are pending.
    """
    require_player(player, "process_pending_level_ups")
    if player.pending_level_ups == 0:
        return LevelUpResult(new_level=player.level)

    reg = registry if registry is not None else get_registry()
    dice = resolve_roller(roller)
    player_class = get_player_class(player, reg)

    count = player.level_ups.apply()
    new_spells: list[SpellDef] = []
    new_abilities: list[AbilityDef] = []
    new_talents: list[TalentDef] = []
    asi_gained = 0
    hp_gained = 0
    mp_gained = 0

    for _ in range(count):
        if player.level >= MAX_CHARACTER_LEVEL:
            break
        player.level += 1

        hp_gain = max(1, dice.roll_dice(1, player_class.hit_die) + player.stats.con_mod)
        mp_gain = max(1, MP_PER_LEVEL_BASE + player.stats.int_mod)
        player.grow_pools(hp=hp_gain, mp=mp_gain)
        hp_gained += hp_gain
        mp_gained += mp_gain

        if player.level in ASI_LEVELS:
            player.pending_stat_points += ASI_POINTS
            asi_gained += ASI_POINTS

        for spell in reg.class_spells(player.class_id):
            if spell.level_required <= player.level and spell.id not in player.known_spells:
                player.known_spells.append(spell.id)
                new_spells.append(spell)

        for ability in reg.class_abilities(player.class_id):
            if ability.level_required <= player.level and ability.id not in player.known_abilities:
                player.known_abilities.append(ability.id)
                new_abilities.append(ability)

        for talent in reg.talents:
            if (
                talent.level_required <= player.level
                and talent.available_to(player.class_id)
                and talent.id not in player.known_talents
            ):
                player.known_talents.append(talent.id)
                player.grow_pools(hp=talent.max_hp_bonus, mp=talent.max_mp_bonus)
                new_talents.append(talent)

    result = LevelUpResult(
        leveled_up=True,
        new_level=player.level,
        new_spells=tuple(new_spells),
        new_abilities=tuple(new_abilities),
        new_talents=tuple(new_talents),
        asi_gained=asi_gained,
        hp_gained=hp_gained,
        mp_gained=mp_gained,
    )
    logger.info(
        "Level up applied",
        player=player.name,
        level=player.level,
        hp_gained=hp_gained,
        mp_gained=mp_gained,
        asi_gained=asi_gained,
        new_spells=[s.id for s in new_spells],
        new_abilities=[a.id for a in new_abilities],
        new_talents=[t.id for t in new_talents],
    )
    return result


# =============================================================================
# Stat Points
# =============================================================================


def allocate_stat_point(player: PlayerState, stat: Ability | str) -> bool:
    """Spend one pending stat point on ``stat``.

    Raising CON adds ``level`` to max HP and HP. Raising INT adds
    ``max(1, level)`` to max MP and MP.

    Returns:
        False if there are no points to spend or the score is already at
        its maximum, True otherwise.

    Raises:
        ValidationError: If ``stat`` is not an ability name.
    """
    require_player(player, "allocate_stat_point")
    try:
        ability = Ability(stat)
    except ValueError as exc:
        raise ValidationError(
            f"allocate_stat_point: unknown stat {stat!r}",
            field_name="stat",
            invalid_value=stat,
        ) from exc

    if player.pending_stat_points <= 0:
        return False
    score = player.stats.score(ability)
    if score >= MAX_ABILITY_SCORE:
        return False

    setattr(player.stats, ability.value, score + 1)
    player.pending_stat_points -= 1

    if ability == Ability.CON:
        player.grow_pools(hp=player.level)
    elif ability == Ability.INT:
        player.grow_pools(mp=max(1, player.level))

    logger.debug("Stat point allocated", player=player.name, stat=ability.value, score=score + 1)
    return True


# =============================================================================
# Point Buy
# =============================================================================


def _normalize_scores(stats: PlayerStats | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(stats, PlayerStats):
        return stats.as_dict()
    scores: dict[str, Any] = {}
    for key, value in stats.items():
        try:
            scores[Ability(key).value] = value
        except ValueError as exc:
            raise ValidationError(
                f"unknown ability {key!r}",
                field_name="stats",
                invalid_value=key,
            ) from exc
    return scores


def _missing_abilities(scores: Mapping[str, Any]) -> list[str]:
    return [ability.value for ability in Ability if ability.value not in scores]


def _scores(stats: PlayerStats | Mapping[str, Any]) -> dict[str, Any]:
    scores = _normalize_scores(stats)
    missing = _missing_abilities(scores)
    if missing:
        raise ValidationError(
            f"stat block is missing {', '.join(missing)}",
            field_name="stats",
            invalid_value=missing,
        )
    return scores


def calculate_points_spent(stats: PlayerStats | Mapping[str, int]) -> int:
    """Total point-buy cost of a stat block.

    Raises:
        ValidationError: If an ability is missing or unknown, or any score
            is outside 8..15.
    """
    total = 0
    for name, score in _scores(stats).items():
        if score not in POINT_BUY_COSTS:
            raise ValidationError(
                f"calculate_points_spent: {name} score {score!r} outside {POINT_BUY_MIN}..{POINT_BUY_MAX}",
                field_name=name,
                invalid_value=score,
            )
        total += POINT_BUY_COSTS[score]
    return total


def is_valid_point_buy(stats: PlayerStats | Mapping[str, int]) -> bool:
    """All six abilities present, every score in 8..15 and exactly 27 points spent.

    Raises:
        ValidationError: If a key is not an ability name.
    """
    scores = _normalize_scores(stats)
    if _missing_abilities(scores):
        return False
    if any(score not in POINT_BUY_COSTS for score in scores.values()):
        return False
    return calculate_points_spent(scores) == POINT_BUY_TOTAL


# =============================================================================
# Rests
# =============================================================================


def short_rest(
    player: PlayerState,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> RestResult:
    """Recover half of max HP and MP and apply pending level-ups.

    Uses up one short rest. Refused when none are left or when there is
    nothing to recover.
    """
    require_player(player, "short_rest")
    if player.short_rests_remaining <= 0:
        return RestResult(rested=False, message="No short rests remaining! Take a long rest.")
    if player.missing_hp <= 0 and player.missing_mp <= 0 and player.pending_level_ups == 0:
        return RestResult(rested=False, message="You are already fully rested.")

    hp_restored = player.heal(max(1, player.max_hp // 2))
    mp_restored = player.restore_mp(max(1, player.max_mp // 2))
    player.short_rests_remaining -= 1
    level_up = process_pending_level_ups(player, roller=roller, registry=registry)

    logger.info(
        "Short rest",
        player=player.name,
        hp_restored=hp_restored,
        mp_restored=mp_restored,
        rests_left=player.short_rests_remaining,
    )
    return RestResult(
        rested=True,
        message=f"{player.name} takes a short rest. Recovered {hp_restored} HP and {mp_restored} MP.",
        hp_restored=hp_restored,
        mp_restored=mp_restored,
        level_up=level_up if level_up.leveled_up else None,
    )


def long_rest(
    player: PlayerState,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> RestResult:
    """Fully restore HP and MP, reset short rests and apply pending level-ups."""
    require_player(player, "long_rest")
    level_up = process_pending_level_ups(player, roller=roller, registry=registry)
    hp_restored = player.heal(player.missing_hp)
    mp_restored = player.restore_mp(player.missing_mp)
    player.short_rests_remaining = get_settings().game.short_rests_per_long_rest

    logger.info("Long rest", player=player.name, level=player.level)
    return RestResult(
        rested=True,
        message=f"{player.name} rests until morning. HP and MP fully restored.",
        hp_restored=hp_restored,
        mp_restored=mp_restored,
        level_up=level_up if level_up.leveled_up else None,
    )


# =============================================================================
# Out-of-Combat Actions
# =============================================================================


SHORT_REST_ABILITY_ID = "shortRest"


def _field_action(
    player: PlayerState,
    action: SpellDef | AbilityDef,
    verb: str,
    dice: DiceRoller,
    registry: ContentRegistry | None,
) -> FieldActionResult:
    if action.id == SHORT_REST_ABILITY_ID:
        rest = short_rest(player, roller=dice, registry=registry)
        return FieldActionResult(used=rest.rested, message=rest.message, rest=rest)
    if not action.is_heal:
        return FieldActionResult(used=False, message=f"{action.name} cannot be used here.")
    if player.mp < action.mp_cost:
        return FieldActionResult(used=False, message="Not enough MP!")
    if player.missing_hp <= 0:
        return FieldActionResult(used=False, message="HP is already full!")

    healed = player.heal(dice.roll_dice(action.damage_count, action.damage_die))
    player.spend_mp(action.mp_cost)
    return FieldActionResult(
        used=True,
        message=f"{player.name} {verb} {action.name}! Healed {healed} HP!",
        healing=healed,
        mp_used=action.mp_cost,
    )


def cast_spell_outside_combat(
    player: PlayerState,
    spell_id: str,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> FieldActionResult:
    """Cast a known heal spell while exploring.

    Rejected when the spell is unknown, HP is already full or MP is short.
    """
    require_player(player, "cast_spell_outside_combat")
    reg = registry if registry is not None else get_registry()
    spell = reg.spell(spell_id)
    if spell is None or spell_id not in player.known_spells:
        return FieldActionResult(used=False, message="Unknown spell!")
    return _field_action(player, spell, "casts", resolve_roller(roller), reg)


def use_ability_outside_combat(
    player: PlayerState,
    ability_id: str,
    *,
    roller: DiceRoller | None = None,
    registry: ContentRegistry | None = None,
) -> FieldActionResult:
    """Use a known heal ability, or the Short Rest ability, while exploring."""
    require_player(player, "use_ability_outside_combat")
    reg = registry if registry is not None else get_registry()
    ability = reg.ability(ability_id)
    if ability is None or ability_id not in player.known_abilities:
        return FieldActionResult(used=False, message="Unknown ability!")
    return _field_action(player, ability, "uses", resolve_roller(roller), reg)


__all__ = [
    "xp_for_level",
    "award_xp",
    "process_pending_level_ups",
    "allocate_stat_point",
    "calculate_points_spent",
    "is_valid_point_buy",
    "short_rest",
    "long_rest",
    "SHORT_REST_ABILITY_ID",
    "cast_spell_outside_combat",
    "use_ability_outside_combat",
]
