"""Attack roll resolution and damage rolling.

Precedence for an attack roll is fixed: a natural 20 always hits and
crits, a natural 1 always misses (even against auto-hit effects), and
otherwise the attack hits when the total meets the target AC or the
effect auto-hits.
"""

from __future__ import annotations

from dataclasses import dataclass

from questcore.core.exceptions import DiceRollError
from questcore.engine.dice import D20Roll, DiceRoller, resolve_roller


@dataclass(frozen=True)
class AttackOutcome:
    """Result of comparing a d20 roll against an armor class."""

    hit: bool
    critical: bool
    fumble: bool
    roll: int
    total: int


def resolve_attack_roll(d20_roll: D20Roll, target_ac: int, auto_hit: bool = False) -> AttackOutcome:
    """Decide hit, critical and fumble for an attack roll.

    Args:
        d20_roll: The attack roll.
        target_ac: Effective armor class of the target.
        auto_hit: Whether the effect hits regardless of AC.

    Returns:
        AttackOutcome for the roll.
    """
    if d20_roll.is_natural_20:
        return AttackOutcome(True, True, False, d20_roll.roll, d20_roll.total)
    if d20_roll.is_natural_1:
        return AttackOutcome(False, False, True, d20_roll.roll, d20_roll.total)
    hit = d20_roll.total >= target_ac or auto_hit
    return AttackOutcome(hit, False, False, d20_roll.roll, d20_roll.total)


def roll_attack_damage(
    count: int,
    die: int,
    is_critical: bool,
    bonus: int = 0,
    min_damage: int = 0,
    *,
    roller: DiceRoller | None = None,
) -> int:
    """Roll damage dice, doubling the count on a critical.

    The flat bonus is not doubled. The result is floored at ``min_damage``.

    Raises:
        DiceRollError: On a negative dice count or unsupported die.
    """
    if count < 0:
        raise DiceRollError(
            f"roll_attack_damage: invalid dice count {count}",
            details={"count": count, "die": die},
        )
    dice_count = count * 2 if is_critical else count
    total = resolve_roller(roller).roll_dice(dice_count, die) + bonus
    return max(min_damage, total)


__all__ = [
    "AttackOutcome",
    "resolve_attack_roll",
    "roll_attack_damage",
]
