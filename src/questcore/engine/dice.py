"""Dice rolling on top of the d20 library.

Every combat and progression operation draws its randomness from a
``DiceRoller``. The module keeps a default roller (seeded from
``QUESTCORE_GAME_RNG_SEED`` when set) and every engine function accepts a
``roller=`` override, which is how tests script exact rolls.

Example:
    >>> roller = DiceRoller(seed=7)
    >>> attack = roller.roll_d20(5)
    >>> attack.total == attack.roll + 5
    True
    >>> roller.roll_dice(2, 6) in range(2, 13)
    True
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import d20

from questcore.core.constants import NATURAL_CRITICAL, NATURAL_FUMBLE, SUPPORTED_DIE_SIZES
from questcore.core.exceptions import DiceRollError
from questcore.core.logging import get_logger


logger = get_logger(__name__)


class RollType(StrEnum):
    """Types of d20 rolls."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"


@dataclass(frozen=True)
class DiceExpression:
    """Result of rolling a dice notation string.

    Attributes:
        expression: The original dice expression string.
        total: The total result of the roll.
        dice: Kept die faces, in roll order.
        modifier: Static modifier applied (total minus dice).
        is_critical: Whether a natural 20 was kept on a d20 roll.
        is_fumble: Whether a natural 1 was kept on a d20 roll.
        roll_type: The type of roll performed.
    """

    expression: str
    total: int
    dice: list[int]
    modifier: int
    is_critical: bool
    is_fumble: bool
    roll_type: RollType


@dataclass(frozen=True)
class D20Roll:
    """A single d20 roll with its modifier.

    Attributes:
        roll: The natural die face, 1..20.
        modifier: The modifier added to the face.
    """

    roll: int
    modifier: int = 0

    @property
    def total(self) -> int:
        return self.roll + self.modifier

    @property
    def is_natural_20(self) -> bool:
        return self.roll == NATURAL_CRITICAL

    @property
    def is_natural_1(self) -> bool:
        return self.roll == NATURAL_FUMBLE


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def ability_modifier(score: int) -> int:
    """Convert an ability score to its modifier, floor((score - 10) / 2).

    Example:
        >>> [ability_modifier(s) for s in (1, 8, 9, 10, 11, 20)]
        [-5, -1, -1, 0, 0, 5]
    """
    return (score - 10) // 2


class DiceRoller:
    """Dice roller backed by the d20 library.

    d20 draws from the ``random`` module, so seeding re-seeds the global
    generator.

    Args:
        seed: Optional random seed for reproducible rolls.
    """

    def __init__(self, *, seed: int | None = None) -> None:
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def roll(
        self,
        expression: str,
        *,
        roll_type: RollType = RollType.NORMAL,
    ) -> DiceExpression:
        """Roll dice according to a notation string.

        Args:
            expression: Dice expression (e.g. '1d20+5', '2d6+3').
            roll_type: Advantage or disadvantage for d20 expressions.

        Returns:
            DiceExpression containing roll results.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        modified_expression = expression
        if "d20" in expression.lower() and roll_type != RollType.NORMAL:
            keep = "kh1" if roll_type == RollType.ADVANTAGE else "kl1"
            modified_expression = expression.replace("1d20", "d20").replace("d20", f"2d20{keep}")

        try:
            result: d20.RollResult = d20.roll(modified_expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        dice_values = self._extract_dice_values(result.expr)
        modifier = result.total - sum(dice_values)

        is_critical = False
        is_fumble = False
        if "d20" in expression.lower() and dice_values:
            is_critical = dice_values[0] == NATURAL_CRITICAL
            is_fumble = dice_values[0] == NATURAL_FUMBLE

        logger.debug(
            "Dice rolled",
            expression=modified_expression,
            total=result.total,
            dice=dice_values,
        )

        return DiceExpression(
            expression=expression,
            total=result.total,
            dice=dice_values,
            modifier=modifier,
            is_critical=is_critical,
            is_fumble=is_fumble,
            roll_type=roll_type,
        )

    def _extract_dice_values(self, expr: Any) -> list[int]:
        """Collect the kept die faces from a d20 expression tree."""
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if die.kept:
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values

    def roll_d20(
        self,
        modifier: int = 0,
        *,
        roll_type: RollType = RollType.NORMAL,
    ) -> D20Roll:
        """Roll a d20 and attach a modifier.

        Args:
            modifier: Integer added to the natural roll.
            roll_type: Advantage or disadvantage.

        Returns:
            D20Roll with the natural face and modifier.

        Raises:
            DiceRollError: If the modifier is not an integer.
        """
        if not _is_int(modifier):
            raise DiceRollError(
                f"roll_d20: modifier must be an integer, got {modifier!r}",
                details={"modifier": modifier},
            )
        result = self.roll("1d20", roll_type=roll_type)
        return D20Roll(roll=result.dice[0], modifier=modifier)

    def roll_dice(self, count: int, die: int) -> int:
        """Sum ``count`` rolls of a ``die``-sided die.

        Args:
            count: Number of dice; zero sums to zero.
            die: Die size, one of 4, 6, 8, 10, 12, 20, 100.

        Returns:
            The sum of the rolls.

        Raises:
            DiceRollError: On a negative count or an unsupported die size.
        """
        if not _is_int(count) or count < 0:
            raise DiceRollError(
                f"roll_dice: invalid dice count {count!r}",
                details={"count": count, "die": die},
            )
        if die not in SUPPORTED_DIE_SIZES:
            raise DiceRollError(
                f"roll_dice: unsupported die d{die}",
                details={"count": count, "die": die},
            )
        if count == 0:
            return 0
        return self.roll(f"{count}d{die}").total

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return random.random() < probability


# Module-level default roller
_default_roller: DiceRoller | None = None


def get_default_roller() -> DiceRoller:
    """Get the module default roller, creating it from settings on first use."""
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        from questcore.core.config import get_settings

        _default_roller = DiceRoller(seed=get_settings().game.rng_seed)
    return _default_roller


def set_default_roller(roller: DiceRoller | None) -> None:
    """Replace the default roller; ``None`` resets to a settings-seeded one."""
    global _default_roller  # noqa: PLW0603
    _default_roller = roller


def resolve_roller(roller: DiceRoller | None) -> DiceRoller:
    """Return ``roller`` or the default roller."""
    return roller if roller is not None else get_default_roller()


def roll(
    expression: str,
    *,
    roll_type: RollType = RollType.NORMAL,
) -> DiceExpression:
    """Roll a notation string with the default roller."""
    return get_default_roller().roll(expression, roll_type=roll_type)


def roll_d20(modifier: int = 0) -> D20Roll:
    """Roll a d20 with the default roller."""
    return get_default_roller().roll_d20(modifier)


def roll_dice(count: int, die: int) -> int:
    """Sum ``count`` dice with the default roller."""
    return get_default_roller().roll_dice(count, die)


__all__ = [
    "RollType",
    "DiceExpression",
    "D20Roll",
    "DiceRoller",
    "ability_modifier",
    "get_default_roller",
    "set_default_roller",
    "resolve_roller",
    "roll",
    "roll_d20",
    "roll_dice",
]
