"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the questcore test suite, including a scripted dice roller so combat
outcomes can be pinned down exactly.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

import pytest

from questcore.engine.dice import D20Roll, DiceRoller, RollType


if TYPE_CHECKING:
    from collections.abc import Generator

    from questcore.models import Monster, PlayerState


# =============================================================================
# Scripted Dice
# =============================================================================


class ScriptedRoller(DiceRoller):
    """DiceRoller that replays queued results.

    d20 faces, dice sums and chance outcomes are consumed in order. Once a
    queue is empty, d20 and dice fall back to real rolls and ``chance``
    returns False so monsters never defend or use abilities unless told to.
    """

    def __init__(
        self,
        *,
        d20: Iterable[int] = (),
        dice: Iterable[int] = (),
        chances: Iterable[bool] = (),
    ) -> None:
        super().__init__(seed=1234)
        self.d20_queue: deque[int] = deque(d20)
        self.dice_queue: deque[int] = deque(dice)
        self.chance_queue: deque[bool] = deque(chances)
        self.d20_calls: list[int] = []
        self.dice_calls: list[tuple[int, int]] = []

    def roll_d20(self, modifier: int = 0, *, roll_type: RollType = RollType.NORMAL) -> D20Roll:
        self.d20_calls.append(modifier)
        if not self.d20_queue:
            return super().roll_d20(modifier, roll_type=roll_type)
        return D20Roll(roll=self.d20_queue.popleft(), modifier=modifier)

    def roll_dice(self, count: int, die: int) -> int:
        self.dice_calls.append((count, die))
        if not self.dice_queue:
            return super().roll_dice(count, die)
        return self.dice_queue.popleft()

    def chance(self, probability: float) -> bool:
        if not self.chance_queue:
            return False
        return self.chance_queue.popleft()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache and default roller before and after each test."""
    from questcore.core.config import clear_settings_cache
    from questcore.engine.dice import set_default_roller

    clear_settings_cache()
    set_default_roller(None)
    yield
    clear_settings_cache()
    set_default_roller(None)


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "QUESTCORE_DEBUG": "true",
        "QUESTCORE_LOG_LEVEL": "DEBUG",
        "QUESTCORE_GAME_DEFEND_AC_BONUS": "3",
        "QUESTCORE_GAME_RNG_SEED": "99",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def scripted_roller() -> Callable[..., ScriptedRoller]:
    """Factory for ScriptedRoller instances.

    Returns:
        Callable accepting ``d20``, ``dice`` and ``chances`` sequences.
    """

    def factory(**kwargs: Any) -> ScriptedRoller:
        return ScriptedRoller(**kwargs)

    return factory


@pytest.fixture
def registry() -> Any:
    """The built-in content registry."""
    from questcore.content import get_registry

    return get_registry()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def default_stats() -> dict[str, int]:
    """All six ability scores at 10.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "strength": 10,
        "dexterity": 10,
        "constitution": 10,
        "intelligence": 10,
        "wisdom": 10,
        "charisma": 10,
    }


@pytest.fixture
def knight(default_stats: dict[str, int]) -> PlayerState:
    """A level-1 knight built from default stats.

    STR 12 and CON 11 after class boosts, 16/16 HP (hit die scripted to 6),
    4/4 MP and a Worn Sword (+1) equipped.
    """
    from questcore.engine.character import create_player

    return create_player("Ayla", default_stats, "knight", roller=ScriptedRoller(dice=[6]))


@pytest.fixture
def wizard(default_stats: dict[str, int]) -> PlayerState:
    """A level-1 wizard built from default stats (INT 12, MP 5)."""
    from questcore.engine.character import create_player

    return create_player("Merlin", default_stats, "wizard", roller=ScriptedRoller(dice=[4]))


@pytest.fixture
def goblin(registry: Any) -> Monster:
    """A fresh goblin: 15 HP, AC 12, no elemental profile."""
    from questcore.models import Monster

    return Monster.from_template(registry.monster("goblin"))


@pytest.fixture
def slime(registry: Any) -> Monster:
    """A fresh slime: 8 HP, AC 8, weak to fire."""
    from questcore.models import Monster

    return Monster.from_template(registry.monster("slime"))


@pytest.fixture
def make_monster() -> Callable[..., Monster]:
    """Factory for ad-hoc monsters.

    Returns:
        Callable accepting Monster field overrides.
    """
    from questcore.models import Monster

    def factory(**overrides: Any) -> Monster:
        data: dict[str, Any] = {
            "template_id": "dummy",
            "name": "Training Dummy",
            "hp": 50,
            "max_hp": 50,
            "ac": 10,
            "attack_bonus": 2,
            "damage_count": 1,
            "damage_die": 6,
            "xp_reward": 10,
            "gold_reward": 3,
        }
        data.update(overrides)
        return Monster(**data)

    return factory
