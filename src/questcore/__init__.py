"""questcore - turn-based combat and character progression engine.

Rules live in plain functions over pydantic state models. Dice come from
the d20 library through an injectable roller, so every outcome can be
scripted in tests.

Example:
    >>> from questcore import Battle, create_player, award_xp, long_rest
    >>>
    >>> hero = create_player("Ayla", {"strength": 14}, "knight")
    >>> award_xp(hero, 400).pending_levels
    1
    >>> long_rest(hero).level_up.new_level
    2

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 schemas for content, player state and results.
    content: Built-in spells, abilities, items, monsters, talents, classes.
    engine: Dice, combat actions, progression and battles.
"""

from __future__ import annotations

# Core
from questcore.core.config import Settings, get_settings
from questcore.core.exceptions import QuestCoreError
from questcore.core.logging import configure_logging, get_logger

# Content
from questcore.content import ContentRegistry, get_registry

# Models
from questcore.models import (
    CombatResult,
    Monster,
    PlayerState,
    PlayerStats,
)

# Engine
from questcore.engine import (
    Battle,
    DiceRoller,
    award_xp,
    create_player,
    long_rest,
    process_pending_level_ups,
    short_rest,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "QuestCoreError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Content
    "ContentRegistry",
    "get_registry",
    # Models
    "CombatResult",
    "Monster",
    "PlayerState",
    "PlayerStats",
    # Engine
    "Battle",
    "DiceRoller",
    "award_xp",
    "create_player",
    "long_rest",
    "process_pending_level_ups",
    "short_rest",
]
