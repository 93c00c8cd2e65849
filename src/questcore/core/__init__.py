"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        QuestCoreError: Base exception for all engine errors.
        CombatError: Invalid inputs to a combat action.
        ValidationError: Input values violating an engine contract.

    Configuration:
        Settings: Main engine settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up engine logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        bound_context: Add context to log entries inside a with block.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from questcore.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from questcore.core.exceptions import (
    CombatError,
    ConfigurationError,
    ContentError,
    DiceRollError,
    GameEngineError,
    InvalidGameStateError,
    QuestCoreError,
    TurnManagementError,
    ValidationError,
)
from questcore.core.logging import (
    bind_context,
    bound_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    unbind_context,
)


__all__ = [
    # Config
    "GameSettings",
    "Settings",
    "clear_settings_cache",
    "get_settings",
    # Exceptions
    "CombatError",
    "ConfigurationError",
    "ContentError",
    "DiceRollError",
    "GameEngineError",
    "InvalidGameStateError",
    "QuestCoreError",
    "TurnManagementError",
    "ValidationError",
    # Logging
    "bind_context",
    "bound_context",
    "clear_context",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "unbind_context",
]
