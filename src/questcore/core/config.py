"""Configuration management for the questcore engine.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file, then cached for the lifetime of the process.

Example:
    >>> from questcore.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.defend_ac_bonus
    2

Environment Variables:
    QUESTCORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    QUESTCORE_JSON_LOGS: Emit JSON log lines instead of console output
    QUESTCORE_GAME_RNG_SEED: Seed for the default dice roller
    QUESTCORE_GAME_DEFEND_AC_BONUS: AC bonus granted by the defend action
    QUESTCORE_GAME_SHORT_RESTS_PER_LONG_REST: Short rests restored by a long rest
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from questcore.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Tunable rules for combat and rest.

    Attributes:
        rng_seed: Optional seed for the default dice roller.
        defend_ac_bonus: AC bonus granted while defending.
        short_rests_per_long_rest: Short rests available after a long rest.
        monster_defend_chance: Probability a monster defends on its turn.
        battle_log_size: Number of battle messages retained.
        flee_dc: Target number for an escape attempt.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUESTCORE_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rng_seed: int | None = Field(
        default=None,
        description="Seed for the default dice roller",
    )
    defend_ac_bonus: int = Field(
        default=2,
        ge=0,
        le=10,
        description="AC bonus while defending",
    )
    short_rests_per_long_rest: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Short rests restored by a long rest",
    )
    monster_defend_chance: float = Field(
        default=0.08,
        ge=0.0,
        le=1.0,
        description="Chance a monster defends instead of acting",
    )
    battle_log_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Battle messages retained",
    )
    flee_dc: int = Field(
        default=10,
        ge=1,
        le=30,
        description="Target number for fleeing",
    )


class Settings(BaseSettings):
    """Main engine settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Engine logging level.
        json_logs: Emit JSON-formatted logs.
        log_file: Optional file that mirrors log output.
        game: Combat and rest rules.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUESTCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="questcore",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    game: GameSettings = Field(default_factory=GameSettings)

    @model_validator(mode="after")
    def validate_debug_logging(self) -> "Settings":
        """Reject JSON logs together with debug mode.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If debug mode is combined with JSON logs.
        """
        if self.debug and self.json_logs:
            raise ConfigurationError(
                "debug mode uses console logging and cannot be combined with json_logs",
                config_key="json_logs",
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the engine settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
