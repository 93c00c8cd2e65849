"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from questcore.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from questcore.core.exceptions import ConfigurationError


class TestGameSettings:
    """Tests for GameSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default rule values."""
        monkeypatch.chdir(tmp_path)

        settings = GameSettings()

        assert settings.rng_seed is None
        assert settings.defend_ac_bonus == 2
        assert settings.short_rests_per_long_rest == 2
        assert settings.monster_defend_chance == pytest.approx(0.08)
        assert settings.battle_log_size == 10
        assert settings.flee_dc == 10

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from QUESTCORE_GAME_ variables."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("QUESTCORE_GAME_FLEE_DC", "12")
        monkeypatch.setenv("QUESTCORE_GAME_RNG_SEED", "5")

        settings = GameSettings()

        assert settings.flee_dc == 12
        assert settings.rng_seed == 5

    def test_bounds(self) -> None:
        """Test out-of-range values are rejected."""
        with pytest.raises(ValueError):
            GameSettings(monster_defend_chance=1.5)


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "questcore"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.is_production is True
        assert isinstance(settings.game, GameSettings)

    def test_env_vars(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test nested game settings pick up their own prefix."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.game.defend_ac_bonus == 3
        assert settings.game.rng_seed == 99

    def test_debug_with_json_logs(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Debug mode cannot be combined with JSON logs."""
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            Settings(debug=True, json_logs=True)

        assert exc_info.value.details["config_key"] == "json_logs"


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)

        assert get_settings() is get_settings()

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_env_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Invalid values surface as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("QUESTCORE_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ConfigurationError, match="Failed to load engine settings"):
            get_settings()
