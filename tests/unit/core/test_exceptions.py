"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

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


class TestQuestCoreError:
    """Tests for the base QuestCoreError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = QuestCoreError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = QuestCoreError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(QuestCoreError("Test", details={"x": 1}))
        assert "QuestCoreError" in repr_str
        assert "Test" in repr_str


class TestGameEngineExceptions:
    """Tests for game engine exceptions."""

    def test_combat_error(self) -> None:
        """Test CombatError with combat context."""
        exc = CombatError("player_attack: missing monster", combatant_id="goblin", round_number=3)
        assert exc.details["combatant_id"] == "goblin"
        assert exc.details["round_number"] == 3

    def test_dice_roll_error(self) -> None:
        """Test DiceRollError with expression."""
        exc = DiceRollError("Invalid dice", expression="1d0+5")
        assert exc.details["expression"] == "1d0+5"

    def test_invalid_game_state(self) -> None:
        """Test InvalidGameStateError with state context."""
        exc = InvalidGameStateError("bad", current_state="earning", expected_states=["pending"])
        assert exc.details["current_state"] == "earning"
        assert exc.details["expected_states"] == ["pending"]

    @pytest.mark.parametrize(
        "exc_type",
        [CombatError, DiceRollError, InvalidGameStateError, TurnManagementError],
    )
    def test_game_engine_inheritance(self, exc_type: type[GameEngineError]) -> None:
        """Test game engine exception inheritance."""
        exc = exc_type("Error")
        assert isinstance(exc, GameEngineError)
        assert isinstance(exc, QuestCoreError)


class TestContentAndValidationExceptions:
    """Tests for content, configuration and validation exceptions."""

    def test_content_error(self) -> None:
        """Test ContentError with the offending record."""
        exc = ContentError("duplicate spell id", content_id="fireBolt", content_type="spell")
        assert exc.details == {"content_id": "fireBolt", "content_type": "spell"}

    def test_configuration_error(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="flee_dc")
        assert exc.details["config_key"] == "flee_dc"

    def test_validation_error(self) -> None:
        """Test ValidationError with field info."""
        exc = ValidationError("Invalid value", field_name="amount", invalid_value=-5)
        assert exc.details["field_name"] == "amount"
        assert exc.details["invalid_value"] == -5

    def test_raise_from(self) -> None:
        """Test that exceptions can be properly chained."""
        original = ValueError("Original error")

        with pytest.raises(ValidationError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise ValidationError("Wrapped error") from e

        assert exc_info.value.__cause__ is original
