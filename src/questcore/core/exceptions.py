"""Exception hierarchy for the questcore combat and progression engine.

Only programming errors are raised: missing records, non-numeric modifiers,
bad indices, unsupported dice, illegal state transitions. Ordinary game
rejections such as "Not enough MP!" come back as result records with
``success=False`` and never reach this module.

Every exception carries a ``details`` dict that is rendered into the
message, so a log line or traceback shows the offending value without the
caller formatting it.

Example:
    >>> from questcore.core.exceptions import CombatError
    >>> raise CombatError("player_attack: missing monster", combatant_id="goblin")
    Traceback (most recent call last):
    ...
    questcore.core.exceptions.CombatError: player_attack: missing monster [combatant_id='goblin']
"""

from __future__ import annotations

from typing import Any


def _merge_details(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Merge keyword context into ``details``, skipping unset (None) values."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class QuestCoreError(Exception):
    """Base exception for all questcore errors.

    Attributes:
        message: Human-readable error description.
        details: Extra context, rendered as ``key=value`` pairs.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{rendered}]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Engine
# =============================================================================


class GameEngineError(QuestCoreError):
    """Base exception for combat resolution and progression errors."""


class InvalidGameStateError(GameEngineError):
    """Raised when a state transition violates the game's invariants.

    The level-up tracker raises this when pending level-ups are applied
    from the wrong phase or the pending counter would decrease, and a
    battle raises it when started with a defeated player.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_merge_details(
                details,
                current_state=current_state,
                expected_states=expected_states or None,
            ),
        )


class CombatError(GameEngineError):
    """Raised when a combat action is called with invalid inputs.

    Messages are prefixed with the failing operation, e.g.
    ``"player_attack: missing player or monster"``.

    Args:
        message: Human-readable error description.
        combatant_id: Combatant involved, if known.
        round_number: Battle round at the time of the error.
        details: Extra context.
    """

    def __init__(
        self,
        message: str,
        *,
        combatant_id: str | None = None,
        round_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_merge_details(details, combatant_id=combatant_id, round_number=round_number),
        )


class DiceRollError(GameEngineError):
    """Raised for invalid dice notation, negative counts or unsupported dice."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_details(details, expression=expression))


class TurnManagementError(GameEngineError):
    """Raised when a battle action is taken out of turn or after the battle ended."""


# =============================================================================
# Content, Configuration & Validation
# =============================================================================


class ContentError(QuestCoreError):
    """Raised when a content registry cannot be built or a record is missing.

    Duplicate identifiers and dangling cross references (a class listing a
    spell that does not exist) are reported at registry build time.
    """

    def __init__(
        self,
        message: str,
        *,
        content_id: str | None = None,
        content_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_merge_details(details, content_id=content_id, content_type=content_type),
        )


class ConfigurationError(QuestCoreError):
    """Raised when engine settings cannot be loaded or are inconsistent."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_merge_details(details, config_key=config_key))


class ValidationError(QuestCoreError):
    """Raised when an input value violates an engine contract.

    Negative XP awards, unknown stat or class names and point-buy scores
    outside the cost table all land here.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_merge_details(details, field_name=field_name, invalid_value=invalid_value),
        )


__all__ = [
    "QuestCoreError",
    "GameEngineError",
    "InvalidGameStateError",
    "CombatError",
    "DiceRollError",
    "TurnManagementError",
    "ContentError",
    "ConfigurationError",
    "ValidationError",
]
