"""Player runtime state.

``PlayerState`` is the single mutable record shared by the combat and
progression engines. Combat may only change hp, mp and the equipment
slots; progression owns level, xp, pending level-ups, stats and unlocks.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from questcore.core.constants import (
    MAX_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
)
from questcore.core.exceptions import InvalidGameStateError
from questcore.models.content import ItemDef
from questcore.models.enums import Ability, LevelUpPhase


AbilityScore = Annotated[int, Field(ge=MIN_ABILITY_SCORE, le=MAX_ABILITY_SCORE)]


class StateModel(BaseModel):
    """Base class for mutable runtime records."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )


# =============================================================================
# Ability Scores
# =============================================================================


class PlayerStats(StateModel):
    """The six ability scores and their modifiers."""

    strength: AbilityScore = Field(default=10, description="Physical power")
    dexterity: AbilityScore = Field(default=10, description="Agility and reflexes")
    constitution: AbilityScore = Field(default=10, description="Health and stamina")
    intelligence: AbilityScore = Field(default=10, description="Reasoning and memory")
    wisdom: AbilityScore = Field(default=10, description="Perception and insight")
    charisma: AbilityScore = Field(default=10, description="Force of personality")

    @staticmethod
    def calc_modifier(score: int) -> int:
        """Calculate ability modifier from score."""
        return (score - 10) // 2

    @computed_field(description="Strength modifier")
    @property
    def str_mod(self) -> int:
        return self.calc_modifier(self.strength)

    @computed_field(description="Dexterity modifier")
    @property
    def dex_mod(self) -> int:
        return self.calc_modifier(self.dexterity)

    @computed_field(description="Constitution modifier")
    @property
    def con_mod(self) -> int:
        return self.calc_modifier(self.constitution)

    @computed_field(description="Intelligence modifier")
    @property
    def int_mod(self) -> int:
        return self.calc_modifier(self.intelligence)

    @computed_field(description="Wisdom modifier")
    @property
    def wis_mod(self) -> int:
        return self.calc_modifier(self.wisdom)

    @computed_field(description="Charisma modifier")
    @property
    def cha_mod(self) -> int:
        return self.calc_modifier(self.charisma)

    def score(self, ability: Ability | str) -> int:
        """Get the score for an ability."""
        return getattr(self, Ability(ability).value)

    def modifier(self, ability: Ability | str) -> int:
        """Get the modifier for an ability."""
        return self.calc_modifier(self.score(ability))

    def as_dict(self) -> dict[str, int]:
        """Return the six scores keyed by ability name."""
        return {ability.value: self.score(ability) for ability in Ability}


# =============================================================================
# Level-Up Tracker
# =============================================================================


class LevelUpTracker(StateModel):
    """Deferred level-up state machine.

    EARNING --record(n>0)--> PENDING --record(n)--> PENDING
    PENDING --apply()--> APPLIED --record(n>0)--> PENDING

    The pending counter never decreases except through ``apply``, which
    hands back the number of levels to apply and resets the counter.
    """

    phase: LevelUpPhase = LevelUpPhase.EARNING
    pending: int = Field(default=0, ge=0, le=MAX_CHARACTER_LEVEL)

    def record(self, pending: int) -> None:
        """Record the new total of pending level-ups.

        Args:
            pending: Total pending level-ups after an XP award.

        Raises:
            InvalidGameStateError: If the count would decrease.
        """
        if pending < self.pending:
            raise InvalidGameStateError(
                f"pending level-ups cannot decrease from {self.pending} to {pending}",
                current_state=self.phase,
            )
        self.pending = pending
        if pending > 0:
            self.phase = LevelUpPhase.PENDING

    def apply(self) -> int:
        """Consume all pending level-ups.

        Returns:
            The number of levels to apply.

        Raises:
            InvalidGameStateError: If nothing is pending.
        """
        if self.phase != LevelUpPhase.PENDING:
            raise InvalidGameStateError(
                "no pending level-ups to apply",
                current_state=self.phase,
                expected_states=[LevelUpPhase.PENDING],
            )
        count = self.pending
        self.pending = 0
        self.phase = LevelUpPhase.APPLIED
        return count


# =============================================================================
# Player State
# =============================================================================


class PlayerState(StateModel):
    """Mutable record for the player character.

    Invariants:
        0 <= hp <= max_hp, 0 <= mp <= max_mp and 1 <= level <= 20.
        Use ``take_damage``, ``heal`` and ``restore_mp`` to change pools so
        the bounds hold.
    """

    name: str = Field(min_length=1, description="Character name")
    class_id: str = Field(description="Class identifier")
    level: int = Field(default=MIN_CHARACTER_LEVEL, ge=MIN_CHARACTER_LEVEL, le=MAX_CHARACTER_LEVEL)
    xp: int = Field(default=0, ge=0)
    level_ups: LevelUpTracker = Field(default_factory=LevelUpTracker)
    pending_stat_points: int = Field(default=0, ge=0)

    hp: int = Field(default=10, ge=0)
    max_hp: int = Field(default=10, ge=1)
    mp: int = Field(default=0, ge=0)
    max_mp: int = Field(default=0, ge=0)

    stats: PlayerStats = Field(default_factory=PlayerStats)
    gold: int = Field(default=0, ge=0)
    inventory: list[ItemDef] = Field(default_factory=list)

    equipped_weapon: ItemDef | None = None
    equipped_off_hand: ItemDef | None = None
    equipped_armor: ItemDef | None = None
    equipped_shield: ItemDef | None = None

    known_spells: list[str] = Field(default_factory=list)
    known_abilities: list[str] = Field(default_factory=list)
    known_talents: list[str] = Field(default_factory=list)

    short_rests_remaining: int = Field(default=0, ge=0)

    @computed_field(description="Level-ups earned but not yet applied")
    @property
    def pending_level_ups(self) -> int:
        return self.level_ups.pending

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def missing_hp(self) -> int:
        return self.max_hp - self.hp

    @property
    def missing_mp(self) -> int:
        return self.max_mp - self.mp

    def take_damage(self, amount: int) -> int:
        """Apply damage and return HP actually lost."""
        if amount <= 0:
            return 0
        lost = min(self.hp, amount)
        self.hp -= lost
        return lost

    def heal(self, amount: int) -> int:
        """Restore HP up to max and return HP actually restored."""
        if amount <= 0:
            return 0
        restored = min(amount, self.missing_hp)
        self.hp += restored
        return restored

    def restore_mp(self, amount: int) -> int:
        """Restore MP up to max and return MP actually restored."""
        if amount <= 0:
            return 0
        restored = min(amount, self.missing_mp)
        self.mp += restored
        return restored

    def spend_mp(self, amount: int) -> None:
        self.mp = max(0, self.mp - amount)

    def grow_pools(self, *, hp: int = 0, mp: int = 0) -> None:
        """Raise max HP/MP and current HP/MP by the same amounts."""
        if hp:
            self.max_hp += hp
            self.hp = min(self.max_hp, self.hp + hp)
        if mp:
            self.max_mp += mp
            self.mp = min(self.max_mp, self.mp + mp)

    def to_summary(self) -> dict[str, Any]:
        """Compact view used in log events."""
        return {
            "name": self.name,
            "class_id": self.class_id,
            "level": self.level,
            "hp": f"{self.hp}/{self.max_hp}",
            "mp": f"{self.mp}/{self.max_mp}",
            "pending_level_ups": self.pending_level_ups,
        }


__all__ = [
    "AbilityScore",
    "StateModel",
    "PlayerStats",
    "LevelUpTracker",
    "PlayerState",
]
