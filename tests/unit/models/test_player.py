"""Tests for player and battle-time state models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from questcore.core.exceptions import InvalidGameStateError
from questcore.models import (
    CombatResult,
    InitiativeResult,
    LevelUpTracker,
    Monster,
    PlayerState,
    PlayerStats,
)
from questcore.models.enums import Ability, LevelUpPhase


class TestPlayerStats:
    """Tests for ability scores."""

    def test_defaults(self) -> None:
        """All scores default to 10 with a +0 modifier."""
        stats = PlayerStats()

        assert stats.as_dict() == {ability.value: 10 for ability in Ability}
        assert stats.str_mod == 0

    @pytest.mark.parametrize(("score", "modifier"), [(1, -5), (9, -1), (10, 0), (13, 1), (30, 10)])
    def test_modifiers(self, score: int, modifier: int) -> None:
        """Test modifier lookup by ability."""
        stats = PlayerStats(wisdom=score)

        assert stats.wis_mod == modifier
        assert stats.modifier(Ability.WIS) == modifier
        assert stats.modifier("wisdom") == modifier

    def test_score_bounds(self) -> None:
        """Scores outside 1..30 are rejected, also on assignment."""
        with pytest.raises(PydanticValidationError):
            PlayerStats(strength=0)

        stats = PlayerStats()
        with pytest.raises(PydanticValidationError):
            stats.charisma = 31


class TestLevelUpTracker:
    """Tests for the deferred level-up state machine."""

    def test_starts_earning(self) -> None:
        """Test initial state."""
        tracker = LevelUpTracker()

        assert tracker.phase == LevelUpPhase.EARNING
        assert tracker.pending == 0

    def test_record_zero_stays_earning(self) -> None:
        """Recording nothing keeps the EARNING phase."""
        tracker = LevelUpTracker()
        tracker.record(0)

        assert tracker.phase == LevelUpPhase.EARNING

    def test_record_and_apply(self) -> None:
        """EARNING -> PENDING -> APPLIED -> PENDING."""
        tracker = LevelUpTracker()

        tracker.record(1)
        tracker.record(2)
        assert tracker.phase == LevelUpPhase.PENDING

        assert tracker.apply() == 2
        assert tracker.phase == LevelUpPhase.APPLIED
        assert tracker.pending == 0

        tracker.record(1)
        assert tracker.phase == LevelUpPhase.PENDING

    def test_pending_cannot_decrease(self) -> None:
        """The pending counter only grows between applications."""
        tracker = LevelUpTracker()
        tracker.record(2)

        with pytest.raises(InvalidGameStateError):
            tracker.record(1)

    def test_apply_without_pending(self) -> None:
        """Applying with nothing pending is a state error."""
        with pytest.raises(InvalidGameStateError) as exc_info:
            LevelUpTracker().apply()

        assert exc_info.value.details["current_state"] == LevelUpPhase.EARNING


class TestPlayerState:
    """Tests for player pools and bounds."""

    @pytest.fixture
    def player(self) -> PlayerState:
        """A bare level-1 player with 20 HP and 10 MP."""
        return PlayerState(name="Test", class_id="knight", hp=20, max_hp=20, mp=10, max_mp=10)

    def test_take_damage_clamps(self, player: PlayerState) -> None:
        """HP never drops below zero."""
        assert player.take_damage(8) == 8
        assert player.take_damage(50) == 12
        assert player.hp == 0
        assert not player.is_alive
        assert player.take_damage(-3) == 0

    def test_heal_clamps(self, player: PlayerState) -> None:
        """Healing never exceeds max HP."""
        player.take_damage(5)

        assert player.heal(20) == 5
        assert player.hp == 20
        assert player.heal(0) == 0

    def test_mp(self, player: PlayerState) -> None:
        """Spending floors at zero and restoring caps at max."""
        player.spend_mp(15)
        assert player.mp == 0

        assert player.restore_mp(4) == 4
        assert player.restore_mp(40) == 6
        assert player.mp == 10

    def test_grow_pools(self, player: PlayerState) -> None:
        """Growth raises both max and current values."""
        player.take_damage(5)

        player.grow_pools(hp=4, mp=2)

        assert player.max_hp == 24
        assert player.hp == 19
        assert player.max_mp == 12
        assert player.mp == 12

    def test_level_bounds(self, player: PlayerState) -> None:
        """Levels are limited to 1..20."""
        with pytest.raises(PydanticValidationError):
            player.level = 21

    def test_summary(self, player: PlayerState) -> None:
        """Test the compact log view."""
        player.level_ups.record(2)

        summary = player.to_summary()

        assert summary["hp"] == "20/20"
        assert summary["pending_level_ups"] == 2
        assert player.pending_level_ups == 2


class TestBattleRecords:
    """Tests for monsters and result records."""

    def test_monster_from_template(self, goblin: Monster) -> None:
        """A fresh monster starts at full HP."""
        assert goblin.hp == goblin.max_hp == 15
        assert goblin.template_id == "goblin"
        assert goblin.is_alive

    def test_monster_pools(self, goblin: Monster) -> None:
        """Monster damage and healing are clamped."""
        assert goblin.take_damage(20) == 15
        assert goblin.hp == 0
        assert goblin.heal(100) == 15
        assert goblin.hp == 15

    def test_combat_result_failure(self) -> None:
        """Rejected actions carry success=False and nothing else."""
        result = CombatResult.failure("Not enough MP!")

        assert not result.success
        assert not result.hit
        assert result.damage == 0

    def test_results_are_frozen(self) -> None:
        """Result records cannot be modified."""
        result = CombatResult(message="x")

        with pytest.raises(PydanticValidationError):
            result.damage = 5  # type: ignore[misc]

    def test_initiative_ties_go_to_player(self) -> None:
        """Test the tie rule."""
        tie = InitiativeResult(player_roll=8, player_total=10, monster_roll=9, monster_total=10)
        loss = InitiativeResult(player_roll=8, player_total=9, monster_roll=9, monster_total=10)

        assert tie.player_first
        assert not loss.player_first
