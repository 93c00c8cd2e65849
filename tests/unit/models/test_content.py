"""Tests for content definition models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from questcore.models import AbilityDef, ItemDef, MonsterDef, SpellDef, TalentDef
from questcore.models.enums import Ability, ActionKind, ItemType, Restores


class TestActionDefs:
    """Tests for spells and abilities."""

    def test_spell_defaults(self) -> None:
        """Test default spell fields."""
        spell = SpellDef(id="spark", name="Spark", damage_count=1, damage_die=6)

        assert spell.mp_cost == 0
        assert spell.level_required == 1
        assert spell.kind == ActionKind.DAMAGE
        assert not spell.auto_hit
        assert not spell.is_heal
        assert not spell.is_utility

    def test_ability_stat(self) -> None:
        """Abilities default to STR."""
        assert AbilityDef(id="jab", name="Jab").stat == Ability.STR

    def test_unsupported_die(self) -> None:
        """Only supported die sizes are accepted."""
        with pytest.raises(PydanticValidationError):
            SpellDef(id="bad", name="Bad", damage_count=1, damage_die=7)

    def test_level_requirement_bounds(self) -> None:
        """Level requirements stay within 1..20."""
        with pytest.raises(PydanticValidationError):
            SpellDef(id="bad", name="Bad", level_required=21)

    def test_frozen_and_strict(self) -> None:
        """Definitions are immutable and reject unknown fields."""
        spell = SpellDef(id="spark", name="Spark")

        with pytest.raises(PydanticValidationError):
            spell.mp_cost = 3  # type: ignore[misc]
        with pytest.raises(PydanticValidationError):
            SpellDef(id="spark", name="Spark", range=30)  # type: ignore[call-arg]


class TestItemDef:
    """Tests for item flag validation."""

    def test_consumable(self) -> None:
        """Consumables carry what they restore."""
        item = ItemDef(id="tonic", name="Tonic", item_type=ItemType.CONSUMABLE, effect=5, restores=Restores.HP)

        assert item.restores == Restores.HP
        assert not item.is_weapon

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"item_type": ItemType.WEAPON, "restores": Restores.HP},
            {"item_type": ItemType.SHIELD, "light": True},
            {"item_type": ItemType.WEAPON, "light": True, "two_handed": True},
        ],
    )
    def test_invalid_flags(self, kwargs: dict[str, object]) -> None:
        """Impossible flag combinations are rejected."""
        with pytest.raises(PydanticValidationError):
            ItemDef(id="odd", name="Odd", **kwargs)


class TestTalentAndMonsterDefs:
    """Tests for talents and monster templates."""

    def test_talent_class_restriction(self) -> None:
        """Empty restriction means every class."""
        open_talent = TalentDef(id="grit", name="Grit", level_required=2)
        locked = TalentDef(id="fury", name="Fury", level_required=2, class_restriction=("barbarian",))

        assert open_talent.available_to("wizard")
        assert locked.available_to("barbarian")
        assert not locked.available_to("wizard")

    def test_monster_hp_positive(self) -> None:
        """Monster templates need at least 1 HP."""
        with pytest.raises(PydanticValidationError):
            MonsterDef(id="ghost", name="Ghost", hp=0, ac=10, attack_bonus=0, damage_count=1, damage_die=4)
